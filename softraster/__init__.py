"""Software rasterizer into an in-memory bitmap, with input, timing, command and logging helpers."""

__version__ = "0.1.0"

__all__ = [
    "bitmap",
    "button",
    "color",
    "commands",
    "delta_timer",
    "image",
    "keyboard",
    "logs",
    "mathutil",
    "moving_average",
    "process",
    "rect",
    "renderer",
    "resources",
    "vec2",
]