# softraster

A small software rasterizer. Drawing calls are queued on a `Renderer` and
rasterized into an in-memory `Bitmap` when you call `render`. Lines use
Bresenham's algorithm, colours are interpolated along lines and across
filled triangles, and images can be drawn whole or clipped and tinted.

Alongside the rasterizer are a few pieces a small game loop needs:

- `softraster.vec2`: `Vec2` (float) and `IVec2` (integer) 2D vectors
- `softraster.color`: `RGBA` colours with saturating add, scaling by a
  number in 0..1 and channel multiply (white is the identity)
- `softraster.rect`: integer `Rect`; `empty()` is true when width and
  height are both zero
- `softraster.bitmap`: `Pixel` and `Bitmap`; `put` blends by alpha and
  ignores points outside the bitmap, `get` returns a zero pixel outside it
- `softraster.image`: `Image`, loaded through Pillow and sampled by UV
  coordinates ((0, 0) bottom left, (1, 1) top right)
- `softraster.resources`: `ImageID` and `ResourceManager`, which loads each
  path once and returns a 2x2 black and purple checker for unknown ids
- `softraster.button` and `softraster.keyboard`: per-frame press and
  release state
- `softraster.moving_average` and `softraster.delta_timer`: frame timing
- `softraster.commands`: `Quit`, `ToggleFullscreen`, `SetWindowTitle`,
  `PlaySound`, `AudioID` and `run_commands`
- `softraster.logs`: log lines with date, time, file, line and level
- `softraster.process`: `CommandProcess` for running a command and reading
  its combined output piece by piece
- `softraster.mathutil`: `lerp` and `clamp`

## Install

From a checkout:

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Drawing

```python
from softraster.bitmap import Bitmap
from softraster.color import RGBA
from softraster.rect import Rect
from softraster.renderer import Renderer, Vertex
from softraster.resources import ResourceManager
from softraster.vec2 import IVec2

bitmap = Bitmap.with_size(320, 240)
resources = ResourceManager()
renderer = Renderer()

renderer.clear_screen(RGBA.black())
renderer.draw_line_between(IVec2(10, 10), IVec2(100, 40), RGBA.red())
renderer.draw_rect(Rect(20, 60, 50, 30), RGBA.green())
renderer.draw_circle_fill(IVec2(200, 120), 32, RGBA.blue())
renderer.draw_triangle_fill(
    Vertex(IVec2(40, 200), RGBA.red()),
    Vertex(IVec2(80, 130), RGBA.green()),
    Vertex(IVec2(120, 200), RGBA.blue()),
)

renderer.render(bitmap, resources)
print(bitmap.get(200, 120))
```

The other draw calls are `draw_point`, `draw_line` (two `Vertex` values,
colour interpolated between them), `draw_rect_fill`, `draw_circle` and
`draw_triangle`. Commands run in the order they were queued and the queue
is emptied by `render`; `len(renderer)` is the number still queued.
`add_tag` labels the next draw call, and `pending_tags` lists the labels of
the queued calls.

## Images

```python
image_id = resources.load_image("sprite.png")
if image_id is not None:
    renderer.draw_image(image_id, Rect(0, 0, 64, 64))
```

`load_image` returns `None` when the file can't be read, and the same id
when the same path is loaded again. `draw_image` takes an optional clip
rectangle and tint; an empty clip draws the whole image.

## Input

```python
from softraster.keyboard import Keyboard

keyboard = Keyboard()
keyboard.on_key_event(0x7A, True)
keyboard.update()
assert keyboard.key_was_pressed_now(0x7A)
```

Feed key events as they arrive, then call `update` once per frame. Only the
first event for a key in a frame counts. `key_was_pressed_now` and
`key_was_released_now` are true only in the frame in which the state
changed. `Button` gives the same queries for a single button.

## Timing

`DeltaTimer` keeps a moving average over the last 60 intervals by default.
Call `start()` and `end()` around a frame, or use it as a context manager;
`average_delta()` gives the average in seconds.

## Commands

`run_commands(commands, window, audio)` carries out the commands in order
and returns `True` if one of them was `Quit`. The `window` object must
provide `toggle_fullscreen()` and `set_title(title)`, and `audio` must
provide `play(sound_id)`. An unknown command raises `TypeError`.

## Running a command

```python
from softraster.process import CommandProcess

process = CommandProcess.run("echo hello")
while process.is_running():
    result = process.update()
    for piece in result.output:
        print(piece, end="")
print(result.exit_code)
```

`run` raises `CommandError` when the command can't be started. Each
`update` reads the next piece of output (waiting for it if none has
arrived yet) and sets `exit_code` once the command has ended.

## What it does not do

The package draws only into a `Bitmap` in memory: it opens no window and
puts nothing on screen, and it has no text or font drawing. It plays no
sound; `run_commands` hands window and audio requests to objects you
supply. It reads no mouse or gamepad; keyboard state comes only from the
events you pass to `Keyboard.on_key_event`.