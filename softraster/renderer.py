"""Deferred software renderer that rasterises draw commands into a bitmap."""

import math
from dataclasses import dataclass, field, replace

from softraster.bitmap import Pixel
from softraster.color import RGBA
from softraster.mathutil import clamp, lerp, round_half_away
from softraster.rect import Rect
from softraster.vec2 import IVec2, Vec2

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _fdiv(a, b):
    """Float division that yields inf or nan instead of raising on zero."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * (1.0 if math.copysign(1.0, b) > 0 else -1.0)
    return a / b


def _to_int32(value):
    """Round to an int32; values that don't fit map to the int32 minimum."""
    if not math.isfinite(value):
        return _INT32_MIN
    rounded = round_half_away(value)
    if rounded < _INT32_MIN or rounded > _INT32_MAX:
        return _INT32_MIN
    return rounded


def circle_octant_points(radius):
    """Points of a circle of ``radius`` from 90 degrees down to 45 degrees."""
    points = []
    x, y = 0, radius
    while x <= y:
        points.append(IVec2(x, y))
        midpoint_x = x + 1
        midpoint_y = y - 0.5
        if midpoint_x**2 + midpoint_y**2 > radius**2:
            y -= 1
        x += 1
    return points


def half_circle_points(radius):
    """Right-hand end points of the scanlines filling the upper half circle."""
    octant = circle_octant_points(radius)
    if not octant:
        raise ValueError(f"circle radius must not be negative, got {radius}")

    points = [octant[0]]
    prev = octant[0]
    for point in octant:
        if point.y == prev.y:
            points[-1] = point
        else:
            points.append(point)
        prev = point

    prev = IVec2(octant[0].y, octant[0].x)
    points.append(prev)
    for point in octant:
        flipped = IVec2(point.y, point.x)
        if flipped.y != prev.y:
            points.append(flipped)
        prev = flipped
    return points


@dataclass(frozen=True)
class Vertex:
    """A position with a colour and a texture coordinate (bottom left is (0, 0))."""

    pos: IVec2 = field(default_factory=IVec2)
    color: RGBA = field(default_factory=RGBA)
    uv: Vec2 = field(default_factory=Vec2)


@dataclass(frozen=True)
class _ClearScreen:
    color: RGBA


@dataclass(frozen=True)
class _DrawPoint:
    v1: Vertex


@dataclass(frozen=True)
class _DrawLine:
    v1: Vertex
    v2: Vertex


@dataclass(frozen=True)
class _DrawRect:
    rect: Rect
    color: RGBA
    filled: bool


@dataclass(frozen=True)
class _DrawCircle:
    center: IVec2
    radius: int
    color: RGBA
    filled: bool


@dataclass(frozen=True)
class _DrawTriangle:
    v1: Vertex
    v2: Vertex
    v3: Vertex
    filled: bool


@dataclass(frozen=True)
class _DrawImage:
    image_id: object
    rect: Rect
    clip: Rect
    tint: RGBA


def _triangle_area(a, b):
    return abs((a.x * b.y - a.y * b.x) / 2.0)


class Renderer:
    """Queues draw commands and rasterises them on ``render``."""

    def __init__(self):
        self._current_tag = ""
        self._draw_data = []

    def __len__(self):
        return len(self._draw_data)

    @property
    def pending_tags(self):
        """Tags of the queued commands, in order."""
        return tuple(tag for _, tag in self._draw_data)

    def add_tag(self, tag):
        """Tag the next draw command."""
        self._current_tag = tag

    def _push(self, command):
        tag, self._current_tag = self._current_tag, ""
        self._draw_data.append((command, tag))

    def clear_screen(self, color=RGBA(0, 0, 0, 255)):
        self._push(_ClearScreen(color))

    def draw_point(self, v1):
        self._push(_DrawPoint(v1))

    def draw_line(self, v1, v2):
        self._push(_DrawLine(v1, v2))

    def draw_line_between(self, pos1, pos2, color):
        """Draw a single-colour line between two positions."""
        self._push(_DrawLine(Vertex(pos=pos1, color=color), Vertex(pos=pos2, color=color)))

    def draw_rect(self, rect, color):
        self._push(_DrawRect(rect, color, False))

    def draw_rect_fill(self, rect, color):
        self._push(_DrawRect(rect, color, True))

    def draw_circle(self, center, radius, color):
        self._push(_DrawCircle(center, radius, color, False))

    def draw_circle_fill(self, center, radius, color):
        self._push(_DrawCircle(center, radius, color, True))

    def draw_triangle(self, v1, v2, v3):
        self._push(_DrawTriangle(v1, v2, v3, False))

    def draw_triangle_fill(self, v1, v2, v3):
        self._push(_DrawTriangle(v1, v2, v3, True))

    def draw_image(self, image_id, rect, clip=Rect(), tint=RGBA(255, 255, 255, 255)):
        """Draw an image into ``rect``; a non-empty ``clip`` selects part of it."""
        self._push(_DrawImage(image_id, rect, clip, tint))

    def render(self, bitmap, resources):
        """Rasterise all queued commands into ``bitmap`` and empty the queue."""
        for command, _tag in self._draw_data:
            match command:
                case _ClearScreen(color):
                    bitmap.clear(Pixel.from_rgb(color))
                case _DrawPoint(v1):
                    self._put_point(bitmap, v1)
                case _DrawLine(v1, v2):
                    self._put_line(bitmap, v1, v2, None)
                case _DrawRect(rect, color, filled):
                    if filled:
                        self._put_rect_fill(bitmap, rect, color)
                    else:
                        self._put_rect(bitmap, rect, color)
                case _DrawCircle(center, radius, color, filled):
                    if filled:
                        self._put_circle_fill(bitmap, center, radius, color)
                    else:
                        self._put_circle(bitmap, center, radius, color)
                case _DrawTriangle(v1, v2, v3, filled):
                    if filled:
                        self._put_triangle_fill(bitmap, v1, v2, v3)
                    else:
                        self._put_triangle(bitmap, v1, v2, v3)
                case _DrawImage(image_id, rect, clip, tint):
                    image = resources.image(image_id)
                    if not clip.empty():
                        self._put_image_clipped(bitmap, image, rect, clip, tint)
                    else:
                        self._put_image_full(bitmap, image, rect, tint)
        self._draw_data.clear()

    @staticmethod
    def _put_point(bitmap, v1):
        color = v1.color
        pixel = Pixel(b=color.b, g=color.g, r=color.r, padding=color.a)
        bitmap.put(v1.pos.x, v1.pos.y, pixel, color.a / 255.0)

    @staticmethod
    def _put_line(bitmap, v1, v2, image):
        # Bresenham's line algorithm, interpolating colour along the line.
        x1, y1 = v1.pos.x, v1.pos.y
        x2, y2 = v2.pos.x, v2.pos.y
        delta_x = abs(x2 - x1)
        delta_y = -abs(y2 - y1)
        sign_x = 1 if x1 < x2 else -1
        sign_y = 1 if y1 < y2 else -1
        error = delta_x + delta_y

        x, y = x1, y1
        while True:
            if delta_x > 0:
                t = (x - x1) / (x2 - x1)
            elif delta_y < 0:
                t = (y - y1) / (y2 - y1)
            else:
                t = 0.0
            color = RGBA.lerp(v1.color, v2.color, t)
            if image is not None:
                color = image.sample(Vec2.lerp(v1.uv, v2.uv, t)) * color
            bitmap.put(x, y, Pixel.from_rgb(color), color.a / 255.0)

            if 2 * error >= delta_y:
                if x == x2:
                    break
                error += delta_y
                x += sign_x
            if 2 * error <= delta_x:
                if y == y2:
                    break
                error += delta_x
                y += sign_y

    def _put_rect(self, bitmap, rect, color):
        top_left = IVec2(rect.x, rect.y)
        top_right = IVec2(rect.x + rect.width - 1, rect.y)
        bottom_left = IVec2(rect.x, rect.y + rect.height - 1)
        bottom_right = IVec2(rect.x + rect.width - 1, rect.y + rect.height - 1)
        step = IVec2(0, 1)

        edges = [
            (top_left, top_right),
            (bottom_left, bottom_right),
            (top_left + step, bottom_left - step),
            (top_right + step, bottom_right - step),
        ]
        for start, end in edges:
            self._put_line(bitmap, Vertex(pos=start, color=color), Vertex(pos=end, color=color), None)

    @staticmethod
    def _put_rect_fill(bitmap, rect, color):
        pixel = Pixel.from_rgb(color)
        alpha = color.a / 255.0
        for y in range(rect.y, rect.y + rect.height):
            for x in range(rect.x, rect.x + rect.width):
                bitmap.put(x, y, pixel, alpha)

    @staticmethod
    def _put_circle(bitmap, center, radius, color):
        pixel = Pixel.from_rgb(color)
        alpha = color.a / 255.0
        for point in circle_octant_points(radius):
            for dx, dy in (
                (point.x, point.y),
                (point.y, point.x),
                (point.y, -point.x),
                (point.x, -point.y),
                (-point.x, point.y),
                (-point.y, point.x),
                (-point.y, -point.x),
                (-point.x, -point.y),
            ):
                bitmap.put(center.x + dx, center.y + dy, pixel, alpha)

    def _put_circle_fill(self, bitmap, center, radius, color):
        for point in half_circle_points(radius):
            bottom_left = center + IVec2(-point.x, point.y)
            bottom_right = center + IVec2(point.x, point.y)
            self._put_line(
                bitmap, Vertex(pos=bottom_left, color=color), Vertex(pos=bottom_right, color=color), None
            )
            top_left = center + IVec2(-point.x, -point.y)
            top_right = center + IVec2(point.x, -point.y)
            if top_left.y != bottom_left.y:
                self._put_line(
                    bitmap, Vertex(pos=top_left, color=color), Vertex(pos=top_right, color=color), None
                )

    def _put_triangle(self, bitmap, v1, v2, v3):
        self._put_line(bitmap, v1, v2, None)
        self._put_line(bitmap, v1, v3, None)
        self._put_line(bitmap, v2, v3, None)

    def _put_triangle_fill(self, bitmap, v1, v2, v3):
        p1, p2, p3 = v1.pos, v2.pos, v3.pos
        area_total = _triangle_area(p2 - p1, p3 - p1)
        if area_total == 0:
            # A degenerate triangle has no inside; its edges are all there is.
            self._put_triangle(bitmap, v1, v2, v3)
            return

        x_min = min(p1.x, p2.x, p3.x)
        x_max = max(p1.x, p2.x, p3.x)
        y_min = min(p1.y, p2.y, p3.y)
        y_max = max(p1.y, p2.y, p3.y)

        inv_slope = (
            _fdiv(float(p2.x - p1.x), float(p2.y - p1.y)),
            _fdiv(float(p3.x - p1.x), float(p3.y - p1.y)),
            _fdiv(float(p3.x - p2.x), float(p3.y - p2.y)),
        )

        def weighted_color(pos):
            w1 = _triangle_area(p3 - p2, pos - p2) / area_total
            w2 = _triangle_area(p3 - p1, pos - p1) / area_total
            w3 = _triangle_area(p2 - p1, pos - p1) / area_total
            return w1 * v1.color + w2 * v2.color + w3 * v3.color

        for y in range(y_min, y_max + 1):
            xs = [
                _to_int32((y - p1.y) * inv_slope[0] + p1.x),
                _to_int32((y - p1.y) * inv_slope[1] + p1.x),
                _to_int32((y - p2.y) * inv_slope[2] + p2.x),
            ]
            # Keep the two intersections that lie within the triangle's bounds.
            if not x_min <= xs[0] <= x_max:
                xs[0], xs[2] = xs[2], xs[0]
            elif not x_min <= xs[1] <= x_max:
                xs[1], xs[2] = xs[2], xs[1]

            start = IVec2(xs[0], y)
            end = IVec2(xs[1], y)
            self._put_line(
                bitmap,
                Vertex(pos=start, color=weighted_color(start)),
                Vertex(pos=end, color=weighted_color(end)),
                None,
            )

    def _put_image_clipped(self, bitmap, image, rect, clip, tint):
        if clip.empty():
            clip = replace(clip, width=rect.width, height=rect.height)
        uv0 = Vec2(
            clamp(_fdiv(float(clip.x), float(rect.width - 1)), 0.0, 1.0),
            clamp(_fdiv(float(clip.y), float(rect.height)), 0.0, 1.0),
        )
        uv1 = Vec2(
            clamp(_fdiv(float(clip.x + clip.width - 1), float(rect.width - 1)), 0.0, 1.0),
            clamp(_fdiv(float(clip.y + clip.height), float(rect.height)), 0.0, 1.0),
        )
        for y in range(rect.height):
            v = lerp(uv0.y, uv1.y, 1.0 - y / rect.height)
            left = Vertex(pos=IVec2(rect.x, rect.y + y), color=tint, uv=Vec2(uv0.x, v))
            right = Vertex(pos=IVec2(rect.x + rect.width - 1, rect.y + y), color=tint, uv=Vec2(uv1.x, v))
            self._put_line(bitmap, left, right, image)

    @staticmethod
    def _put_image_full(bitmap, image, rect, tint):
        alpha = tint.a / 255.0
        for y_offset in range(rect.height):
            for x_offset in range(rect.width):
                uv = Vec2(x_offset / rect.width, 1.0 - y_offset / rect.height)
                color = image.sample(uv) * tint
                bitmap.put(rect.x + x_offset, rect.y + y_offset, Pixel.from_rgb(color), alpha)