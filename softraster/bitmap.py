"""Pixel buffer that the renderer draws into."""

from dataclasses import dataclass, replace

from softraster.mathutil import lerp


@dataclass(frozen=True)
class Pixel:
    """A pixel stored in BGR order with a padding byte."""

    b: int = 0
    g: int = 0
    r: int = 0
    padding: int = 0

    @classmethod
    def from_rgb(cls, color):
        """Take the colour channels of an RGBA value, dropping alpha."""
        return cls(b=color.b, g=color.g, r=color.r)

    def lerp(self, rhs, t):
        """Interpolate the colour channels towards ``rhs``."""
        return Pixel(
            b=int(lerp(self.b, rhs.b, t)),
            g=int(lerp(self.g, rhs.g, t)),
            r=int(lerp(self.r, rhs.r, t)),
        )


class Bitmap:
    """A width-by-height grid of pixels, stored row by row."""

    def __init__(self):
        self._width = 0
        self._height = 0
        self._data = []

    @classmethod
    def with_size(cls, width, height):
        """Create a bitmap of the given size; negative sizes become zero."""
        bitmap = cls()
        bitmap.resize(width, height)
        return bitmap

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    @property
    def pixels(self):
        """All pixels, row by row."""
        return tuple(self._data)

    def clear(self, color):
        """Set every pixel to ``color``."""
        self._data = [color] * len(self._data)

    def resize(self, width, height):
        """Change the size, keeping the leading pixels of the buffer."""
        self._width = max(width, 0)
        self._height = max(height, 0)
        size = self._width * self._height
        if size <= len(self._data):
            del self._data[size:]
        else:
            self._data.extend([Pixel()] * (size - len(self._data)))

    def _in_bounds(self, x, y):
        return 0 <= x < self._width and 0 <= y < self._height

    def put(self, x, y, pixel, alpha):
        """Blend ``pixel`` into (x, y) with ``alpha``; outside points are ignored."""
        if not self._in_bounds(x, y):
            return
        index = x + self._width * y
        if alpha == 1.0:
            self._data[index] = pixel
            return
        current = self._data[index]
        self._data[index] = replace(
            current,
            b=int(lerp(current.b, pixel.b, alpha)),
            g=int(lerp(current.g, pixel.g, alpha)),
            r=int(lerp(current.r, pixel.r, alpha)),
        )

    def get(self, x, y):
        """Pixel at (x, y), or a zero pixel when outside the bitmap."""
        if self._in_bounds(x, y):
            return self._data[x + self._width * y]
        return Pixel()

    def empty(self):
        """True when the bitmap holds no pixels."""
        return not self._data