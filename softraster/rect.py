"""Integer rectangles."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """Integer rectangle; (x, y) is the top left corner.

    Width and height count unit squares, so a 1x1 rectangle is one pixel.
    """

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def empty(self):
        """True when both width and height are zero."""
        return self.width == 0 and self.height == 0