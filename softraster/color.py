"""RGBA colours with 8-bit channels."""

from dataclasses import dataclass

from softraster.mathutil import clamp, lerp, round_half_away


@dataclass(frozen=True)
class RGBA:
    """A colour with red, green, blue and alpha channels in 0..255."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    @classmethod
    def white(cls):
        return cls(255, 255, 255, 255)

    @classmethod
    def black(cls):
        return cls(0, 0, 0, 255)

    @classmethod
    def red(cls):
        return cls(255, 0, 0, 255)

    @classmethod
    def green(cls):
        return cls(0, 255, 0, 255)

    @classmethod
    def blue(cls):
        return cls(0, 0, 255, 255)

    @classmethod
    def purple(cls):
        return cls(255, 0, 255, 255)

    @staticmethod
    def lerp(start, end, t):
        """Interpolate each channel, truncating the result."""
        return RGBA(
            int(lerp(start.r, end.r, t)),
            int(lerp(start.g, end.g, t)),
            int(lerp(start.b, end.b, t)),
            int(lerp(start.a, end.a, t)),
        )

    def __bool__(self):
        # A fully transparent colour can't be seen, so it counts as false.
        return self.a > 0

    def __add__(self, rhs):
        if not isinstance(rhs, RGBA):
            return NotImplemented
        return RGBA(
            min(self.r + rhs.r, 255),
            min(self.g + rhs.g, 255),
            min(self.b + rhs.b, 255),
            min(self.a + rhs.a, 255),
        )

    def __rmul__(self, t):
        if not isinstance(t, (int, float)):
            return NotImplemented
        t = clamp(float(t), 0.0, 1.0)
        return RGBA(
            round_half_away(t * self.r),
            round_half_away(t * self.g),
            round_half_away(t * self.b),
            round_half_away(t * self.a),
        )

    def __mul__(self, rhs):
        if not isinstance(rhs, RGBA):
            return NotImplemented
        white = RGBA.white()
        if rhs == white:
            return self
        if self == white:
            return rhs
        # Normalised multiplication keeps white as the identity.
        return RGBA(
            (255 * self.r * rhs.r) // (255 * 255),
            (255 * self.g * rhs.g) // (255 * 255),
            (255 * self.b * rhs.b) // (255 * 255),
            (255 * self.a * rhs.a) // (255 * 255),
        )