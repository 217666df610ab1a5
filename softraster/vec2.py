"""Two-dimensional float and integer vectors."""

from dataclasses import dataclass

from softraster.mathutil import lerp as _lerp
from softraster.mathutil import round_half_away


def _trunc_div(a, b):
    """Integer division that truncates toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


@dataclass(frozen=True)
class Vec2:
    """A 2D vector with float components."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, rhs):
        if not isinstance(rhs, Vec2):
            return NotImplemented
        return Vec2(self.x + rhs.x, self.y + rhs.y)

    def __sub__(self, rhs):
        if not isinstance(rhs, Vec2):
            return NotImplemented
        return Vec2(self.x - rhs.x, self.y - rhs.y)

    def __mul__(self, rhs):
        if not isinstance(rhs, Vec2):
            return NotImplemented
        return Vec2(self.x * rhs.x, self.y * rhs.y)

    def __rmul__(self, lhs):
        if not isinstance(lhs, (int, float)):
            return NotImplemented
        return Vec2(lhs * self.x, lhs * self.y)

    def __truediv__(self, rhs):
        if isinstance(rhs, Vec2):
            return Vec2(self.x / rhs.x, self.y / rhs.y)
        if isinstance(rhs, (int, float)):
            return Vec2(self.x / rhs, self.y / rhs)
        return NotImplemented

    @staticmethod
    def lerp(lhs, rhs, t):
        """Interpolate component-wise between two vectors."""
        return Vec2(_lerp(lhs.x, rhs.x, t), _lerp(lhs.y, rhs.y, t))


@dataclass(frozen=True)
class IVec2:
    """A 2D vector with integer components."""

    x: int = 0
    y: int = 0

    @classmethod
    def from_vec2(cls, vec):
        """Round a float vector to the nearest integer vector."""
        return cls(round_half_away(vec.x), round_half_away(vec.y))

    def __add__(self, rhs):
        if not isinstance(rhs, IVec2):
            return NotImplemented
        return IVec2(self.x + rhs.x, self.y + rhs.y)

    def __sub__(self, rhs):
        if not isinstance(rhs, IVec2):
            return NotImplemented
        return IVec2(self.x - rhs.x, self.y - rhs.y)

    def __mul__(self, rhs):
        if not isinstance(rhs, IVec2):
            return NotImplemented
        return IVec2(self.x * rhs.x, self.y * rhs.y)

    def __rmul__(self, lhs):
        if not isinstance(lhs, int):
            return NotImplemented
        return IVec2(lhs * self.x, lhs * self.y)

    def __truediv__(self, rhs):
        if isinstance(rhs, IVec2):
            return IVec2(_trunc_div(self.x, rhs.x), _trunc_div(self.y, rhs.y))
        if isinstance(rhs, int):
            return IVec2(_trunc_div(self.x, rhs), _trunc_div(self.y, rhs))
        return NotImplemented

    @staticmethod
    def lerp(lhs, rhs, t):
        """Interpolate between two integer vectors, rounding the result."""
        return IVec2(
            round_half_away(_lerp(float(lhs.x), float(rhs.x), t)),
            round_half_away(_lerp(float(lhs.y), float(rhs.y), t)),
        )