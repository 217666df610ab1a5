"""RGBA images loaded from disk and sampled by texture coordinates."""

import os
from dataclasses import dataclass, field

from PIL import Image as _PILImage

from softraster.color import RGBA
from softraster.mathutil import round_half_away


@dataclass
class Image:
    """A width-by-height grid of RGBA colours, stored row by row from the top."""

    width: int = 0
    height: int = 0
    data: list = field(default_factory=list)

    @classmethod
    def from_path(cls, path):
        """Load an image file as RGBA, or return None if it can't be read."""
        try:
            with _PILImage.open(os.fspath(path)) as source:
                rgba = source.convert("RGBA")
                width, height = rgba.size
                raw = rgba.tobytes()
        except (OSError, ValueError):
            return None
        channels = iter(raw)
        data = [RGBA(r, g, b, a) for r, g, b, a in zip(channels, channels, channels, channels)]
        return cls(width=width, height=height, data=data)

    def sample(self, uv):
        """Nearest colour at ``uv``, where (0, 0) is bottom left and (1, 1) top right."""
        x = round_half_away(uv.x * (self.width - 1))
        y = round_half_away((1.0 - uv.y) * (self.height - 1))
        return self.data[x + y * self.width]