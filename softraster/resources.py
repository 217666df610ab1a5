"""Loading and lookup of images by numeric id."""

import logging
from dataclasses import dataclass
from pathlib import Path

from softraster.color import RGBA
from softraster.image import Image

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImageID:
    """Handle to an image held by a ResourceManager."""

    value: int = 0


INVALID_IMAGE_ID = ImageID(0)


def _missing_image():
    """A 2x2 black and purple checker shown in place of unknown images."""
    black, purple = RGBA.black(), RGBA.purple()
    return Image(width=2, height=2, data=[black, purple, purple, black])


class ResourceManager:
    """Owns loaded images and hands out ids for them."""

    def __init__(self):
        self._next_image_id = 1
        self._image_ids = {}
        self._images = {INVALID_IMAGE_ID.value: _missing_image()}

    def load_image(self, filepath):
        """Load an image once per path; return its id, or None if it can't be read."""
        key = Path(filepath)
        if key in self._image_ids:
            return ImageID(self._image_ids[key])

        image = Image.from_path(key)
        if image is None:
            return None

        image_id = ImageID(self._next_image_id)
        self._next_image_id += 1
        self._images[image_id.value] = image
        self._image_ids[key] = image_id.value
        return image_id

    def image(self, image_id):
        """The image for ``image_id``; unknown ids give the placeholder image."""
        image = self._images.get(image_id.value)
        if image is None:
            _log.error("Trying to access non-existing image using id %d", image_id.value)
            return self._images[INVALID_IMAGE_ID.value]
        return image