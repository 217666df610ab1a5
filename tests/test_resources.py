import pytest
from PIL import Image as PILImage

from softraster.color import RGBA
from softraster.resources import INVALID_IMAGE_ID, ImageID, ResourceManager


@pytest.fixture
def png_path(tmp_path):
    path = tmp_path / "red.png"
    PILImage.new("RGBA", (3, 2), (255, 0, 0, 255)).save(path)
    return path


def test_invalid_id_gives_placeholder():
    manager = ResourceManager()
    image = manager.image(INVALID_IMAGE_ID)
    assert (image.width, image.height) == (2, 2)
    assert image.data == [RGBA.black(), RGBA.purple(), RGBA.purple(), RGBA.black()]


def test_unknown_id_falls_back_to_placeholder():
    manager = ResourceManager()
    assert manager.image(ImageID(42)) == manager.image(INVALID_IMAGE_ID)


def test_load_image_assigns_first_id(png_path):
    manager = ResourceManager()
    image_id = manager.load_image(png_path)
    assert image_id == ImageID(1)
    image = manager.image(image_id)
    assert (image.width, image.height) == (3, 2)
    assert all(pixel == RGBA(255, 0, 0, 255) for pixel in image.data)


def test_load_same_path_twice_reuses_id(png_path):
    manager = ResourceManager()
    first = manager.load_image(png_path)
    second = manager.load_image(str(png_path))
    assert first == second


def test_different_images_get_distinct_ids(png_path, tmp_path):
    other = tmp_path / "blue.png"
    PILImage.new("RGBA", (1, 1), (0, 0, 255, 255)).save(other)
    manager = ResourceManager()
    first = manager.load_image(png_path)
    second = manager.load_image(other)
    assert first != second
    assert second.value == first.value + 1
    assert manager.image(second).data == [RGBA(0, 0, 255, 255)]


def test_missing_file_returns_none(tmp_path):
    manager = ResourceManager()
    assert manager.load_image(tmp_path / "missing.png") is None


def test_failed_load_does_not_use_up_an_id(png_path, tmp_path):
    manager = ResourceManager()
    assert manager.load_image(tmp_path / "missing.png") is None
    assert manager.load_image(png_path) == ImageID(1)