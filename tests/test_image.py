from PIL import Image as PILImage

from softraster.color import RGBA
from softraster.image import Image
from softraster.vec2 import Vec2


def _checker():
    return Image(
        width=2,
        height=2,
        data=[RGBA.black(), RGBA.purple(), RGBA.purple(), RGBA.black()],
    )


def test_sample_top_left_is_first_pixel():
    assert _checker().sample(Vec2(0.0, 1.0)) == RGBA.black()


def test_sample_top_right_is_second_pixel():
    assert _checker().sample(Vec2(1.0, 1.0)) == RGBA.purple()


def test_sample_bottom_left_is_third_pixel():
    assert _checker().sample(Vec2(0.0, 0.0)) == RGBA.purple()


def test_sample_bottom_right_is_last_pixel():
    assert _checker().sample(Vec2(1.0, 0.0)) == RGBA.black()


def test_from_path_round_trips_png(tmp_path):
    path = tmp_path / "img.png"
    source = PILImage.new("RGBA", (3, 2))
    colors = [
        (10, 20, 30, 255),
        (40, 50, 60, 128),
        (70, 80, 90, 0),
        (1, 2, 3, 4),
        (5, 6, 7, 8),
        (9, 10, 11, 12),
    ]
    for index, color in enumerate(colors):
        source.putpixel((index % 3, index // 3), color)
    source.save(path)

    image = Image.from_path(path)

    assert (image.width, image.height) == (3, 2)
    assert image.data == [RGBA(*c) for c in colors]


def test_from_path_converts_rgb_to_opaque(tmp_path):
    path = tmp_path / "rgb.png"
    PILImage.new("RGB", (1, 1), (200, 100, 50)).save(path)

    image = Image.from_path(str(path))

    assert image.data == [RGBA(200, 100, 50, 255)]


def test_from_path_missing_file_returns_none(tmp_path):
    assert Image.from_path(tmp_path / "missing.png") is None


def test_from_path_non_image_returns_none(tmp_path):
    path = tmp_path / "not_image.png"
    path.write_bytes(b"this is not an image")
    assert Image.from_path(path) is None