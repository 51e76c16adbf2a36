import numpy as np
import pytest
from PIL import Image

from skin_viewer.errors import FormatError
from skin_viewer.geometry import Layer, PartName, PartRegion, Rect
from skin_viewer.renderer.compose import blit, compose, encode_data_url
from skin_viewer.types import BodyType, SkinFormat
from tests.test_utils import (
    BASE_COLORS,
    HD_CLASSIC_DESTS,
    OVERLAY_COLORS,
    image_from_data_url,
    make_painted_texture,
    pixel,
    rect_center,
    scale_rect,
    solid_texture,
)

TRANSPARENT = (0, 0, 0, 0)


@pytest.mark.parametrize(
    "fmt, body_type, size",
    [
        (SkinFormat.HD, BodyType.CLASSIC, (32, 64)),
        (SkinFormat.HD, BodyType.SLIM, (28, 64)),
        (SkinFormat.SD, BodyType.CLASSIC, (16, 32)),
        (SkinFormat.SD, BodyType.SLIM, (14, 32)),
        (SkinFormat.LD, BodyType.CLASSIC, (16, 32)),
        (SkinFormat.LD, BodyType.SLIM, (14, 32)),
    ],
)
def test_output_size(fmt: SkinFormat, body_type: BodyType, size: tuple) -> None:
    image = compose(make_painted_texture(fmt), body_type)
    assert image.mode == "RGBA"
    assert image.size == size


@pytest.mark.parametrize("fmt", [SkinFormat.HD, SkinFormat.SD])
def test_each_part_lands_at_its_destination(fmt: SkinFormat) -> None:
    factor = 1.0 if fmt == SkinFormat.HD else 0.5
    image = compose(make_painted_texture(fmt), BodyType.CLASSIC)
    for part, dest in HD_CLASSIC_DESTS.items():
        x, y, w, h = scale_rect(dest, factor)
        color = BASE_COLORS[part]
        assert pixel(image, x, y) == color, part
        assert pixel(image, x + w - 1, y + h - 1) == color, part
        assert pixel(image, *rect_center((x, y, w, h))) == color, part


def test_overlay_composites_over_base() -> None:
    texture = make_painted_texture(SkinFormat.HD, with_overlays=True)
    image = compose(texture, BodyType.CLASSIC)
    for part, (x, y, w, h) in HD_CLASSIC_DESTS.items():
        # Only the top-left overlay pixel is painted; the rest shows the base.
        assert pixel(image, x, y) == OVERLAY_COLORS[part], part
        assert pixel(image, x + 1, y + 1) == BASE_COLORS[part], part


def test_translucent_overlay_blends() -> None:
    texture = make_painted_texture(SkinFormat.HD)
    texture.paste((255, 255, 255, 128), (80, 16, 96, 32))
    image = compose(texture, BodyType.CLASSIC)
    r, g, b, a = pixel(image, 12, 4)
    base_r, base_g, base_b, _ = BASE_COLORS[PartName.HEAD]
    assert a == 255
    assert base_r <= r <= 255 and base_g < g < 255 and base_b < b < 255


def test_hd_left_limbs_use_left_art() -> None:
    image = compose(make_painted_texture(SkinFormat.HD), BodyType.CLASSIC)
    assert pixel(image, 28, 28) == BASE_COLORS[PartName.LEFT_ARM]
    assert pixel(image, 20, 50) == BASE_COLORS[PartName.LEFT_LEG]


def test_low_res_left_limbs_mirror_right_art() -> None:
    texture = make_painted_texture(SkinFormat.LD, with_overlays=True)
    image = compose(texture, BodyType.CLASSIC)
    # right arm (0..4), left arm (12..16); right leg (4..8), left leg (8..12)
    assert pixel(image, 1, 12) == BASE_COLORS[PartName.RIGHT_ARM]
    assert pixel(image, 13, 12) == BASE_COLORS[PartName.RIGHT_ARM]
    assert pixel(image, 5, 24) == BASE_COLORS[PartName.RIGHT_LEG]
    assert pixel(image, 9, 24) == BASE_COLORS[PartName.RIGHT_LEG]
    # LD only carries a head overlay; the other overlays fall outside the
    # texture and leave the base untouched.
    assert pixel(image, 4, 0) == OVERLAY_COLORS[PartName.HEAD]
    assert pixel(image, 4, 8) == BASE_COLORS[PartName.TORSO]
    assert pixel(image, 12, 8) == BASE_COLORS[PartName.RIGHT_ARM]


def test_opaque_rgb_texture_does_not_blacken_missing_overlays() -> None:
    texture = make_painted_texture(SkinFormat.LD).convert("RGB")
    image = compose(texture, BodyType.CLASSIC)
    assert pixel(image, 4, 8) == BASE_COLORS[PartName.TORSO]


def test_slim_layout_pixels() -> None:
    image = compose(make_painted_texture(SkinFormat.HD), BodyType.SLIM)
    assert pixel(image, 0, 16) == BASE_COLORS[PartName.RIGHT_ARM]
    assert pixel(image, 5, 39) == BASE_COLORS[PartName.RIGHT_ARM]
    assert pixel(image, 6, 16) == BASE_COLORS[PartName.TORSO]
    assert pixel(image, 22, 16) == BASE_COLORS[PartName.LEFT_ARM]
    assert pixel(image, 27, 39) == BASE_COLORS[PartName.LEFT_ARM]
    # canvas corners beside the head stay empty
    assert pixel(image, 0, 0) == TRANSPARENT
    assert pixel(image, 27, 63) == TRANSPARENT


@pytest.mark.parametrize("body_type", list(BodyType))
def test_unknown_format_is_rejected(body_type: BodyType) -> None:
    with pytest.raises(FormatError) as excinfo:
        compose(solid_texture((32, 32), (255, 0, 0, 255)), body_type)
    assert str(excinfo.value) == "Invalid skin format."


def test_scale_is_nearest_neighbor() -> None:
    texture = make_painted_texture(SkinFormat.SD, with_overlays=True)
    image = compose(texture, BodyType.CLASSIC, scale=4)
    expected = compose(texture, BodyType.CLASSIC).resize(
        (64, 128), Image.Resampling.NEAREST
    )
    assert image.size == (64, 128)
    assert np.array_equal(np.array(image), np.array(expected))
    assert pixel(image, 16, 0) == OVERLAY_COLORS[PartName.HEAD]
    assert pixel(image, 19, 3) == OVERLAY_COLORS[PartName.HEAD]
    assert pixel(image, 20, 4) == BASE_COLORS[PartName.HEAD]


def test_blit_scales_with_nearest_neighbor() -> None:
    texture = Image.new("RGBA", (4, 4), (0, 0, 0, 0))
    texture.putpixel((0, 0), (255, 0, 0, 255))
    texture.putpixel((1, 0), (0, 255, 0, 255))
    canvas = Image.new("RGBA", (8, 4), TRANSPARENT)
    region = PartRegion(PartName.HEAD, Layer.BASE, Rect(0, 0, 2, 1), Rect(0, 0, 8, 4))
    blit(canvas, texture, region)
    assert pixel(canvas, 0, 0) == (255, 0, 0, 255)
    assert pixel(canvas, 3, 3) == (255, 0, 0, 255)
    assert pixel(canvas, 4, 0) == (0, 255, 0, 255)
    assert pixel(canvas, 7, 3) == (0, 255, 0, 255)


def test_encode_data_url() -> None:
    image = compose(make_painted_texture(SkinFormat.HD), BodyType.SLIM)
    url = encode_data_url(image)
    assert url.startswith("data:image/png;base64,")
    decoded = image_from_data_url(url)
    assert decoded.size == (28, 64)
    assert np.array_equal(np.array(decoded), np.array(image))


@pytest.mark.parametrize("image_format", ["JPEG", "NOPE"])
def test_encode_rejects_formats_without_alpha(image_format: str) -> None:
    image = compose(make_painted_texture(SkinFormat.SD))
    with pytest.raises(ValueError, match="Cannot encode"):
        encode_data_url(image, image_format)


@pytest.mark.parametrize("tag, width", [("default", 32), ("", 32), ("slim", 28)])
def test_compose_accepts_body_type_tags(tag: str, width: int) -> None:
    image = compose(make_painted_texture(SkinFormat.HD), tag)  # type: ignore[arg-type]
    assert image.size == (width, 64)
