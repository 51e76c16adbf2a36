import base64
import io
from typing import Iterable, Optional

from PIL import Image

from skin_viewer.errors import FormatError
from skin_viewer.formats import classify
from skin_viewer.geometry import Layout, PartRegion, derive_layout, front_view_regions
from skin_viewer.types import BodyType, SkinFormat

TRANSPARENT = (0, 0, 0, 0)

# Formats that keep the alpha channel of the portrait.
ENCODE_FORMATS = ("PNG", "WEBP", "TIFF")


def new_canvas(layout: Layout) -> Image.Image:
    return Image.new("RGBA", layout.canvas_size, TRANSPARENT)


def blit(canvas: Image.Image, texture: Image.Image, region: PartRegion) -> None:
    """
    Copy ``region.source`` of the texture onto ``region.dest`` of the canvas.
    The texture must be RGBA so that source pixels outside it read as
    transparent. The patch is drawn source-over so overlay layers composite on
    top of what is already there.
    """
    patch = texture.crop(region.source.box)
    if patch.size != region.dest.size:
        patch = patch.resize(region.dest.size, Image.Resampling.NEAREST)
    canvas.alpha_composite(patch, (region.dest.x, region.dest.y))


def blit_all(
    canvas: Image.Image, texture: Image.Image, regions: Iterable[PartRegion]
) -> Image.Image:
    for region in regions:
        blit(canvas, texture, region)
    return canvas


def compose(
    texture: Image.Image,
    body_type: BodyType = BodyType.CLASSIC,
    scale: int = 1,
) -> Image.Image:
    """
    Renders the front view of a skin texture as a new RGBA image.
    Raises FormatError when the texture size is not a supported format.
    """
    fmt = classify(texture)
    if fmt == SkinFormat.UNKNOWN:
        raise FormatError()

    if texture.mode != "RGBA":
        texture = texture.convert("RGBA")

    layout = derive_layout(fmt, body_type)
    canvas = blit_all(new_canvas(layout), texture, front_view_regions(layout))
    if scale > 1:
        width, height = canvas.size
        canvas = canvas.resize((width * scale, height * scale), Image.Resampling.NEAREST)
    return canvas


def encode_data_url(image: Image.Image, image_format: Optional[str] = "PNG") -> str:
    fmt = (image_format or "PNG").upper()
    if fmt not in ENCODE_FORMATS:
        raise ValueError(f"Cannot encode RGBA portrait as {image_format!r}")
    buffer = io.BytesIO()
    image.save(buffer, format=fmt)
    payload = base64.b64encode(buffer.getvalue()).decode("ascii")
    mime = Image.MIME.get(fmt, f"image/{fmt.lower()}")
    return f"data:{mime};base64,{payload}"
