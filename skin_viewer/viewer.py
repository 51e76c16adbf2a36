"""Load-then-compose entry points.

``generate`` is the asynchronous single-shot operation: it suspends only while
the texture loads (off the event loop, via :func:`asyncio.to_thread`), then
classifies, composes and encodes the portrait. It either returns one data URL
or raises one error:

* :class:`~skin_viewer.errors.LoadError` when the source cannot be fetched or
  decoded.
* :class:`~skin_viewer.errors.FormatError` (``"Invalid skin format."``) when
  the texture size is not a supported format.

There is no retry, no timeout besides the HTTP timeout of the config, and no
cancellation: a caller that loses interest simply ignores the result.
Concurrent calls share nothing mutable; each owns its texture and canvas.

Examples
--------
>>> import asyncio
>>> from skin_viewer import generate
>>> url = asyncio.run(generate("steve.png", "slim"))  # doctest: +SKIP
>>> url[:22]  # doctest: +SKIP
'data:image/png;base64,'
"""

import asyncio
import logging
from typing import Optional, Union

from PIL import Image

from skin_viewer.config import DEFAULT_CONFIG, ViewerConfig
from skin_viewer.loader import load_texture
from skin_viewer.renderer.compose import compose, encode_data_url
from skin_viewer.types import BodyType, TextureSource

logger = logging.getLogger(__name__)

BodyTypeTag = Union[BodyType, str, None]


def _compose(
    texture: Image.Image, body_type: BodyTypeTag, config: ViewerConfig
) -> Image.Image:
    body = BodyType.from_tag(body_type)
    logger.debug("Composing %dx%d texture as %s", texture.width, texture.height, body)
    return compose(texture, body, scale=config.scale)


def render_front_view(
    source: TextureSource,
    body_type: BodyTypeTag = None,
    config: ViewerConfig = DEFAULT_CONFIG,
) -> Image.Image:
    """Synchronous variant of :func:`generate` returning the Pillow image."""
    texture = load_texture(source, timeout=config.http_timeout)
    return _compose(texture, body_type, config)


async def generate(
    source: TextureSource,
    body_type: BodyTypeTag = None,
    config: ViewerConfig = DEFAULT_CONFIG,
) -> str:
    """Render the front view of a skin and encode it as a data URL.

    Args:
        source: Texture source locator (URL, data URL, path, bytes, image...).
        body_type: ``"slim"`` for slim arms; anything else means classic.
        config: Timeout, output format and upscale settings.

    Returns:
        The encoded portrait, e.g. ``"data:image/png;base64,..."``.
    """
    texture = await asyncio.to_thread(load_texture, source, config.http_timeout)
    image = _compose(texture, body_type, config)
    return encode_data_url(image, config.image_format)


class SkinViewer:
    config: ViewerConfig

    def __init__(self, config: Optional[ViewerConfig] = None):
        self.config = config or DEFAULT_CONFIG

    async def generate(self, source: TextureSource, body_type: BodyTypeTag = None) -> str:
        return await generate(source, body_type, config=self.config)

    def render(self, source: TextureSource, body_type: BodyTypeTag = None) -> Image.Image:
        return render_front_view(source, body_type, config=self.config)
