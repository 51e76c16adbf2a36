"""Front-view portraits of character skin textures.

A skin texture (64x32, 64x64 or 128x128) is classified, and its head, torso,
arms and legs are copied region by region onto a small canvas, each part as a
base layer plus an overlay layer. The result is returned as a data URL.

Typical use::

    import asyncio
    from skin_viewer import generate

    data_url = asyncio.run(generate("https://example.com/skin.png", "slim"))
"""

from skin_viewer.config import DEFAULT_CONFIG, ViewerConfig
from skin_viewer.errors import FormatError, LoadError, SkinViewerError
from skin_viewer.formats import classify
from skin_viewer.types import BodyType, SkinFormat
from skin_viewer.viewer import SkinViewer, generate, render_front_view

__all__ = [
    "DEFAULT_CONFIG",
    "BodyType",
    "FormatError",
    "LoadError",
    "SkinFormat",
    "SkinViewer",
    "SkinViewerError",
    "ViewerConfig",
    "classify",
    "generate",
    "render_front_view",
]
