"""Texture format classification.

Classification is a pure function of the texture dimensions:

* ``LD`` (64, 32): legacy single-layer layout, no distinct left limbs.
* ``SD`` (64, 64): standard layout with overlay layers and left limbs.
* ``HD`` (128, 128): the same layout at twice the resolution.

Every other size is ``UNKNOWN``, which the compositor rejects.
"""

from typing import Union

import numpy as np
from PIL import Image

from skin_viewer.errors import FormatError
from skin_viewer.types import Size, SkinFormat

FORMAT_SIZES: dict[Size, SkinFormat] = {
    (64, 32): SkinFormat.LD,
    (64, 64): SkinFormat.SD,
    (128, 128): SkinFormat.HD,
}


def texture_size(texture: Union[Image.Image, np.ndarray, Size]) -> Size:
    """Return ``(width, height)`` of an image, pixel array or size tuple."""
    if isinstance(texture, Image.Image):
        return texture.size
    if isinstance(texture, np.ndarray):
        return int(texture.shape[1]), int(texture.shape[0])
    width, height = texture
    return int(width), int(height)


def classify(texture: Union[Image.Image, np.ndarray, Size]) -> SkinFormat:
    return FORMAT_SIZES.get(texture_size(texture), SkinFormat.UNKNOWN)


def resolution_factor(fmt: SkinFormat) -> float:
    if fmt == SkinFormat.UNKNOWN:
        raise FormatError()
    return 1.0 if fmt == SkinFormat.HD else 0.5


def is_low_res(fmt: SkinFormat) -> bool:
    """Low-res textures only carry right-side limb art."""
    return fmt == SkinFormat.LD
