"""Common type aliases and enumerations.

``SkinFormat`` and ``BodyType`` are the two inputs that drive every geometry
decision in :mod:`skin_viewer.geometry`.
"""

from enum import StrEnum
from os import PathLike
from typing import IO, Optional, Tuple, Union

import numpy as np
from PIL import Image

Box = Tuple[int, int, int, int]
Size = Tuple[int, int]

TextureSource = Union[
    str, bytes, PathLike, IO[bytes], Image.Image, np.ndarray
]


class SkinFormat(StrEnum):
    """Texture resolution classes, keyed by exact (width, height)."""

    LD = "LD"
    SD = "SD"
    HD = "HD"
    UNKNOWN = "UNKNOWN"


class BodyType(StrEnum):
    """Arm model of a skin (``CLASSIC`` is 8px wide, ``SLIM`` 6px)."""

    CLASSIC = "classic"
    SLIM = "slim"

    @classmethod
    def from_tag(cls, tag: Optional[str]) -> "BodyType":
        """Parse a body-type tag; only ``"slim"`` selects the slim model."""
        if isinstance(tag, BodyType):
            return tag
        return cls.SLIM if tag == cls.SLIM.value else cls.CLASSIC


ARM_WIDTH: dict[BodyType, int] = {
    BodyType.CLASSIC: 8,
    BodyType.SLIM: 6,
}
