from dataclasses import dataclass

from skin_viewer.renderer.compose import ENCODE_FORMATS


@dataclass(frozen=True)
class ViewerConfig:
    """Settings shared by every composition call.

    Attributes:
        http_timeout: Seconds allowed for fetching an ``http(s)`` texture.
        image_format: Pillow format name used for the encoded result; must
            be able to store RGBA (see ``ENCODE_FORMATS``).
        scale: Integer upscale applied to the finished portrait.
    """

    http_timeout: float = 10.0
    image_format: str = "PNG"
    scale: int = 1

    def __post_init__(self) -> None:
        if self.http_timeout <= 0:
            raise ValueError(f"http_timeout must be positive, got {self.http_timeout}")
        if self.scale < 1:
            raise ValueError(f"scale must be >= 1, got {self.scale}")
        if str(self.image_format).upper() not in ENCODE_FORMATS:
            raise ValueError(
                f"image_format must be one of {', '.join(ENCODE_FORMATS)}, "
                f"got {self.image_format!r}"
            )


DEFAULT_CONFIG = ViewerConfig()
