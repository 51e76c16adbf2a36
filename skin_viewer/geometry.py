"""Front-view geometry.

All source coordinates below are written for the 128x128 (``HD``) layout and
multiplied by the layout's resolution factor, so one table serves every
format. Each body part is drawn as two layers, a base rectangle and an overlay
rectangle, which share the same destination on the canvas.

Canvas layout (pre-scale units, classic arms)::

    x:  0      8            24     32
        +------+------------+------+   y = 0
        |      |    head    |      |
        |      +------------+      |   y = 16
        | right|   torso    | left |
        | arm  |            | arm  |
        +------+-----+------+------+   y = 40
               |right| left |
               | leg | leg  |
               +-----+------+          y = 64
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Tuple

from pyrsistent import pvector
from pyrsistent.typing import PVector

from skin_viewer.errors import FormatError
from skin_viewer.formats import is_low_res, resolution_factor
from skin_viewer.types import ARM_WIDTH, BodyType, Box, Size, SkinFormat

Point = Tuple[int, int]


class PartName(StrEnum):
    HEAD = "head"
    TORSO = "torso"
    RIGHT_ARM = "right_arm"
    LEFT_ARM = "left_arm"
    RIGHT_LEG = "right_leg"
    LEFT_LEG = "left_leg"


class Layer(StrEnum):
    BASE = "base"
    OVERLAY = "overlay"


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def size(self) -> Size:
        return (self.width, self.height)

    @property
    def box(self) -> Box:
        """Pillow crop box ``(left, upper, right, lower)``."""
        return (self.x, self.y, self.x + self.width, self.y + self.height)


@dataclass(frozen=True)
class PartRegion:
    """One blit: copy ``source`` (texture space) onto ``dest`` (canvas space)."""

    part: PartName
    layer: Layer
    source: Rect
    dest: Rect


@dataclass(frozen=True)
class Layout:
    """Per-call constants of one composition.

    Attributes:
        format: Texture format the layout was derived for.
        body_type: Arm model.
        factor: Resolution factor (1.0 for ``HD``, 0.5 otherwise).
        arm_width: Scaled arm width in pixels.
    """

    format: SkinFormat
    body_type: BodyType
    factor: float
    arm_width: int

    def px(self, value: int) -> int:
        """Scale an ``HD`` coordinate to this layout."""
        return int(value * self.factor)

    @property
    def low_res(self) -> bool:
        return is_low_res(self.format)

    @property
    def canvas_size(self) -> Size:
        width = self.px(16) + self.arm_width * 2
        height = self.px(24) * 2 + self.px(16)
        return (width, height)


def derive_layout(fmt: SkinFormat, body_type: BodyType) -> Layout:
    if fmt == SkinFormat.UNKNOWN:
        raise FormatError()
    factor = resolution_factor(fmt)
    body_type = BodyType.from_tag(body_type)
    return Layout(
        format=fmt,
        body_type=body_type,
        factor=factor,
        arm_width=int(ARM_WIDTH[body_type] * factor),
    )


def layered_regions(
    part: PartName,
    base: Point,
    overlay: Point,
    size: Size,
    dest: Point,
) -> Tuple[PartRegion, PartRegion]:
    """Build the base and overlay blits of one part.

    Both layers copy a ``size`` rectangle and land on the same destination, the
    overlay being drawn second.
    """
    width, height = size
    dest_rect = Rect(dest[0], dest[1], width, height)
    return (
        PartRegion(part, Layer.BASE, Rect(base[0], base[1], width, height), dest_rect),
        PartRegion(
            part, Layer.OVERLAY, Rect(overlay[0], overlay[1], width, height), dest_rect
        ),
    )


def head_regions(layout: Layout) -> Tuple[PartRegion, PartRegion]:
    px = layout.px
    return layered_regions(
        PartName.HEAD,
        base=(px(16), px(16)),
        overlay=(px(80), px(16)),
        size=(px(16), px(16)),
        dest=(layout.arm_width, 0),
    )


def torso_regions(layout: Layout) -> Tuple[PartRegion, PartRegion]:
    px = layout.px
    return layered_regions(
        PartName.TORSO,
        base=(px(40), px(40)),
        overlay=(px(40), px(72)),
        size=(px(16), px(24)),
        dest=(layout.arm_width, px(16)),
    )


def arm_regions(layout: Layout, is_right: bool) -> Tuple[PartRegion, PartRegion]:
    """Arm blits.

    Low-res textures have no left-arm art, so the left arm reuses the right
    arm's source rectangles there.
    """
    px = layout.px
    dest_x = 0 if is_right else px(16) + layout.arm_width
    right_art = is_right or layout.low_res
    if right_art:
        base, overlay = (px(88), px(40)), (px(88), px(72))
    else:
        base, overlay = (px(72), px(104)), (px(104), px(104))
    return layered_regions(
        PartName.RIGHT_ARM if is_right else PartName.LEFT_ARM,
        base=base,
        overlay=overlay,
        size=(layout.arm_width, px(24)),
        dest=(dest_x, px(16)),
    )


def leg_regions(layout: Layout, is_right: bool) -> Tuple[PartRegion, PartRegion]:
    """Leg blits; same right-art fallback as :func:`arm_regions`."""
    px = layout.px
    width = px(8)
    dest_x = layout.arm_width + (0 if is_right else width)
    right_art = is_right or layout.low_res
    if right_art:
        base, overlay = (px(8), px(40)), (px(8), px(72))
    else:
        base, overlay = (px(40), px(104)), (px(8), px(104))
    return layered_regions(
        PartName.RIGHT_LEG if is_right else PartName.LEFT_LEG,
        base=base,
        overlay=overlay,
        size=(width, px(24)),
        dest=(dest_x, px(40)),
    )


def front_view_regions(layout: Layout) -> PVector[PartRegion]:
    """All blits of the front view, in drawing order."""
    return pvector(
        [
            *head_regions(layout),
            *torso_regions(layout),
            *arm_regions(layout, is_right=True),
            *arm_regions(layout, is_right=False),
            *leg_regions(layout, is_right=True),
            *leg_regions(layout, is_right=False),
        ]
    )
