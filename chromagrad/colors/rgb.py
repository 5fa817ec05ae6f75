from typing import ClassVar, Tuple
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import ColorBase, WithAlpha, build_registry


class ColorRGBAINT(ColorBase, WithAlpha):
    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorSpace] = "rgba"
    maxima: ClassVar[Tuple[int, int, int, int]] = (255, 255, 255, 255)
    format_type: ClassVar[FormatType] = FormatType.INT


class ColorUnitRGBA(ColorBase, WithAlpha):
    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorSpace] = "rgba"
    maxima: ClassVar[Tuple[float, float, float, float]] = (1.0, 1.0, 1.0, 1.0)
    format_type: ClassVar[FormatType] = FormatType.FLOAT


RGBA = ColorRGBAINT


rgba_format_to_class = build_registry(
    ColorRGBAINT,
    ColorUnitRGBA,
)
