from __future__ import annotations
from .color_base import ColorBase, rescale_channels
from .rgb import rgba_format_to_class
from ..types.format_type import FormatType


def color_convert(self: ColorBase, to_format: FormatType | None = None) -> ColorBase:
    """
    Convert this color to a different format.

    Args:
        to_format: Target format type (INT, FLOAT). Defaults to current format.

    Returns:
        New ColorBase instance in the target format
    """
    to_format = to_format or self.format_type
    value = rescale_channels(self.value, self.format_type, to_format)
    cls = get_color_class(self.mode, to_format)
    return cls(value)

ColorBase.convert = color_convert


def get_color_class(color_space: str, format_type: FormatType):
    color_class = rgba_format_to_class.get((color_space, format_type))
    if color_class is None:
        raise ValueError(
            f"Unsupported color space/format combination: {color_space}/{format_type}"
        )
    return color_class
