from .format_type import FormatType
from .color_types import ColorValue, ColorSpace, RGBATuple

__all__ = ["FormatType", "ColorValue", "ColorSpace", "RGBATuple"]
