"""
Chromagrad Color Classes
========================

Immutable RGBA color classes holding either a single color (tuple) or a
color array (numpy), in integer (0-255) or unit float (0.0-1.0) format.

Features
--------
- Immutable color instances (frozen after initialization)
- Scalar colors and array colors sharing one class
- Automatic dtype validation and enforcement
- Value clamping to valid ranges
- Format conversion (INT <-> FLOAT)
- Color stop parsing (hex, functional notation, CSS names)

Usage
-----
>>> from chromagrad.colors import RGBA, parse_color
>>> from chromagrad.types import FormatType
>>> red = parse_color("#ff0000")
>>> red.value
(1.0, 0.0, 0.0, 1.0)
>>> red.convert(to_format=FormatType.INT).value
(255, 0, 0, 255)
>>> RGBA((255, 128, 0, 300)).value  # clamped
(255, 128, 0, 255)
"""

from .color_base import ColorBase
from .rgb import (
    ColorRGBAINT,
    ColorUnitRGBA,
    RGBA,
    rgba_format_to_class,
)
from .color import color_convert, get_color_class
from .parse import parse_color, parse_colors

__all__ = [
    "ColorBase",
    "ColorRGBAINT",
    "ColorUnitRGBA",
    "RGBA",
    "rgba_format_to_class",
    "color_convert",
    "get_color_class",
    "parse_color",
    "parse_colors",
]
