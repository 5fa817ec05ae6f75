"""Chromagrad: gradient image rendering from color stops."""

import logging

from .colors import (
    ColorBase,
    ColorRGBAINT,
    ColorUnitRGBA,
    RGBA,
    color_convert,
    parse_color,
    parse_colors,
)
from .errors import (
    ChromagradError,
    InvalidOptionsError,
    InvalidDimensionsError,
    EmptyColorStopsError,
    UnknownStyleError,
    ColorParseError,
)
from .gradients import Gradient, LinearGradient, SharpGradient, build_gradient, sharpen
from .noise import NoiseField, new_field
from .pixel_buffer import PixelBuffer
from .renderer import (
    RenderOptions,
    Style,
    draw,
    render_basic,
    render_tilted,
    render_noise,
)
from .types.format_type import FormatType

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # colors
    "ColorBase",
    "ColorRGBAINT",
    "ColorUnitRGBA",
    "RGBA",
    "FormatType",
    "color_convert",
    "parse_color",
    "parse_colors",
    # errors
    "ChromagradError",
    "InvalidOptionsError",
    "InvalidDimensionsError",
    "EmptyColorStopsError",
    "UnknownStyleError",
    "ColorParseError",
    # gradients and noise
    "Gradient",
    "LinearGradient",
    "SharpGradient",
    "build_gradient",
    "sharpen",
    "NoiseField",
    "new_field",
    # rendering
    "PixelBuffer",
    "RenderOptions",
    "Style",
    "draw",
    "render_basic",
    "render_tilted",
    "render_noise",
]
