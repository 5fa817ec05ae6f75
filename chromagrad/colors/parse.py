"""
Color stop parsing.

Stops are read with Pillow's ``ImageColor.getrgb``, which understands
``#rgb``, ``#rgba``, ``#rrggbb``, ``#rrggbbaa``, the ``rgb()``, ``hsl()``
and ``hsv()`` functional forms and the CSS/X11 color names
(case-insensitive).
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from PIL import ImageColor

from ..errors import ColorParseError
from ..types.format_type import FormatType
from .color import color_convert
from .rgb import ColorRGBAINT, ColorUnitRGBA


def parse_color(spec: str, index: Optional[int] = None) -> ColorUnitRGBA:
    """Parse one color stop into a unit-float RGBA color (opaque unless the stop carries alpha)."""
    if not isinstance(spec, str):
        raise ColorParseError(spec, index, "expected a string")
    try:
        channels = ImageColor.getrgb(spec.strip())
    except ValueError as exc:
        raise ColorParseError(spec, index, str(exc)) from exc
    if len(channels) == 3:
        channels = (*channels, 255)
    return color_convert(ColorRGBAINT(channels), to_format=FormatType.FLOAT)  # type: ignore[return-value]


def parse_colors(specs: Sequence[str]) -> List[ColorUnitRGBA]:
    """Parse every stop, failing on the first one that is not a color."""
    return [parse_color(spec, index) for index, spec in enumerate(specs)]
