"""
Exceptions raised by chromagrad.

Option validation failures derive from ``InvalidOptionsError`` and color
parsing failures from ``ColorParseError``; both are also ``ValueError``
subclasses so callers that only care about bad input can catch that.
"""

from __future__ import annotations

from typing import Iterable, Optional


class ChromagradError(Exception):
    """Base class for every error raised by chromagrad."""


class InvalidOptionsError(ChromagradError, ValueError):
    """Render options failed validation."""


class InvalidDimensionsError(InvalidOptionsError):
    def __init__(self, width: object, height: object) -> None:
        self.width = width
        self.height = height
        super().__init__(
            f"height and width must be positive integers, got width={width!r}, height={height!r}"
        )


class EmptyColorStopsError(InvalidOptionsError):
    def __init__(self) -> None:
        super().__init__("colors must not be empty")


class UnknownStyleError(InvalidOptionsError):
    def __init__(self, style: object, valid: Iterable[str]) -> None:
        self.style = style
        self.valid = tuple(valid)
        choices = ", ".join(f"'{v}'" for v in self.valid)
        super().__init__(f"style must be one of {choices}, got {style!r}")


class ColorParseError(ChromagradError, ValueError):
    """A color stop string could not be interpreted as a color."""

    def __init__(self, color: object, index: Optional[int] = None, reason: str = "") -> None:
        self.color = color
        self.index = index
        where = f" at position {index}" if index is not None else ""
        detail = f": {reason}" if reason else ""
        super().__init__(f"cannot parse color stop {color!r}{where}{detail}")
