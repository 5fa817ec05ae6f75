"""
Pixel Buffer
============

The render result: an 8-bit RGBA grid of shape ``(height, width, 4)``,
origin top-left, row-major, non-premultiplied alpha. It wraps a
``ColorRGBAINT`` array color, so it shares the color classes' immutability
and clamping.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from numpy import ndarray as NDArray

from .colors.rgb import ColorRGBAINT
from .types.color_types import RGBATuple

if TYPE_CHECKING:
    from PIL import Image


class PixelBuffer:
    """Immutable ``height x width`` RGBA pixel grid."""

    def __init__(self, pixels: NDArray) -> None:
        if not isinstance(pixels, np.ndarray) or pixels.ndim != 3:
            raise ValueError(
                f"PixelBuffer requires a (height, width, 4) array, got {getattr(pixels, 'shape', type(pixels))}"
            )
        color = ColorRGBAINT(pixels)
        data = np.array(color.value, copy=True)  # detach from the caller
        data.setflags(write=False)
        self._pixels = data

    @classmethod
    def from_image(cls, image: "Image.Image") -> "PixelBuffer":
        return cls(np.asarray(image.convert("RGBA"), dtype=np.uint8))

    @property
    def value(self) -> NDArray:
        """Read-only ``(height, width, 4)`` uint8 array."""
        return self._pixels

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    @property
    def size(self) -> tuple:
        """``(width, height)``, Pillow's ordering."""
        return (self.width, self.height)

    def pixel(self, x: int, y: int) -> RGBATuple:
        r, g, b, a = (int(c) for c in self._pixels[y, x])
        return (r, g, b, a)

    def __array__(self, dtype=None, copy=None) -> NDArray:
        """Enable numpy array interface; the pixels are only shared when no copy is asked for."""
        if dtype is not None:
            return self._pixels.astype(dtype)
        if copy:
            return self._pixels.copy()
        return self._pixels

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return bool(np.array_equal(self._pixels, other._pixels))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PixelBuffer(width={self.width}, height={self.height})"

    def to_image(self) -> "Image.Image":
        """Return a Pillow ``RGBA`` image holding a copy of the pixels."""
        from PIL import Image
        return Image.fromarray(np.array(self._pixels, copy=True))
