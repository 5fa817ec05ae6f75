from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Union

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import BoundType, bound_type_to_np_function

from ..colors.rgb import ColorRGBAINT
from ..types.format_type import FormatType, default_format_dtypes, max_channel_value

UnitInput = Union[float, NDArray]

# Returned for NaN positions.
NAN_COLOR = np.array([0.0, 0.0, 0.0, 1.0], dtype=np.float32)


def clamp_unit(t: UnitInput) -> NDArray:
    """Clamp positions into [0, 1]; NaN is left in place."""
    return bound_type_to_np_function[BoundType.CLAMP](np.asarray(t, dtype=float), 0.0, 1.0)


def unit_to_int(colors: NDArray) -> NDArray:
    """Quantize unit-float channels to 8-bit integers."""
    scaled = np.round(np.asarray(colors, dtype=float) * max_channel_value[FormatType.INT])
    return np.clip(scaled, 0, 255).astype(default_format_dtypes[FormatType.INT])


class Gradient(ABC):
    """
    A color function over the unit interval.

    Subclasses implement ``sample``, which maps an array of positions to
    unit-float RGBA colors of shape ``t.shape + (4,)``. Positions outside
    [0, 1] are clamped.
    """

    @abstractmethod
    def sample(self, t: UnitInput) -> NDArray:
        ...

    def color_at(self, t: float) -> ColorRGBAINT:
        """Return the color at ``t`` as an 8-bit RGBA color."""
        rgba = unit_to_int(self.sample(float(t)))
        return ColorRGBAINT(tuple(int(c) for c in rgba))

    def __call__(self, t: float) -> ColorRGBAINT:
        return self.color_at(t)

    def sample_int(self, t: UnitInput) -> NDArray:
        """Like ``sample`` but quantized to uint8 channels."""
        return unit_to_int(self.sample(t))

    def colors(self, count: int) -> List[ColorRGBAINT]:
        """Return ``count`` evenly spaced colors from t=0 to t=1."""
        if count <= 0:
            raise ValueError("count must be > 0")
        positions = np.linspace(0.0, 1.0, count)
        return [ColorRGBAINT(tuple(int(c) for c in row)) for row in self.sample_int(positions)]
