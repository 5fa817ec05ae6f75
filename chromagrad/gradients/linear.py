from __future__ import annotations

import logging
from typing import List, Sequence

import numpy as np
from numpy import ndarray as NDArray

from ..colors.parse import parse_colors
from ..colors.rgb import ColorUnitRGBA
from ..errors import EmptyColorStopsError
from .base import Gradient, NAN_COLOR, UnitInput, clamp_unit

logger = logging.getLogger(__name__)


class LinearGradient(Gradient):
    """
    Piecewise-linear gradient through evenly spaced color stops.

    Stop ``i`` of ``n`` sits at ``i / (n - 1)``; channels (including alpha)
    are interpolated linearly in sRGB unit floats. A single stop gives a
    constant gradient.
    """

    def __init__(self, stops: Sequence[ColorUnitRGBA]) -> None:
        if len(stops) == 0:
            raise EmptyColorStopsError()
        self._stops = tuple(stops)
        self._table = np.array([stop.value for stop in self._stops], dtype=np.float64)

    @property
    def stops(self) -> tuple:
        return self._stops

    def sample(self, t: UnitInput) -> NDArray:
        u = clamp_unit(t)
        table = self._table
        segments = len(table) - 1

        if segments == 0:
            result = np.broadcast_to(table[0], u.shape + (4,)).copy()
        else:
            scaled = np.nan_to_num(u, nan=0.0) * segments
            left = np.minimum(np.floor(scaled).astype(int), segments - 1)
            frac = (scaled - left)[..., None]
            result = table[left] * (1.0 - frac) + table[left + 1] * frac

        nan_mask = np.isnan(u)
        if np.any(nan_mask):
            result[nan_mask] = NAN_COLOR
        return result.astype(np.float32)


def build_gradient(colors: Sequence[str]) -> LinearGradient:
    """
    Build a continuous gradient from color stop strings.

    Args:
        colors: Color stops in order (hex, functional notation or color names).

    Returns:
        LinearGradient spanning the stops over [0, 1].

    Raises:
        EmptyColorStopsError: if ``colors`` is empty.
        ColorParseError: if any stop cannot be parsed.
    """
    if len(colors) == 0:
        raise EmptyColorStopsError()
    stops: List[ColorUnitRGBA] = parse_colors(colors)
    logger.debug("built gradient with %d stops", len(stops))
    return LinearGradient(stops)
