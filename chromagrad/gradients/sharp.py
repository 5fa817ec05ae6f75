from __future__ import annotations

import logging

import numpy as np
from numpy import ndarray as NDArray

from .base import Gradient, UnitInput, clamp_unit

logger = logging.getLogger(__name__)


class SharpGradient(Gradient):
    """
    Banded view of another gradient.

    [0, 1] is cut into ``bands`` equal segments and every position is snapped
    to the midpoint of its segment before the wrapped gradient is sampled.
    ``smoothness`` (0-1, in band widths) opens a transition zone centred on
    each interior boundary; inside it the snapped position slides linearly
    from one midpoint to the next, so neighbouring bands blend instead of
    stepping.
    """

    def __init__(self, base: Gradient, bands: int, smoothness: float = 0.0) -> None:
        if isinstance(bands, bool) or not isinstance(bands, (int, np.integer)) or bands < 1:
            raise ValueError(f"bands must be a positive integer, got {bands!r}")
        if not 0.0 <= smoothness <= 1.0:
            raise ValueError(f"smoothness must be in [0, 1], got {smoothness!r}")
        self._base = base
        self._bands = int(bands)
        self._smoothness = float(smoothness)

    @property
    def base(self) -> Gradient:
        return self._base

    @property
    def bands(self) -> int:
        return self._bands

    @property
    def smoothness(self) -> float:
        return self._smoothness

    def remap(self, t: UnitInput) -> NDArray:
        """Map positions onto the banded positions fed to the wrapped gradient."""
        n = self._bands
        x = clamp_unit(t) * n
        band = np.clip(np.floor(x), 0, n - 1)
        snapped = (band + 0.5) / n

        half = self._smoothness / 2.0
        if half > 0.0 and n > 1:
            # nearest interior boundary
            boundary = np.clip(np.round(x), 1, n - 1)
            offset = x - boundary
            zone = np.abs(offset) < half
            blended = (boundary - 0.5 + (offset + half) / (2.0 * half)) / n
            snapped = np.where(zone, blended, snapped)
        return snapped

    def sample(self, t: UnitInput) -> NDArray:
        return self._base.sample(self.remap(t))


def sharpen(gradient: Gradient, bands: int, smoothness: float) -> SharpGradient:
    """
    Quantize ``gradient`` into ``bands`` discrete colors.

    Args:
        gradient: Gradient to wrap; it is sampled, never copied.
        bands: Number of equal segments over [0, 1].
        smoothness: Width of the blend zone at band boundaries, in band widths.

    Returns:
        SharpGradient decorating ``gradient``.
    """
    logger.debug("sharpening gradient into %d bands (smoothness=%s)", bands, smoothness)
    return SharpGradient(gradient, bands, smoothness)
