"""Seeded 2-D coherent noise normalized to [0, 1]."""

from __future__ import annotations

import logging
from typing import Union

import numpy as np
from numpy import ndarray as NDArray

logger = logging.getLogger(__name__)

Coordinate = Union[float, NDArray]

_TABLE_SIZE = 256
_SEED_MASK = (1 << 64) - 1

# Eight unit gradient directions.
_DIAG = np.sqrt(0.5)
_GRADIENTS = np.array(
    [
        (1.0, 0.0), (-1.0, 0.0), (0.0, 1.0), (0.0, -1.0),
        (_DIAG, _DIAG), (-_DIAG, _DIAG), (_DIAG, -_DIAG), (-_DIAG, -_DIAG),
    ],
    dtype=np.float64,
)

# With unit gradients the raw value stays within +-sqrt(2)/2.
_RAW_AMPLITUDE = np.sqrt(0.5)


def _fade(t):
    """Perlin fade function: 6t^5 - 15t^4 + 10t^3."""
    return t * t * t * (t * (t * 6 - 15) + 10)


class NoiseField:
    """
    Perlin-style gradient noise over the plane.

    The permutation table is drawn from ``numpy.random.default_rng`` seeded
    with ``seed`` (taken modulo 2**64, so negative 64-bit seeds are valid).
    Identical seeds give numerically identical fields. ``sample`` accepts
    scalars or broadcastable arrays and returns values in [0, 1]; integer
    lattice points always map to 0.5.
    """

    def __init__(self, seed: int = 0) -> None:
        self._seed = int(seed)
        rng = np.random.default_rng(self._seed & _SEED_MASK)
        perm = rng.permutation(_TABLE_SIZE)
        self._perm = np.concatenate([perm, perm])
        logger.debug("noise field created (seed=%d)", self._seed)

    @property
    def seed(self) -> int:
        return self._seed

    def _corner(self, hashed: NDArray, dx: NDArray, dy: NDArray) -> NDArray:
        grad = _GRADIENTS[hashed % len(_GRADIENTS)]
        return grad[..., 0] * dx + grad[..., 1] * dy

    def raw(self, x: Coordinate, y: Coordinate) -> NDArray:
        """Unnormalized noise in [-sqrt(2)/2, sqrt(2)/2]."""
        x, y = np.broadcast_arrays(np.asarray(x, dtype=np.float64), np.asarray(y, dtype=np.float64))

        x0 = np.floor(x)
        y0 = np.floor(y)
        xf = x - x0
        yf = y - y0
        xi = x0.astype(np.int64) & (_TABLE_SIZE - 1)
        yi = y0.astype(np.int64) & (_TABLE_SIZE - 1)

        perm = self._perm
        h00 = perm[perm[xi] + yi]
        h10 = perm[perm[xi + 1] + yi]
        h01 = perm[perm[xi] + yi + 1]
        h11 = perm[perm[xi + 1] + yi + 1]

        n00 = self._corner(h00, xf, yf)
        n10 = self._corner(h10, xf - 1.0, yf)
        n01 = self._corner(h01, xf, yf - 1.0)
        n11 = self._corner(h11, xf - 1.0, yf - 1.0)

        u = _fade(xf)
        v = _fade(yf)
        nx0 = n00 + u * (n10 - n00)
        nx1 = n01 + u * (n11 - n01)
        return nx0 + v * (nx1 - nx0)

    def sample(self, x: Coordinate, y: Coordinate) -> Union[float, NDArray]:
        """Noise at ``(x, y)`` normalized to [0, 1]."""
        value = np.clip((self.raw(x, y) / _RAW_AMPLITUDE + 1.0) / 2.0, 0.0, 1.0)
        if value.ndim == 0:
            return float(value)
        return value

    __call__ = sample


def new_field(seed: int) -> NoiseField:
    """Create a noise field for ``seed``."""
    return NoiseField(seed)
