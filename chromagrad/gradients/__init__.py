from .base import Gradient, clamp_unit, unit_to_int
from .linear import LinearGradient, build_gradient
from .sharp import SharpGradient, sharpen

__all__ = [
    "Gradient",
    "LinearGradient",
    "SharpGradient",
    "build_gradient",
    "sharpen",
    "clamp_unit",
    "unit_to_int",
]
