from __future__ import annotations
from typing import Literal, Tuple, Union
from numpy import ndarray

Scalar = int | float
IntVector = Tuple[int, ...]
ScalarVector = Tuple[Scalar, ...]
IntElement = Union[int, IntVector]
FloatElement = Union[float, Tuple[float, ...]]
ColorElement = Union[IntElement, FloatElement]
ColorValue = Union[ColorElement, ndarray]  # Includes array support
ColorSpace = Literal["rgba"]
RGBATuple = Tuple[int, int, int, int]
