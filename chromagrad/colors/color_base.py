from __future__ import annotations
from typing import Any, Callable, ClassVar, Tuple, cast, Union
from ..types.format_type import (
    FormatType,
    format_classes,
    format_valid_dtypes,
    default_format_dtypes,
    max_channel_value,
)
from ..types.color_types import ColorElement, ColorValue, Scalar, ScalarVector, ColorSpace
from ..utils import get_dimension
from abc import ABC
from numpy import ndarray
import numpy as np


def rescale_channels(value: ColorValue, from_format: FormatType, to_format: FormatType) -> ColorValue:
    """
    Rescale channel values between integer (0-255) and unit float (0-1) formats.

    Tuples stay tuples, arrays stay arrays. Integer output is rounded
    half-to-even by numpy for arrays and by ``round`` for tuples.
    """
    if from_format == to_format:
        return value
    to_max = max_channel_value[to_format]
    from_max = max_channel_value[from_format]
    if isinstance(value, ndarray):
        scaled = value.astype(np.float64) * to_max / from_max
        if to_format == FormatType.INT:
            return np.round(scaled).astype(default_format_dtypes[to_format])
        return scaled.astype(default_format_dtypes[to_format])
    if to_format == FormatType.INT:
        return tuple(round(v * to_max / from_max) for v in cast(ScalarVector, value))
    return tuple(float(v * to_max / from_max) for v in cast(ScalarVector, value))


class ColorBase:
    __slots__ = ('_value',)  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 1
    mode:       ClassVar[ColorSpace]
    maxima:     ClassVar[ColorElement]
    format_type: ClassVar[FormatType]
    _is_frozen: bool = False   # class-level default (instance gets its own slot)
    # attached in color.py
    convert: Callable[..., ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ColorValue) -> None:
        maxima_dim = get_dimension(self.maxima)

        if self.num_channels != maxima_dim:
            raise ValueError(f"{self.mode} expects {self.maxima!r}-shaped maxima")

        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            if value.mode != self.mode:
                raise ValueError(f"cannot build {self.mode} color from {value.mode} color")
            value = rescale_channels(value.value, value.format_type, self.format_type)

        is_array = isinstance(value, ndarray)

        # ---- Handle array input ----
        if is_array:
            arr = cast(ndarray, value)

            # Validate dtype
            valid_types = format_valid_dtypes[self.format_type]
            if not isinstance(arr.dtype.type(0), valid_types):
                raise TypeError(
                    f"{self.mode} with format {self.format_type} expects dtype compatible with {valid_types}, "
                    f"got {arr.dtype}"
                )

            # Validate shape: last dimension should match num_channels
            if arr.ndim == 0 or arr.shape[-1] != self.num_channels:
                raise ValueError(
                    f"{self.mode} expects last dimension to be {self.num_channels}, "
                    f"got shape {arr.shape}"
                )

            # Clamp values to maxima
            arr = np.clip(arr, 0, np.array(self.maxima))

            # Ensure proper dtype
            target_dtype = default_format_dtypes[self.format_type]
            if arr.dtype != target_dtype:
                arr = arr.astype(target_dtype)

            value = arr

        # ---- Handle scalar/tuple input ----
        else:
            value_dim = get_dimension(value)
            if maxima_dim != value_dim:
                raise ValueError(f"{self.mode} expects {self.maxima!r}-shaped value")

            # type enforcement
            value = tuple(
                format_classes[self.format_type](v) for v in cast(Tuple[Any, ...], value)
            )

            # clamp value
            value = tuple(
                max(0, min(v, m)) for v, m in zip(value, cast(Tuple[Scalar, ...], self.maxima))
            )

        # safe assignment; __setattr__ still allows it during init
        self._value = value

        # freeze instance — no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ColorValue:
        return self._value

    @property
    def is_array(self) -> bool:
        """Check if this color contains an array of colors."""
        return isinstance(self._value, ndarray)

    @property
    def shape(self) -> Tuple[int, ...] | None:
        """Return shape of the array, or None if scalar."""
        if isinstance(self._value, ndarray):
            return self._value.shape
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        if (self.mode, self.format_type) != (other.mode, other.format_type):
            return False
        if self.is_array or other.is_array:
            return bool(np.array_equal(np.asarray(self._value), np.asarray(other.value)))
        return self._value == other.value

    def __hash__(self) -> int:
        if self.is_array:
            raise TypeError(f"array-valued {self.__class__.__name__} is unhashable")
        return hash((self.mode, self.format_type, self._value))

    def __repr__(self) -> str:
        if self.is_array:
            return f"{self.__class__.__name__}(shape={self.shape})"
        return f"{self.__class__.__name__}({self._value!r})"


class WithAlpha(ABC):
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Assumes alpha is the *last* channel.

    Note: For array values, alpha operations work on the entire array.
    Use array indexing arr[..., -1] to access alpha channel.
    """

    # Tell static checkers these come from the real subclass (ColorBase)
    num_channels: ClassVar[int]
    value: ColorValue

    alpha_index: ClassVar[int] = -1

    @property
    def alpha(self) -> Union[Scalar, ndarray]:
        """
        Get alpha channel value.

        Returns:
            Scalar if value is tuple/scalar, ndarray if value is array.
        """
        if isinstance(self.value, ndarray):
            return self.value[..., self.alpha_index]
        return cast(Tuple[Scalar, ...], self.value)[self.alpha_index]


def build_registry(*classes: type[ColorBase]):
    return {
        (cls.mode, cls.format_type): cls
        for cls in classes
    }
