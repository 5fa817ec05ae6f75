"""
Gradient Rendering
==================

Renders a list of color stops into an RGBA ``PixelBuffer`` in one of three
styles:

- ``basic``: horizontal linear gradient, constant down each column
- ``tilted``: the basic gradient rotated by ``tilt_angle`` degrees
  (counter-clockwise), rendered oversized, rotated and centre-cropped so no
  background shows
- ``noise``: the gradient sharpened into bands and sampled through seeded
  coherent noise

``draw`` validates the options (dimensions, then color stops, then style)
and dispatches to the matching ``render_*`` function. All functions are
pure: each call builds its own gradient, noise field and buffer, so calls
may run concurrently from several threads. Time and memory are
O(width x height); the tilted style works on a square canvas of side
``1.5 x max(width, height)``.
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple, Union

import numpy as np
from PIL import Image

from .errors import EmptyColorStopsError, InvalidDimensionsError, UnknownStyleError
from .gradients import build_gradient, sharpen
from .noise import new_field
from .pixel_buffer import PixelBuffer
from .types.color_types import RGBATuple

logger = logging.getLogger(__name__)

TILT_OVERSIZE = 1.5
TILT_FILL: RGBATuple = (0, 0, 0, 255)
NOISE_SCALE = 0.02
NOISE_BANDS = 12
NOISE_SMOOTHNESS = 0.2
LARGE_CANVAS_WARNING_PIXELS = 100_000_000


class Style(str, Enum):
    BASIC = "basic"
    TILTED = "tilted"
    NOISE = "noise"


@dataclass(frozen=True)
class RenderOptions:
    """
    Input to a single ``draw`` call.

    Attributes:
        width: Output width in pixels, > 0.
        height: Output height in pixels, > 0.
        colors: Color stops, evenly spaced over the gradient.
        style: "basic", "tilted" or "noise" (or a ``Style`` member).
        tilt_angle: Rotation in degrees, counter-clockwise. Tilted only.
        noise_seed: 64-bit seed for the noise field. Noise only.
    """

    width: int
    height: int
    colors: Tuple[str, ...] = ()
    style: Union[Style, str] = Style.BASIC
    tilt_angle: float = 0.0
    noise_seed: int = 0

    def __post_init__(self) -> None:
        colors = self.colors
        if isinstance(colors, str):
            colors = (colors,)
        object.__setattr__(self, "colors", tuple(colors))


def _is_positive_int(value: object) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool) and value > 0


def _resolve_style(style: object) -> Style:
    try:
        return Style(style)
    except ValueError:
        raise UnknownStyleError(style, [s.value for s in Style]) from None


# =============================================================================
# Basic
# =============================================================================
def render_basic(width: int, height: int, colors: Sequence[str]) -> PixelBuffer:
    """
    Horizontal gradient: column ``x`` takes the color at ``x / width``.

    The last column sits at ``(width - 1) / width``, so the final stop is
    approached but never reached.
    """
    gradient = build_gradient(colors)
    t = np.arange(width, dtype=np.float64) / float(width)
    row = gradient.sample_int(t)                      # (width, 4)
    pixels = np.broadcast_to(row, (height, width, 4))
    return PixelBuffer(np.ascontiguousarray(pixels))


# =============================================================================
# Tilted
# =============================================================================
def tilted_canvas_size(width: int, height: int) -> int:
    """Side of the square canvas rendered before rotation."""
    return int(TILT_OVERSIZE * max(width, height))


def rotate_canvas(canvas: PixelBuffer, angle: float) -> Image.Image:
    """Rotate counter-clockwise about the centre, growing the canvas to fit."""
    return canvas.to_image().rotate(
        angle,
        resample=Image.Resampling.BILINEAR,
        expand=True,
        fillcolor=TILT_FILL,
    )


def crop_center(image: Image.Image, width: int, height: int) -> PixelBuffer:
    """Cut a ``width x height`` window centred on ``image``."""
    left = image.width // 2 - width // 2
    top = image.height // 2 - height // 2
    return PixelBuffer.from_image(image.crop((left, top, left + width, top + height)))


def render_tilted(width: int, height: int, angle: float, colors: Sequence[str]) -> PixelBuffer:
    """
    Basic gradient rotated by ``angle`` degrees.

    The square canvas is 1.5x the larger output dimension, truncated to an
    integer. That covers the crop window at any angle for all but the
    smallest outputs; at 3x3 the truncated 4x4 canvas lets the black fill
    reach the corners.
    """
    size = tilted_canvas_size(width, height)
    if size * size > LARGE_CANVAS_WARNING_PIXELS:
        warnings.warn(
            f"tilted render of {width}x{height} allocates a {size}x{size} canvas",
            ResourceWarning,
            stacklevel=2,
        )
    logger.debug("tilted: %dx%d via %dx%d canvas at %s deg", width, height, size, size, angle)

    canvas = render_basic(size, size, colors)
    rotated = rotate_canvas(canvas, angle)
    return crop_center(rotated, width, height)


# =============================================================================
# Noise
# =============================================================================
def render_noise(width: int, height: int, seed: int, colors: Sequence[str]) -> PixelBuffer:
    """
    Banded gradient looked up through coherent noise.

    Pixel ``(x, y)`` takes the sharpened color at
    ``noise(x * NOISE_SCALE, y * NOISE_SCALE)``.
    """
    gradient = sharpen(build_gradient(colors), NOISE_BANDS, NOISE_SMOOTHNESS)
    field = new_field(seed)

    xs = np.arange(width, dtype=np.float64) * NOISE_SCALE
    ys = np.arange(height, dtype=np.float64) * NOISE_SCALE
    grid_x, grid_y = np.meshgrid(xs, ys)              # (height, width)
    t = field.sample(grid_x, grid_y)
    return PixelBuffer(gradient.sample_int(t))


# =============================================================================
# Dispatch
# =============================================================================
def validate(options: RenderOptions) -> Style:
    """Check options in a fixed order and return the resolved style."""
    if not (_is_positive_int(options.width) and _is_positive_int(options.height)):
        raise InvalidDimensionsError(options.width, options.height)
    if len(options.colors) == 0:
        raise EmptyColorStopsError()
    return _resolve_style(options.style)


def draw(options: Optional[RenderOptions] = None, **kwargs) -> PixelBuffer:
    """
    Render a gradient image.

    Args:
        options: Render options. Alternatively pass the ``RenderOptions``
            fields as keyword arguments.

    Returns:
        PixelBuffer of exactly ``options.width x options.height`` pixels.

    Raises:
        InvalidDimensionsError: width or height is not a positive integer.
        EmptyColorStopsError: no color stops were given.
        UnknownStyleError: style is not "basic", "tilted" or "noise".
        ColorParseError: a color stop could not be parsed.
    """
    if options is None:
        options = RenderOptions(**kwargs)
    elif kwargs:
        raise TypeError("pass either a RenderOptions instance or keyword arguments, not both")

    style = validate(options)
    logger.debug("draw %s %dx%d with %d stops", style.value, options.width, options.height, len(options.colors))

    if style is Style.BASIC:
        return render_basic(options.width, options.height, options.colors)
    if style is Style.TILTED:
        return render_tilted(options.width, options.height, options.tilt_angle, options.colors)
    return render_noise(options.width, options.height, options.noise_seed, options.colors)
