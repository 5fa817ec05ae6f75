import numpy as np
import pytest
from chromagrad import (
    RenderOptions,
    Style,
    draw,
    render_basic,
    render_tilted,
    render_noise,
    build_gradient,
    sharpen,
    PixelBuffer,
)
from chromagrad import renderer
from chromagrad.errors import (
    ColorParseError,
    EmptyColorStopsError,
    InvalidDimensionsError,
    InvalidOptionsError,
    UnknownStyleError,
)

RED_BLUE = ("#ff0000", "#0000ff")


# ---------------------------------------------------------------- validation
def test_dimensions_checked_before_colors():
    with pytest.raises(InvalidDimensionsError):
        draw(RenderOptions(width=0, height=0, colors=[]))


@pytest.mark.parametrize("width, height", [(0, 10), (10, 0), (-1, 5), (5, -3), (2.5, 4), (True, 4)])
def test_invalid_dimensions(width, height):
    with pytest.raises(InvalidDimensionsError):
        draw(width=width, height=height, colors=RED_BLUE, style="basic")


def test_colors_checked_before_style():
    with pytest.raises(EmptyColorStopsError):
        draw(width=10, height=10, colors=[], style="spiral")


@pytest.mark.parametrize("style", ["spiral", "Basic", "NOISE", "", None])
def test_unknown_style(style):
    with pytest.raises(UnknownStyleError) as info:
        draw(width=10, height=10, colors=["#000000"], style=style)
    assert "'basic', 'tilted', 'noise'" in str(info.value)
    assert isinstance(info.value, InvalidOptionsError)


@pytest.mark.parametrize("style", ["basic", "tilted", "noise"])
def test_bad_color_propagates_from_every_style(style):
    with pytest.raises(ColorParseError):
        draw(width=8, height=8, colors=["red", "not-a-color"], style=style)


def test_options_and_kwargs_are_exclusive():
    with pytest.raises(TypeError):
        draw(RenderOptions(width=1, height=1, colors=RED_BLUE), width=2)


def test_options_freeze_colors():
    opts = RenderOptions(width=1, height=1, colors=["red", "blue"])
    assert opts.colors == ("red", "blue")
    assert RenderOptions(width=1, height=1, colors="red").colors == ("red",)


# --------------------------------------------------------------------- basic
def test_basic_red_to_blue():
    buf = draw(RenderOptions(width=100, height=50, colors=RED_BLUE, style="basic"))
    assert isinstance(buf, PixelBuffer)
    assert (buf.width, buf.height) == (100, 50)
    assert buf.value.shape == (50, 100, 4)
    assert buf.pixel(0, 0) == (255, 0, 0, 255)

    r, g, b, a = buf.pixel(99, 0)
    assert b < 255 and r > 0
    assert b > 245 and g == 0 and a == 255


def test_basic_columns_are_constant():
    buf = render_basic(37, 13, ["yellow", "purple", "teal"])
    pixels = buf.value
    assert np.all(pixels == pixels[0:1])


def test_basic_column_positions():
    grad = build_gradient(RED_BLUE)
    buf = render_basic(4, 2, RED_BLUE)
    expected = grad.sample_int(np.array([0.0, 0.25, 0.5, 0.75]))
    assert np.array_equal(buf.value[1], expected)


def test_basic_accepts_style_enum():
    a = draw(width=5, height=3, colors=RED_BLUE, style=Style.BASIC)
    b = draw(width=5, height=3, colors=RED_BLUE, style="basic")
    assert a == b


# -------------------------------------------------------------------- tilted
@pytest.mark.parametrize("width, height", [(40, 20), (20, 40), (1, 1), (3, 200)])
def test_tilted_output_size(width, height):
    buf = render_tilted(width, height, 33.0, RED_BLUE)
    assert (buf.width, buf.height) == (width, height)


def test_tilted_zero_is_centre_of_oversized_basic():
    width, height = 40, 20
    size = renderer.tilted_canvas_size(width, height)
    assert size == 60
    canvas = render_basic(size, size, RED_BLUE).value
    left, top = size // 2 - width // 2, size // 2 - height // 2

    buf = draw(width=width, height=height, colors=RED_BLUE, style="tilted", tilt_angle=0.0)
    assert np.array_equal(buf.value, canvas[top:top + height, left:left + width])
    assert np.all(buf.value == buf.value[0:1])


def test_tilted_ninety_turns_columns_into_rows():
    buf = render_tilted(30, 30, 90.0, RED_BLUE).value
    assert np.all(buf == buf[:, 0:1])
    # counter-clockwise: the blue end moves to the top
    assert buf[0, 0, 2] > buf[-1, 0, 2]
    assert buf[0, 0, 0] < buf[-1, 0, 0]


@pytest.mark.parametrize("angle", [15.0, 45.0, 135.0, -60.0, 400.0])
def test_tilted_never_shows_fill(angle):
    buf = render_tilted(64, 24, angle, RED_BLUE).value
    # red->blue never passes through black, so any black pixel would be fill
    assert np.all(buf[..., 3] == 255)
    assert np.all(buf[..., :3].sum(axis=-1) > 100)


def test_tilted_tiny_output_shows_fill_in_corner():
    assert renderer.tilted_canvas_size(3, 3) == 4
    buf = render_tilted(3, 3, 45.0, RED_BLUE)
    assert buf.pixel(2, 2) == renderer.TILT_FILL


def test_tilted_large_canvas_warns(monkeypatch):
    monkeypatch.setattr(renderer, "LARGE_CANVAS_WARNING_PIXELS", 10)
    with pytest.warns(ResourceWarning):
        render_tilted(4, 4, 10.0, RED_BLUE)


# --------------------------------------------------------------------- noise
def test_noise_is_deterministic():
    opts = RenderOptions(width=80, height=60, colors=["navy", "orange", "white"], style="noise", noise_seed=7)
    assert draw(opts) == draw(opts)


def test_noise_seed_changes_image():
    a = render_noise(100, 100, 1, RED_BLUE)
    b = render_noise(100, 100, 2, RED_BLUE)
    assert (a.width, a.height) == (100, 100)
    assert a != b


def test_noise_origin_samples_middle_of_gradient():
    buf = render_noise(5, 5, 123, RED_BLUE)
    expected = sharpen(build_gradient(RED_BLUE), renderer.NOISE_BANDS, renderer.NOISE_SMOOTHNESS).color_at(0.5)
    assert buf.pixel(0, 0) == expected.value


def test_noise_uses_banded_colors():
    buf = render_noise(200, 200, 5, ["#000000", "#ffffff"]).value
    base = build_gradient(["#000000", "#ffffff"])
    banded = sharpen(base, renderer.NOISE_BANDS, 0.0)
    band_colors = {tuple(c) for c in banded.sample_int(np.linspace(0.0, 1.0, 500))}
    # most pixels sit on a pure band color; the rest are boundary blends
    on_band = sum(1 for p in buf.reshape(-1, 4) if tuple(p) in band_colors)
    assert on_band / (200 * 200) > 0.5
