import numpy as np
import pytest
from chromagrad.gradients import build_gradient, LinearGradient, Gradient
from chromagrad.colors.rgb import ColorRGBAINT
from chromagrad.errors import ColorParseError, EmptyColorStopsError


def test_endpoints_match_first_and_last_stop():
    grad = build_gradient(["#ff0000", "#00ff00", "#0000ff"])
    assert isinstance(grad, LinearGradient)
    assert isinstance(grad, Gradient)
    assert grad(0.0) == ColorRGBAINT((255, 0, 0, 255))
    assert grad(1.0) == ColorRGBAINT((0, 0, 255, 255))


def test_stops_are_evenly_spaced():
    grad = build_gradient(["#ff0000", "#00ff00", "#0000ff"])
    assert np.allclose(grad.sample(0.5), [0.0, 1.0, 0.0, 1.0])
    assert np.allclose(grad.sample(0.25), [0.5, 0.5, 0.0, 1.0])
    assert np.allclose(grad.sample(0.75), [0.0, 0.5, 0.5, 1.0])


def test_sample_vectorized_shape():
    grad = build_gradient(["black", "white"])
    t = np.linspace(0.0, 1.0, 12).reshape(3, 4)
    out = grad.sample(t)
    assert out.shape == (3, 4, 4)
    assert out.dtype == np.float32
    assert np.allclose(out[..., 0], t)
    assert np.allclose(out[..., 3], 1.0)


def test_positions_outside_unit_interval_are_clamped():
    grad = build_gradient(["red", "blue"])
    assert np.array_equal(grad.sample(-0.5), grad.sample(0.0))
    assert np.array_equal(grad.sample(3.0), grad.sample(1.0))


def test_nan_maps_to_opaque_black():
    grad = build_gradient(["red", "blue"])
    out = grad.sample(np.array([0.0, np.nan]))
    assert np.allclose(out[1], [0.0, 0.0, 0.0, 1.0])
    assert np.allclose(out[0], [1.0, 0.0, 0.0, 1.0])


def test_single_stop_is_constant():
    grad = build_gradient(["#336699"])
    assert grad(0.0) == grad(0.5) == grad(1.0)
    assert grad(0.3).value == (0x33, 0x66, 0x99, 255)


def test_alpha_is_interpolated():
    grad = build_gradient(["#00000000", "#000000ff"])
    assert grad.sample(0.5)[3] == pytest.approx(0.5)


def test_colors_samples_evenly():
    grad = build_gradient(["#000000", "#ffffff"])
    colors = grad.colors(3)
    assert [c.value for c in colors] == [(0, 0, 0, 255), (128, 128, 128, 255), (255, 255, 255, 255)]
    with pytest.raises(ValueError):
        grad.colors(0)


def test_empty_stops_rejected():
    with pytest.raises(EmptyColorStopsError):
        build_gradient([])


def test_bad_stop_fails_whole_build():
    with pytest.raises(ColorParseError) as info:
        build_gradient(["red", "nope", "blue"])
    assert info.value.index == 1
