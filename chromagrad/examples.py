"""Example renders for each style. Each function shows the image and optionally saves it."""

from .renderer import RenderOptions, Style, draw

SUNSET = ("#12c2e9", "#c471ed", "#f64f59")
FOREST = ("darkgreen", "#a8e063", "khaki", "sienna")


def example_basic(output_path=None, show=True):
    """Simple left-to-right gradient through three stops."""
    img = draw(RenderOptions(width=500, height=300, colors=SUNSET, style=Style.BASIC)).to_image()
    if output_path:
        img.save(output_path)
    if show:
        img.show()
    return img


def example_tilted(output_path=None, show=True):
    """The same gradient tilted by 30 degrees."""
    img = draw(
        RenderOptions(width=500, height=300, colors=SUNSET, style=Style.TILTED, tilt_angle=30.0)
    ).to_image()
    if output_path:
        img.save(output_path)
    if show:
        img.show()
    return img


def example_noise(output_path=None, show=True, seed=7):
    """Banded noise pattern in earthy tones."""
    img = draw(
        RenderOptions(width=500, height=500, colors=FOREST, style=Style.NOISE, noise_seed=seed)
    ).to_image()
    if output_path:
        img.save(output_path)
    if show:
        img.show()
    return img
