"""Render one image per style and save them as PNG files.

Run directly with:
    python examples/render_styles.py [output_dir]
"""
import sys
from pathlib import Path

from chromagrad import RenderOptions, draw
from chromagrad.examples import example_basic, example_tilted, example_noise


def demonstrate_styles(output_dir: Path) -> None:
    output_dir.mkdir(parents=True, exist_ok=True)
    example_basic(output_dir / "basic.png", show=False)
    example_tilted(output_dir / "tilted.png", show=False)
    example_noise(output_dir / "noise.png", show=False)
    print("Saved basic/tilted/noise renders to", output_dir)


def demonstrate_buffer() -> None:
    # The buffer is a plain (height, width, 4) uint8 grid.
    buffer = draw(RenderOptions(width=8, height=2, colors=("red", "blue")))
    print("Buffer size:", buffer.size)
    print("First row:", [buffer.pixel(x, 0) for x in range(buffer.width)])


if __name__ == "__main__":
    target = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("renders")
    demonstrate_buffer()
    demonstrate_styles(target)
