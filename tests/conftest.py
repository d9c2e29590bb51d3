import os
import sys
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Allow running the suite from a checkout without installing the package.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Headless test runs have no display server.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


def make_gradient(width: int = 48, height: int = 32) -> Image.Image:
    """Return a deterministic RGB test card with horizontal and vertical ramps."""

    xs = np.linspace(0, 255, width, dtype=np.float32)
    ys = np.linspace(0, 255, height, dtype=np.float32)
    red = np.broadcast_to(xs[None, :], (height, width))
    green = np.broadcast_to(ys[:, None], (height, width))
    blue = (red + green) / 2.0
    pixels = np.stack([red, green, blue], axis=-1).astype(np.uint8)
    return Image.fromarray(pixels)


@pytest.fixture
def gradient_image() -> Image.Image:
    return make_gradient()
