"""Pure NumPy implementations of the array based filters.

Every function receives an ``H x W x 3`` ``float32`` array in ``[0, 255]`` and
returns a new array of the same shape.  The inputs are never modified and the
results are deterministic, so rendering the same frame twice yields identical
pixels.
"""

from __future__ import annotations

import math

import numpy as np

SEPIA_MATRIX = np.array(
    [
        [0.393, 0.769, 0.189],
        [0.349, 0.686, 0.168],
        [0.272, 0.534, 0.131],
    ],
    dtype=np.float32,
)

# Fixed seed for the crystallize cell layout.  A stable layout keeps the
# slider from reshuffling the cells on every render.
CRYSTALLIZE_SEED = 0x1F2E3D


def sepia(rgb: np.ndarray, intensity: float) -> np.ndarray:
    """Blend *rgb* towards the classic sepia matrix by *intensity*."""

    toned = rgb @ SEPIA_MATRIX.T
    np.clip(toned, 0.0, 255.0, out=toned)
    amount = np.float32(intensity)
    return rgb * (np.float32(1.0) - amount) + toned * amount


def scale_edges(edges: np.ndarray, intensity: float) -> np.ndarray:
    """Scale an edge response by *intensity*."""

    return np.clip(edges * np.float32(intensity), 0.0, 255.0)


def pixellate(rgb: np.ndarray, scale: float) -> np.ndarray:
    """Replace each ``scale`` x ``scale`` block by its average colour.

    Blocks are anchored at the top-left corner; partial blocks along the right
    and bottom edges average only the pixels they cover.
    """

    block = int(round(scale))
    height, width = rgb.shape[:2]
    if block <= 1 or height == 0 or width == 0:
        return rgb.copy()

    row_starts = np.arange(0, height, block)
    col_starts = np.arange(0, width, block)
    sums = np.add.reduceat(np.add.reduceat(rgb, row_starts, axis=0), col_starts, axis=1)
    heights = np.diff(np.append(row_starts, height))
    widths = np.diff(np.append(col_starts, width))
    counts = (heights[:, None] * widths[None, :]).astype(np.float32)
    means = sums / counts[..., None]
    return np.repeat(np.repeat(means, heights, axis=0), widths, axis=1)


def vignette(rgb: np.ndarray, radius: float, intensity: float) -> np.ndarray:
    """Darken the frame towards its corners.

    ``radius`` is the width in pixels of the falloff band measured inwards from
    the corners; ``intensity`` is the darkening applied at the very corner.
    """

    height, width = rgb.shape[:2]
    if radius <= 0.0 or intensity <= 0.0 or height == 0 or width == 0:
        return rgb.copy()

    centre_y = (height - 1) / 2.0
    centre_x = (width - 1) / 2.0
    rows, cols = np.ogrid[0:height, 0:width]
    distance = np.hypot(rows - centre_y, cols - centre_x).astype(np.float32)

    half_diagonal = math.hypot(centre_y, centre_x)
    inner = max(0.0, half_diagonal - radius)
    band = max(half_diagonal - inner, 1e-6)
    falloff = np.clip((distance - inner) / band, 0.0, 1.0)
    # smoothstep keeps the transition free of a visible ring
    falloff = falloff * falloff * (3.0 - 2.0 * falloff)
    factor = np.float32(1.0) - np.float32(intensity) * falloff
    return rgb * factor[..., None]


def crystallize(rgb: np.ndarray, radius: float, seed: int = CRYSTALLIZE_SEED) -> np.ndarray:
    """Flatten *rgb* into Voronoi cells roughly ``radius`` pixels across.

    Seeds sit at a jittered position inside each grid cell; every pixel takes
    the colour found under its nearest seed.  Only the 3 x 3 neighbourhood of
    grid cells needs to be searched because each cell contains exactly one
    seed.
    """

    cell = int(round(radius))
    height, width = rgb.shape[:2]
    if cell <= 1 or height == 0 or width == 0:
        return rgb.copy()

    rows = -(-height // cell)
    cols = -(-width // cell)
    rng = np.random.default_rng(seed)
    jitter = rng.random((rows, cols, 2), dtype=np.float32)
    seed_y = np.minimum((np.arange(rows)[:, None] + jitter[..., 0]) * cell, height - 1)
    seed_x = np.minimum((np.arange(cols)[None, :] + jitter[..., 1]) * cell, width - 1)

    pixel_y = np.arange(height, dtype=np.float32)
    pixel_x = np.arange(width, dtype=np.float32)
    cell_y = np.arange(height) // cell
    cell_x = np.arange(width) // cell

    best = np.full((height, width), np.inf, dtype=np.float32)
    best_row = np.zeros((height, width), dtype=np.intp)
    best_col = np.zeros((height, width), dtype=np.intp)
    for dy in (-1, 0, 1):
        row = np.clip(cell_y + dy, 0, rows - 1)
        for dx in (-1, 0, 1):
            col = np.clip(cell_x + dx, 0, cols - 1)
            sy = seed_y[row[:, None], col[None, :]]
            sx = seed_x[row[:, None], col[None, :]]
            distance = (sy - pixel_y[:, None]) ** 2 + (sx - pixel_x[None, :]) ** 2
            closer = distance < best
            best = np.where(closer, distance, best)
            best_row = np.where(closer, row[:, None], best_row)
            best_col = np.where(closer, col[None, :], best_col)

    palette = rgb[seed_y.astype(np.intp), seed_x.astype(np.intp)]
    return palette[best_row, best_col]


__all__ = [
    "CRYSTALLIZE_SEED",
    "SEPIA_MATRIX",
    "crystallize",
    "pixellate",
    "scale_edges",
    "sepia",
    "vignette",
]
