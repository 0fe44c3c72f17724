import math
from collections.abc import Hashable, Mapping

import numpy as np

from consolepic.palette import PALETTE


def nearest_colour(rgb: tuple[int, int, int], palette: Mapping[Hashable, tuple[int, int, int]] = PALETTE):
    """Return the palette key closest to ``rgb`` by squared RGB distance.

    Entries are tried in palette order. An exact match returns at once, and a
    later entry at the same distance never replaces an earlier one.
    """
    r, g, b = rgb[:3]
    best = None
    best_dist = math.inf
    for key, (pr, pg, pb) in palette.items():
        dist = (pr - r) ** 2 + (pg - g) ** 2 + (pb - b) ** 2
        if dist == 0:
            return key
        if dist < best_dist:
            best_dist = dist
            best = key
    return best


def quantize_array(pixels: np.ndarray, palette: Mapping[Hashable, tuple[int, int, int]] = PALETTE) -> np.ndarray:
    """Quantize an (H, W, 3) array to an (H, W) array of palette positions.

    ``np.argmin`` returns the first minimum, so ties resolve exactly as in
    :func:`nearest_colour`.
    """
    if not palette:
        raise ValueError("Palette cannot be empty")
    arr = np.asarray(pixels, dtype=np.int64)[..., :3]
    refs = np.array(list(palette.values()), dtype=np.int64)  # (P, 3)
    diff = arr[:, :, None, :] - refs[None, None, :, :]
    dist = (diff * diff).sum(axis=3)  # (H, W, P)
    return dist.argmin(axis=2)
