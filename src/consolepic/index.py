from collections.abc import Hashable, Mapping

import numpy as np
from PIL import Image

from consolepic.palette import PALETTE, ConsoleColor
from consolepic.quantize import quantize_array

PixelIndex = dict[ConsoleColor, list[tuple[int, int]]]


def build_pixel_index(image: Image.Image, palette: Mapping[Hashable, tuple[int, int, int]] = PALETTE) -> PixelIndex:
    """Group every pixel coordinate of ``image`` by its nearest palette colour.

    Pixels are visited column by column (x outer, y inner), so each colour's
    coordinate list is in that order. Colours appear in first-seen order.
    """
    rgb = image.convert("RGB")
    keys = list(palette)
    positions = quantize_array(np.asarray(rgb), palette)
    height, width = positions.shape

    index: PixelIndex = {}
    for x in range(width):
        for y in range(height):
            colour = keys[positions[y, x]]
            index.setdefault(colour, []).append((x, y))
    return index


def pixel_count(index: PixelIndex) -> int:
    return sum(len(coords) for coords in index.values())
