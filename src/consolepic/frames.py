import logging

from PIL import Image

from consolepic.animation import Frame
from consolepic.index import build_pixel_index

logger = logging.getLogger(__name__)


def frame_count(image: Image.Image) -> int:
    """Number of frames along the time axis, 1 for formats without frames."""
    return getattr(image, "n_frames", 1)


def flatten(image: Image.Image) -> Image.Image:
    """Copy the active frame onto its own opaque RGB surface of the same size.

    Transparent pixels come out black.
    """
    rgba = image.convert("RGBA")
    surface = Image.new("RGB", image.size, (0, 0, 0))
    surface.paste(rgba, (0, 0), rgba)
    return surface


def split_frames(image: Image.Image) -> list[Image.Image]:
    """Extract every frame of an animated image, in time order."""
    count = frame_count(image)
    position = image.tell()
    frames = []
    try:
        for i in range(count):
            image.seek(i)
            frames.append(flatten(image))
    finally:
        image.seek(position)
    return frames


def frame_durations(image: Image.Image) -> list[int]:
    """Per-frame display durations in milliseconds, 0 where the source has none."""
    count = frame_count(image)
    position = image.tell()
    durations = []
    try:
        for i in range(count):
            image.seek(i)
            durations.append(int(image.info.get("duration", 0) or 0))
    finally:
        image.seek(position)
    return durations


def scale_image(image: Image.Image, dimensions: tuple[int, int]) -> Image.Image:
    width, height = dimensions
    if width < 1 or height < 1:
        raise ValueError(f"Dimensions must be positive, got {width}x{height}")
    return image.resize((width, height), Image.LANCZOS)


def build_frames(image: Image.Image, dimensions: tuple[int, int]) -> list[Frame]:
    """Split an animated image and quantize each frame at ``dimensions``."""
    frames = []
    for still in split_frames(image):
        scaled = scale_image(still, dimensions)
        frames.append(Frame(index=build_pixel_index(scaled), size=scaled.size))
    logger.debug("Built %d frames at %dx%d", len(frames), *dimensions)
    return frames
