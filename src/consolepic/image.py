from __future__ import annotations

import io
import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import requests
from PIL import Image

from consolepic.animation import AnimationSequence, CancelToken, play, sleep_ms
from consolepic.errors import SourceUnavailableError
from consolepic.frames import build_frames, flatten, frame_count, frame_durations, scale_image
from consolepic.index import PixelIndex, build_pixel_index
from consolepic.renderer import draw_still
from consolepic.terminal import AnsiTerminal, Terminal, get_terminal_size

logger = logging.getLogger(__name__)

URL_TIMEOUT = 30
URL_PREFIXES = ("http://", "https://")


def load_image(source: Image.Image | str | Path) -> Image.Image:
    """Open an image from a PIL image, a local path, or an http(s) URL.

    Raises:
        SourceUnavailableError: the source cannot be fetched or decoded.
    """
    if isinstance(source, Image.Image):
        return source
    try:
        if isinstance(source, str) and source.startswith(URL_PREFIXES):
            logger.debug("Fetching %s", source)
            response = requests.get(source, timeout=URL_TIMEOUT)
            response.raise_for_status()
            image = Image.open(io.BytesIO(response.content))
        else:
            image = Image.open(source)
        image.load()
    except (OSError, requests.RequestException) as exc:
        raise SourceUnavailableError(f"Cannot read image {str(source)!r}: {exc}") from exc
    return image


@dataclass
class Still:
    index: PixelIndex | None
    resized: Image.Image | None = None


@dataclass
class Animated:
    sequence: AnimationSequence


class ConsoleImage:
    """An image ready to draw on a terminal, either a single still or an animation.

    Use :func:`build` to create one. Changing dimensions does not rebuild the
    quantized pixels; call :meth:`rebuild` for that.
    """

    def __init__(self, source: Image.Image, variant: Still | Animated, dimensions: tuple[int, int]):
        self.source = source
        self.variant = variant
        self.dimensions = dimensions

    def __repr__(self) -> str:
        kind = "animated" if self.is_animated else "still"
        return f"<ConsoleImage {kind} {self.dimensions[0]}x{self.dimensions[1]}>"

    @property
    def is_animated(self) -> bool:
        return isinstance(self.variant, Animated)

    @property
    def frame_delay(self) -> int:
        """Milliseconds between animation frames; always 0 for a still."""
        if isinstance(self.variant, Animated):
            return self.variant.sequence.frame_delay
        return 0

    @frame_delay.setter
    def frame_delay(self, value: int) -> None:
        if isinstance(self.variant, Animated):
            self.variant.sequence.frame_delay = value

    @property
    def loop_count(self) -> int:
        """Number of passes over the animation, 0 for forever; always 0 for a still."""
        if isinstance(self.variant, Animated):
            return self.variant.sequence.loop_count
        return 0

    @loop_count.setter
    def loop_count(self, value: int) -> None:
        if isinstance(self.variant, Animated):
            self.variant.sequence.loop_count = value

    @property
    def resized_image(self) -> Image.Image | None:
        if isinstance(self.variant, Still):
            return self.variant.resized
        return None

    def set_dimensions(self, width: int, height: int) -> None:
        self.dimensions = (width, height)

    def rebuild(self) -> ConsoleImage:
        """Build a fresh image from the same source at the current dimensions."""
        return build(
            self.source,
            self.dimensions,
            frame_delay=self.frame_delay if self.is_animated else None,
            loop_count=self.loop_count,
        )

    def draw(
        self,
        terminal: Terminal | None = None,
        sleep: Callable[[int], None] = sleep_ms,
        cancel: CancelToken | None = None,
    ) -> None:
        """Draw the still, or play the animation until its loops finish or ``cancel`` is set."""
        if terminal is None:
            terminal = AnsiTerminal()
        if isinstance(self.variant, Animated):
            play(self.variant.sequence, terminal, sleep=sleep, cancel=cancel)
        else:
            draw_still(self.variant.index, terminal)


def build(
    source: Image.Image | str | Path,
    dimensions: tuple[int, int] | None = None,
    frame_delay: int | None = None,
    loop_count: int = 0,
) -> ConsoleImage:
    """Load ``source`` and quantize it for the console.

    Sources with more than one frame become animations; ``frame_delay`` then
    defaults to the first frame's duration in the source. ``frame_delay`` and
    ``loop_count`` are ignored for stills.
    """
    image = load_image(source)
    if dimensions is None:
        dimensions = get_terminal_size()
    dimensions = (int(dimensions[0]), int(dimensions[1]))

    if dimensions[0] < 1 or dimensions[1] < 1:
        raise ValueError(f"Dimensions must be positive, got {dimensions[0]}x{dimensions[1]}")

    # later frames are only decoded here, after load_image has read the first
    try:
        count = frame_count(image)
        if count > 1:
            frames = build_frames(image, dimensions)
            durations = frame_durations(image)
        else:
            resized = scale_image(flatten(image), dimensions)
    except (OSError, EOFError, IndexError, Image.DecompressionBombError) as exc:
        raise SourceUnavailableError(f"Cannot decode image {image!r}: {exc}") from exc

    if count > 1:
        if frame_delay is None:
            frame_delay = durations[0] if durations else 0
        sequence = AnimationSequence(frames, frame_delay=frame_delay, loop_count=loop_count)
        logger.debug("Built animation of %d frames, delay %dms, loops %d", count, frame_delay, loop_count)
        return ConsoleImage(image, Animated(sequence), dimensions)

    logger.debug("Built still at %dx%d", *dimensions)
    return ConsoleImage(image, Still(build_pixel_index(resized), resized), dimensions)


def console_draw(
    source: Image.Image | str | Path,
    dimensions: tuple[int, int] | None = None,
    terminal: Terminal | None = None,
    cancel: CancelToken | None = None,
) -> None:
    """Build ``source`` and draw it in one call."""
    build(source, dimensions).draw(terminal, cancel=cancel)
