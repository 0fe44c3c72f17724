from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from consolepic.index import PixelIndex, pixel_count
from consolepic.renderer import draw_still
from consolepic.terminal import Terminal

logger = logging.getLogger(__name__)


class CancelToken(Protocol):
    def is_set(self) -> bool: ...


def sleep_ms(milliseconds: int) -> None:
    time.sleep(milliseconds / 1000)


@dataclass(frozen=True)
class Frame:
    index: PixelIndex
    size: tuple[int, int]

    def __len__(self) -> int:
        return pixel_count(self.index)


class AnimationSequence:
    """Frames of an animated image plus the delay and loop policy for playback.

    ``frame_delay`` is in milliseconds. A ``loop_count`` of 0 repeats forever.
    """

    def __init__(self, frames: list[Frame], frame_delay: int = 0, loop_count: int = 0):
        if not frames:
            raise ValueError("An animation needs at least one frame")
        self.frames = list(frames)
        self.frame_delay = frame_delay
        self.loop_count = loop_count

    @property
    def frame_delay(self) -> int:
        return self._frame_delay

    @frame_delay.setter
    def frame_delay(self, value: int) -> None:
        if value < 0:
            raise ValueError(f"Frame delay cannot be negative: {value}")
        self._frame_delay = value

    @property
    def loop_count(self) -> int:
        return self._loop_count

    @loop_count.setter
    def loop_count(self, value: int) -> None:
        if value < 0:
            raise ValueError(f"Loop count cannot be negative: {value}")
        self._loop_count = value

    def __len__(self) -> int:
        return len(self.frames)


def play(
    sequence: AnimationSequence,
    terminal: Terminal,
    sleep: Callable[[int], None] = sleep_ms,
    cancel: CancelToken | None = None,
) -> int:
    """Play ``sequence`` on ``terminal`` and return the number of frames drawn.

    Each frame waits ``frame_delay`` then redraws in full. With a loop count of
    0 this only returns once ``cancel`` is set; the token is checked before
    every frame.
    """
    loops = sequence.loop_count
    delay = sequence.frame_delay
    drawn = 0
    passes = 0
    while loops == 0 or passes < loops:
        logger.debug("Starting pass %d of %s", passes + 1, loops or "infinite")
        for frame in sequence.frames:
            if cancel is not None and cancel.is_set():
                logger.debug("Playback cancelled after %d frames", drawn)
                return drawn
            sleep(delay)
            draw_still(frame.index, terminal)
            drawn += 1
        passes += 1
    return drawn
