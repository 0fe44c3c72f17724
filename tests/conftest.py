import io

import pytest
from PIL import Image


class RecordingTerminal:
    """Terminal fake that records every primitive call as a tuple."""

    def __init__(self, size=(80, 24), log=None):
        self._size = size
        self.calls = log if log is not None else []

    def size(self):
        return self._size

    def set_colour(self, colour):
        self.calls.append(("colour", colour))

    def move_cursor(self, x, y):
        self.calls.append(("move", x, y))

    def write_glyph(self, char):
        self.calls.append(("glyph", char))

    def flush(self):
        self.calls.append(("flush",))

    def reset(self):
        self.calls.append(("reset",))

    def moves(self):
        return [call[1:] for call in self.calls if call[0] == "move"]

    def frames_drawn(self):
        return sum(1 for call in self.calls if call[0] == "flush")


def make_gif(colours, size=(4, 3), duration=50):
    """Build an animated GIF in memory with one solid frame per colour."""
    frames = [Image.new("RGB", size, colour) for colour in colours]
    buf = io.BytesIO()
    frames[0].save(buf, format="GIF", save_all=True, append_images=frames[1:], duration=duration, loop=0)
    buf.seek(0)
    return Image.open(buf)


@pytest.fixture
def make_terminal():
    return RecordingTerminal


@pytest.fixture
def terminal():
    return RecordingTerminal()
