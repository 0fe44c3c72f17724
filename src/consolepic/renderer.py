from consolepic.errors import EmptyImageError
from consolepic.index import PixelIndex
from consolepic.terminal import Terminal

GLYPH = "@"


def draw_still(index: PixelIndex | None, terminal: Terminal) -> None:
    """Draw one full pass of a pixel index, one colour switch per colour group.

    The bottom-right cell of the terminal is never written; doing so would
    scroll the screen and shift every later cursor move.
    """
    if index is None:
        raise EmptyImageError()
    width, height = terminal.size()
    corner = (width - 1, height - 1)
    for colour, coords in index.items():
        terminal.set_colour(colour)
        for x, y in coords:
            if (x, y) == corner:
                continue
            terminal.move_cursor(x, y)
            terminal.write_glyph(GLYPH)
    terminal.flush()
