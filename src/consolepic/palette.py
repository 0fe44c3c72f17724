from enum import IntEnum

from PIL import ImageColor


class ConsoleColor(IntEnum):
    """The 16 console colours, in the order used to break quantization ties."""

    BLACK = 0
    DARK_BLUE = 1
    DARK_GREEN = 2
    DARK_CYAN = 3
    DARK_RED = 4
    DARK_MAGENTA = 5
    DARK_YELLOW = 6
    GRAY = 7
    DARK_GRAY = 8
    BLUE = 9
    GREEN = 10
    CYAN = 11
    RED = 12
    MAGENTA = 13
    YELLOW = 14
    WHITE = 15

    @property
    def colour_name(self) -> str:
        """Named-colour spelling, e.g. ``darkblue`` for DARK_BLUE."""
        return self.name.replace("_", "").lower()


# "darkyellow" is not a named colour; orange stands in for it.
_NAME_OVERRIDES = {ConsoleColor.DARK_YELLOW: "orange"}

# SGR foreground codes; background is foreground + 10.
ANSI_FOREGROUND = {
    ConsoleColor.BLACK: 30,
    ConsoleColor.DARK_RED: 31,
    ConsoleColor.DARK_GREEN: 32,
    ConsoleColor.DARK_YELLOW: 33,
    ConsoleColor.DARK_BLUE: 34,
    ConsoleColor.DARK_MAGENTA: 35,
    ConsoleColor.DARK_CYAN: 36,
    ConsoleColor.GRAY: 37,
    ConsoleColor.DARK_GRAY: 90,
    ConsoleColor.RED: 91,
    ConsoleColor.GREEN: 92,
    ConsoleColor.YELLOW: 93,
    ConsoleColor.BLUE: 94,
    ConsoleColor.MAGENTA: 95,
    ConsoleColor.CYAN: 96,
    ConsoleColor.WHITE: 97,
}


def reference_rgb(colour: ConsoleColor) -> tuple[int, int, int]:
    name = _NAME_OVERRIDES.get(colour, colour.colour_name)
    return ImageColor.getrgb(name)[:3]


def build_palette() -> dict[ConsoleColor, tuple[int, int, int]]:
    return {colour: reference_rgb(colour) for colour in ConsoleColor}


PALETTE = build_palette()


def ansi_codes(colour: ConsoleColor) -> tuple[int, int]:
    """Return the (foreground, background) SGR codes for a colour."""
    fg = ANSI_FOREGROUND[colour]
    return fg, fg + 10
