import argparse
import logging
import sys
from pathlib import Path

from consolepic.errors import SourceUnavailableError
from consolepic.image import URL_PREFIXES, build
from consolepic.terminal import AnsiTerminal, get_terminal_size


def main(argv=None):
    parser = argparse.ArgumentParser(description="Draw an image or animation in the terminal using console colours")
    parser.add_argument("image", help="Path or http(s) URL of the input image")
    parser.add_argument("-W", "--width", type=int, default=None, help="Output width in columns (default: terminal width)")
    parser.add_argument("-H", "--height", type=int, default=None, help="Output height in rows (default: terminal height)")
    parser.add_argument(
        "-d",
        "--delay",
        type=int,
        default=None,
        help="Milliseconds between animation frames (default: the image's own frame duration)",
    )
    parser.add_argument(
        "-l", "--loops", type=int, default=0, help="Times to play an animation; 0 loops until interrupted (default: 0)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug output to stderr")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, stream=sys.stderr)

    columns, rows = get_terminal_size()
    width = args.width if args.width is not None else columns
    height = args.height if args.height is not None else rows
    if width < 1 or height < 1:
        parser.error(f"dimensions must be positive, got {width}x{height}")
    if args.delay is not None and args.delay < 0:
        parser.error(f"delay cannot be negative: {args.delay}")
    if args.loops < 0:
        parser.error(f"loops cannot be negative: {args.loops}")

    if not args.image.startswith(URL_PREFIXES) and not Path(args.image).exists():
        print(f"File not found: {args.image}", file=sys.stderr)
        sys.exit(1)

    try:
        image = build(args.image, (width, height), frame_delay=args.delay, loop_count=args.loops)
    except SourceUnavailableError as exc:
        print(exc, file=sys.stderr)
        sys.exit(1)

    terminal = AnsiTerminal()
    terminal.clear()
    try:
        image.draw(terminal)
    except KeyboardInterrupt:
        sys.exit(130)
    finally:
        terminal.reset()
        terminal.move_cursor(0, min(height, terminal.size()[1] - 1))
        terminal.stream.write("\n")
        terminal.flush()
