"""Interactive prompt: python -m lispy"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable

from lispy import __version__
from lispy.config import get_prompt
from lispy.errors import LispySyntaxError
from lispy.interpreter import Interpreter
from lispy.types.values import render

try:
    import readline  # noqa: F401  line editing and history where available
except ImportError:
    pass  # no line editing on this platform


def repl(
    interp: Interpreter,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    write(f"Lispy version {__version__}")
    write("Press Ctrl-c to Exit\n")
    prompt = get_prompt()
    while True:
        try:
            line = read_line(prompt)
        except (EOFError, KeyboardInterrupt):
            write("")
            return
        try:
            result = interp.eval(line)
        except LispySyntaxError as ex:
            write(str(ex))
            continue
        write(render(result))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="lispy", description="Lispy interactive prompt")
    parser.add_argument("--no-prelude", action="store_true", help="start without the prelude")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    interp = Interpreter(prelude=None if args.no_prelude else 'auto')
    repl(interp)
    return 0


if __name__ == "__main__":
    sys.exit(main())
