"""Command line entry point: load files, then read-eval-print."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from lisplet.config import get_log_level
from lisplet.interpreter import Interpreter

PROMPT = "> "


def repl(interp: Interpreter) -> None:
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print()
            return
        except KeyboardInterrupt:
            print()
            continue
        interp.run(line, sys.stdout)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="lisplet", description="Lisplet interpreter")
    parser.add_argument("files", nargs="*", help="source files to load before the REPL")
    parser.add_argument("-e", "--eval", dest="code", help="evaluate CODE and print the results")
    parser.add_argument("--no-repl", action="store_true", help="exit after loading files")
    parser.add_argument("--no-prelude", action="store_true", help="do not load stdlib.lisp")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=get_log_level(),
        format="%(levelname)s: %(message)s",
    )

    interp = Interpreter(prelude=None if args.no_prelude else "auto")
    status = 0
    for name in args.files:
        try:
            if interp.load(name):
                status = 1
        except OSError as e:
            print(e, file=sys.stderr)
            return 1

    if args.code is not None:
        if interp.run(args.code, sys.stdout):
            status = 1
    elif not args.no_repl:
        repl(interp)
    return status


if __name__ == "__main__":
    sys.exit(main())
