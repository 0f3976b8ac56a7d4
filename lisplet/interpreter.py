"""Front end over the evaluation core.

The Interpreter keeps one top-level environment alive across calls so that
definitions persist, and is what the command line and the language server's
tooling drive. Unlike the core, it recovers from errors: a failing top-level
expression is reported and the next one still runs.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterator, Optional, TextIO

from lisplet import LispValue
from lisplet.builtin.env_builtin import new_env
from lisplet.config import (
    PRELUDE_FILE,
    get_prelude_root,
    get_recursion_limit,
    resolve_source,
)
from lisplet.evaluation.evaluator import evaluate
from lisplet.printer import to_string
from lisplet.reader.parser import TokenStream, parse_all
from lisplet.reader.scanner import scan
from lisplet.types.errors import LispletError
from lisplet.types.nil import Nil

logger = logging.getLogger(__name__)

Outcome = tuple[LispValue, Optional[BaseException]]


class Interpreter:
    """
    Evaluates Lisplet source against a persistent environment.

    `prelude="auto"` loads the packaged standard library, None skips it, and
    any other string is evaluated as prelude code.
    """

    def __init__(self, prelude: str | None = "auto"):
        limit = get_recursion_limit()
        if sys.getrecursionlimit() < limit:
            sys.setrecursionlimit(limit)
        self.env = new_env()
        if prelude == "auto":
            self.load(get_prelude_root() / PRELUDE_FILE)
        elif prelude:
            self.eval(prelude)

    def eval(self, code: str) -> LispValue:
        """Evaluate every expression in `code`; return the last value. Errors propagate."""
        result: LispValue = Nil
        for expr in parse_all(code):
            result = evaluate(expr, self.env)
        return result

    def _outcomes(self, code: str) -> Iterator[Outcome]:
        stream = TokenStream(scan(code))
        while not stream.at_end():
            try:
                expr = stream.parse_expr()
            except LispletError as e:
                # The offending token is consumed, so reading resumes after it.
                yield Nil, e
                if stream.at_end():
                    return
                continue
            try:
                yield evaluate(expr, self.env), None
            except (LispletError, RecursionError) as e:
                yield Nil, e
        try:
            stream.finish()
        except LispletError as e:
            yield Nil, e

    def run(self, code: str, out: TextIO = sys.stdout) -> int:
        """Evaluate `code` REPL-style, writing results and errors to `out`.

        Returns the number of expressions that failed.
        """
        failures = 0
        for value, error in self._outcomes(code):
            if error is not None:
                failures += 1
                out.write(f"{format_error(error)}\n")
            elif value is not Nil:
                out.write(f"{to_string(value)}\n")
        return failures

    def load(self, path: str | Path) -> int:
        """Evaluate a source file, skipping expressions that fail.

        Returns the number of failures. A missing file raises OSError.
        """
        source = resolve_source(path)
        logger.info("Loading %s", source)
        code = source.read_text(encoding="utf-8")
        failures = 0
        for _, error in self._outcomes(code):
            if error is not None:
                failures += 1
                logger.warning("%s: %s", source, format_error(error))
        return failures


def format_error(error: BaseException) -> str:
    if isinstance(error, RecursionError):
        return f"Recursion Error: {error}"
    return str(error)
