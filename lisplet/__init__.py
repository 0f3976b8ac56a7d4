# Core type aliases for Lisplet's data model.
# Runtime values are plain Python objects wherever one fits:
#   Number -> float, String -> str, Boolean -> bool, List -> list
# plus the small classes in lisplet.types (Symbol, Closure, NativeProcedure, Nil).
#
# Naming guidance:
# - SExpression: use in reader/printer code for syntactic forms (code-as-data).
# - LispValue:  use in evaluator/runtime code for evaluated values.
# Both resolve to `Any` and are interchangeable.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias
SExpression = LispValue

# Evaluator function type, handed to special forms so they can recurse
EvaluatorFn = Callable[..., LispValue]

# Public surface. Imported after the aliases above, which the submodules use.
from lisplet.reader.scanner import scan, Token, TokenType  # noqa: E402
from lisplet.reader.parser import parse, parse_all  # noqa: E402
from lisplet.evaluation.evaluator import evaluate  # noqa: E402
from lisplet.builtin.env_builtin import new_env  # noqa: E402
from lisplet.printer import to_string  # noqa: E402

__all__ = [
    "LispValue",
    "SExpression",
    "EvaluatorFn",
    "Token",
    "TokenType",
    "scan",
    "parse",
    "parse_all",
    "evaluate",
    "new_env",
    "to_string",
]
