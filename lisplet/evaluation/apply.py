"""Application engine for Lisplet.

Closures run their body in a fresh scope whose parent is the scope captured
at creation (lexical scoping); the caller's scope plays no part. Builtins are
handed the evaluated argument list and validate it themselves.
"""

from lisplet import LispValue, EvaluatorFn
from lisplet.types.closure import Closure
from lisplet.types.errors import LispletNotCallable
from lisplet.types.procedure import NativeProcedure


def apply_closure(
    fn: Closure, args: list[LispValue], evaluate_fn: EvaluatorFn
) -> LispValue:
    local = fn.bind(args)
    return evaluate_fn(fn.body, local)


def apply(
    head: LispValue, args: list[LispValue], evaluate_fn: EvaluatorFn
) -> LispValue:
    """Apply a Closure or NativeProcedure; anything else is not callable."""
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn)
    if isinstance(head, NativeProcedure):
        return head(args)
    raise LispletNotCallable(head)
