"""Core evaluator for the Lisplet interpreter.

Dispatches on the shape of the expression: symbols are looked up, lists whose
head names a special form go to the SPECIAL_FORMS table, every other
non-empty list is a function application, and everything else evaluates to
itself. Evaluation is plain recursion; errors propagate as LispletError.
"""

from __future__ import annotations

from lisplet import SExpression, LispValue
from lisplet.types.environment import Environment
from lisplet.types.symbol import Symbol
from lisplet.evaluation.apply import apply
from lisplet.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        case Symbol():
            return env.lookup(expr)

        case []:
            return expr

        case [Symbol() as head, *tail_args] if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail_args, env, evaluate)

        case [head, *tail_args]:
            fn = evaluate(head, env)
            args = [evaluate(arg, env) for arg in tail_args]
            return apply(fn, args, evaluate)

    # Numbers, strings, booleans, closures and builtins are self-evaluating.
    return expr
