from lisplet import EvaluatorFn
from lisplet import SExpression, LispValue
from lisplet.types.nil import Nil
from lisplet.types.environment import Environment
from lisplet.evaluation.special_forms.syntax import expect_arity, expect_symbol


def set_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """
    (set! name value)
    Overwrites the nearest existing binding; never creates one.
    """
    expect_arity("set!", tail, 2)
    name = expect_symbol(tail[0])
    value = evaluate_fn(tail[1], env)
    env.assign(name, value)
    return Nil
