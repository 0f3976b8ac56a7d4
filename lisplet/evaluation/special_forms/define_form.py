from lisplet import EvaluatorFn
from lisplet import SExpression, LispValue
from lisplet.types.nil import Nil
from lisplet.types.environment import Environment
from lisplet.evaluation.special_forms.syntax import expect_arity, expect_symbol


def define_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """
    (define name value)
    Always binds in the innermost scope, shadowing any outer `name`.
    """
    expect_arity("define", tail, 2)
    name = expect_symbol(tail[0])
    value = evaluate_fn(tail[1], env)
    env.define(name, value)
    return Nil
