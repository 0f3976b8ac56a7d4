from lisplet import EvaluatorFn
from lisplet import SExpression, LispValue
from lisplet.types.nil import Nil
from lisplet.types.environment import Environment


def begin_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    result: LispValue = Nil
    for expr in tail:
        result = evaluate_fn(expr, env)
    return result
