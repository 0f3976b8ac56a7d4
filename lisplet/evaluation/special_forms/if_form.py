from lisplet import EvaluatorFn
from lisplet import SExpression, LispValue
from lisplet.types.environment import Environment
from lisplet.types.nil import NilType
from lisplet.evaluation.special_forms.syntax import expect_arity


def is_truthy(value: LispValue) -> bool:
    """#f, the number 0, the empty list and Nil are false; all else is true."""
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        return value != 0
    if isinstance(value, list):
        return len(value) > 0
    return value is not None and not isinstance(value, NilType)


def if_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    expect_arity("if", tail, 3)
    condition, consequence, alternative = tail
    if is_truthy(evaluate_fn(condition, env)):
        return evaluate_fn(consequence, env)
    return evaluate_fn(alternative, env)
