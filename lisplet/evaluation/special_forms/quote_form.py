from lisplet import EvaluatorFn
from lisplet import SExpression, LispValue
from lisplet.types.environment import Environment
from lisplet.evaluation.special_forms.syntax import expect_arity


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """(quote datum) returns datum unevaluated."""
    expect_arity("quote", tail, 1)
    return tail[0]
