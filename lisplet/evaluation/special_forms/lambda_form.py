from lisplet import EvaluatorFn
from lisplet import SExpression, LispValue
from lisplet.types.closure import Closure
from lisplet.types.environment import Environment
from lisplet.types.errors import LispletSyntaxError
from lisplet.types.symbol import Symbol
from lisplet.evaluation.special_forms.syntax import expect_arity


def lambda_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """
    (lambda (a b) body)  fixed arity
    (lambda args body)   variadic: `args` is bound to the list of all arguments
    """
    expect_arity("lambda", tail, 2)
    params, body = tail
    if isinstance(params, list):
        if not all(isinstance(p, Symbol) for p in params):
            raise LispletSyntaxError("lambda parameters must be symbols")
        params = list(params)
    elif not isinstance(params, Symbol):
        raise LispletSyntaxError("lambda parameters must be a list or a symbol")

    return Closure(params, body, env)
