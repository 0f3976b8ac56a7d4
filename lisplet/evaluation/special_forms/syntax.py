from lisplet import SExpression
from lisplet.types.errors import LispletSyntaxError
from lisplet.types.symbol import Symbol


def expect_arity(form: str, tail: list[SExpression], count: int) -> None:
    """Raise unless the form has exactly `count` operands."""
    if len(tail) != count:
        raise LispletSyntaxError(f"Wrong number of arguments to '{form}'")


def expect_symbol(target: SExpression) -> Symbol:
    if not isinstance(target, Symbol):
        raise LispletSyntaxError("Cannot assign to a literal")
    return target
