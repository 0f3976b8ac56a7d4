"""User-defined procedures and argument binding for Lisplet."""

from __future__ import annotations

from lisplet import SExpression, LispValue
from lisplet.types.environment import Environment
from lisplet.types.errors import LispletArityError
from lisplet.types.symbol import Symbol


class Closure:
    """A procedure created by evaluating a ``lambda`` form.

    `params` is either a list of Symbols (fixed arity) or a single Symbol that
    receives every argument as one list. `env` is the scope the lambda was
    evaluated in; it is held by reference and never reassigned.
    """

    __slots__ = ("params", "body", "env")

    def __init__(
        self, params: list[Symbol] | Symbol, body: SExpression, env: Environment
    ):
        self.params = params
        self.body: SExpression = body
        self.env: Environment = env

    @property
    def variadic(self) -> bool:
        return isinstance(self.params, Symbol)

    def bind(self, args: list[LispValue]) -> Environment:
        """Return a new scope under the captured env with params bound to `args`."""
        local = self.env.extend()
        if self.variadic:
            local.define(self.params, list(args))
            return local
        expected, actual = len(self.params), len(args)
        if expected != actual:
            raise LispletArityError(
                f"Wrong number of arguments to function. Expecting {expected}, got {actual}",
                expected=expected,
                actual=actual,
            )
        for param, arg in zip(self.params, args):
            local.define(param, arg)
        return local

    def __str__(self) -> str:
        from lisplet.printer import to_string

        return to_string(self)

    def __repr__(self) -> str:
        return str(self)
