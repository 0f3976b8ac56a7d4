from __future__ import annotations

from typing import Callable

from lisplet import LispValue


class NativeProcedure:
    """A builtin procedure: a Python callable over already-evaluated arguments.

    The callable validates its own arguments and raises a LispletError subclass
    when they are unacceptable.
    """

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[[list[LispValue]], LispValue]):
        self.name = name
        self.fn = fn

    def __call__(self, args: list[LispValue]) -> LispValue:
        return self.fn(args)

    def __repr__(self) -> str:
        return f"<builtin {self.name}>"
