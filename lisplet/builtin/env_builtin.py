"""Built-in procedures for the Lisplet runtime environment.

Every builtin is a plain Python function over already-evaluated arguments,
wrapped by `validated` into a NativeProcedure that checks the argument count
and the kind of each argument before the function runs. The functions
themselves can therefore assume well-typed input.
"""
from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from functools import reduce
from typing import Callable, Optional, Sequence

from lisplet import LispValue
from lisplet.types.closure import Closure
from lisplet.types.environment import Environment
from lisplet.types.errors import (
    LispletArityError,
    LispletDivisionByZero,
    LispletTypeError,
)
from lisplet.types.nil import NilType
from lisplet.types.procedure import NativeProcedure
from lisplet.types.symbol import Symbol


# -------------------------------
# Kinds and validation
# -------------------------------
@dataclass(frozen=True)
class Kind:
    name: str
    check: Callable[[LispValue], bool]


NUMBER = Kind("Number", lambda v: isinstance(v, float))
BOOLEAN = Kind("Boolean", lambda v: isinstance(v, bool))
LIST = Kind("List", lambda v: isinstance(v, list))
ANY = Kind("Any", lambda v: True)


def type_name(value: LispValue) -> str:
    """The language-level name of a value's kind, for error messages."""
    if isinstance(value, bool):
        return "Boolean"
    if isinstance(value, float):
        return "Number"
    if isinstance(value, str):
        return "String"
    if isinstance(value, Symbol):
        return "Symbol"
    if isinstance(value, list):
        return "List"
    if isinstance(value, Closure):
        return "Closure"
    if isinstance(value, NativeProcedure):
        return "Procedure"
    if isinstance(value, NilType):
        return "Nil"
    return type(value).__name__


def check_count(
    name: str, args: Sequence[LispValue], min_args: int, max_args: Optional[int]
) -> None:
    actual = len(args)
    if max_args is not None and min_args == max_args:
        if actual != min_args:
            plural = "argument" if min_args == 1 else "arguments"
            raise LispletArityError(
                f"'{name}' requires exactly {min_args} {plural}, got {actual}",
                expected=min_args,
                actual=actual,
            )
        return
    if actual < min_args:
        plural = "argument" if min_args == 1 else "arguments"
        raise LispletArityError(
            f"'{name}' requires at least {min_args} {plural}, got {actual}",
            expected=min_args,
            actual=actual,
        )
    if max_args is not None and actual > max_args:
        raise LispletArityError(
            f"'{name}' accepts at most {max_args} arguments, got {actual}",
            expected=max_args,
            actual=actual,
        )


def validated(
    name: str,
    fn: Callable[..., LispValue],
    kind: Kind,
    min_args: int = 0,
    max_args: Optional[int] = None,
) -> NativeProcedure:
    """Wrap `fn` into a NativeProcedure that validates its arguments.

    Every argument must satisfy `kind`.
    """

    def call(args: list[LispValue]) -> LispValue:
        check_count(name, args, min_args, max_args)
        for arg in args:
            if not kind.check(arg):
                raise LispletTypeError(name, type_name(arg), kind.name)
        return fn(*args)

    return NativeProcedure(name, call)


# -------------------------------
# Arithmetic
# -------------------------------
def add(*nums: float) -> float:
    return sum(nums, 0.0)


def sub(first: float, *rest: float) -> float:
    if not rest:
        return -first
    return reduce(operator.sub, rest, first)


def mul(*nums: float) -> float:
    return math.prod(nums, start=1.0)


def div(first: float, *rest: float) -> float:
    if not rest:
        rest, first = (first,), 1.0
    if any(n == 0 for n in rest):
        raise LispletDivisionByZero("Division by zero")
    return reduce(operator.truediv, rest, first)


def mod(n: float, d: float) -> float:
    """Remainder of n / d, carrying the sign of n."""
    if d == 0:
        raise LispletDivisionByZero("Division by zero")
    return math.fmod(n, d)


def absolute(n: float) -> float:
    return abs(n)


def maximum(*nums: float) -> float:
    return max(nums)


def minimum(*nums: float) -> float:
    return min(nums)


# -------------------------------
# Comparison
# -------------------------------
def chain(op: Callable[[float, float], bool]) -> Callable[..., bool]:
    def compare(*nums: float) -> bool:
        return all(op(a, b) for a, b in zip(nums, nums[1:]))

    return compare


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Deep equality for Lisp values, with element-wise comparison for lists."""
    if a is b:
        return True
    if isinstance(a, list) and isinstance(b, list):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if type(a) != type(b):
        return False
    if isinstance(a, (Closure, NativeProcedure)):
        return False
    return a == b


def structurally_equal(*values: LispValue) -> bool:
    return all(is_equal(a, b) for a, b in zip(values, values[1:]))


# -------------------------------
# Boolean logic
# -------------------------------
def logical_and(*flags: bool) -> bool:
    return all(flags)


def logical_or(*flags: bool) -> bool:
    return any(flags)


def logical_not(flag: bool) -> bool:
    return not flag


# -------------------------------
# List operations
# -------------------------------
def car(lst: list) -> LispValue:
    if not lst:
        raise LispletTypeError("car", "empty List", "non-empty List")
    return lst[0]


def cdr(lst: list) -> list:
    if not lst:
        raise LispletTypeError("cdr", "empty List", "non-empty List")
    return lst[1:]


def cons(head: LispValue, rest: LispValue) -> list:
    if isinstance(rest, list):
        return [head, *rest]
    return [head, rest]


def make_list(*items: LispValue) -> list:
    return list(items)


# -------------------------------
# Registration
# -------------------------------
def builtins() -> list[NativeProcedure]:
    """Build a fresh set of builtin procedures."""
    return [
        validated("+", add, NUMBER),
        validated("-", sub, NUMBER, min_args=1),
        validated("*", mul, NUMBER),
        validated("/", div, NUMBER, min_args=1),
        validated("%", mod, NUMBER, min_args=2, max_args=2),
        validated("abs", absolute, NUMBER, min_args=1, max_args=1),
        validated("max", maximum, NUMBER, min_args=1),
        validated("min", minimum, NUMBER, min_args=1),
        validated("<", chain(operator.lt), NUMBER, min_args=2),
        validated("<=", chain(operator.le), NUMBER, min_args=2),
        validated(">", chain(operator.gt), NUMBER, min_args=2),
        validated(">=", chain(operator.ge), NUMBER, min_args=2),
        validated("=", chain(operator.eq), NUMBER, min_args=2),
        validated("equal?", structurally_equal, ANY, min_args=2),
        validated("&&", logical_and, BOOLEAN),
        validated("||", logical_or, BOOLEAN),
        validated("!", logical_not, BOOLEAN, min_args=1, max_args=1),
        validated("and", logical_and, BOOLEAN),
        validated("or", logical_or, BOOLEAN),
        validated("not", logical_not, BOOLEAN, min_args=1, max_args=1),
        validated("car", car, LIST, min_args=1, max_args=1),
        validated("cdr", cdr, LIST, min_args=1, max_args=1),
        validated("cons", cons, ANY, min_args=2, max_args=2),
        validated("list", make_list, ANY),
    ]


def register(env: Environment) -> None:
    env.update({Symbol(proc.name): proc for proc in builtins()})


def new_env() -> Environment:
    """Return a fresh top-level environment holding every builtin."""
    env = Environment()
    register(env)
    return env
