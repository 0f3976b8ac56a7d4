"""Printer for Lisplet values.

`to_string` writes the canonical text of a value. For every tree the reader
can produce, reading the printed text back yields an equal tree. The one
exception is Nil, which the reader only makes from a malformed number such
as `-.`: it prints as `nil` and reads back as the symbol `nil`.
"""

from __future__ import annotations

from decimal import Decimal

from lisplet import LispValue
from lisplet.reader.parser import ESCAPES
from lisplet.types.closure import Closure
from lisplet.types.nil import NilType
from lisplet.types.procedure import NativeProcedure
from lisplet.types.symbol import Symbol

_ENCODE = {v: "\\" + k for k, v in ESCAPES.items()}


def format_number(value: float) -> str:
    if value != value or value in (float("inf"), float("-inf")):
        return repr(value)
    if value.is_integer():
        return str(int(value))
    # Positional notation only; the scanner has no exponent syntax.
    return format(Decimal(repr(value)), "f")


def format_string(value: str) -> str:
    return '"' + "".join(_ENCODE.get(ch, ch) for ch in value) + '"'


def to_string(value: LispValue) -> str:
    if isinstance(value, bool):
        return "#t" if value else "#f"
    if isinstance(value, float):
        return format_number(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return format_string(value)
    if isinstance(value, Symbol):
        return value.name
    if isinstance(value, list):
        return "(" + " ".join(to_string(item) for item in value) + ")"
    if isinstance(value, Closure):
        return f"(lambda {to_string(value.params)} {to_string(value.body)})"
    if isinstance(value, NativeProcedure):
        return f"#<builtin {value.name}>"
    if isinstance(value, NilType):
        return "nil"
    return str(value)
