from __future__ import annotations
import sys


class Symbol:
    """An identifier in program text.

    Names are interned, so two Symbols with the same spelling share one string
    and compare cheaply. A Symbol never compares equal to a plain ``str``: the
    reader keeps string literals and identifiers apart.
    """

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.name is other.name

    def __ne__(self, other: object) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"Symbol({self.name!r})"

    def __str__(self) -> str:
        return self.name
