"""Runtime environment for Lisplet.

An Environment is one scope: a mapping of Symbols to evaluated values plus an
optional link to the enclosing scope. Scopes form a tree through `outer`; a
parent may be shared by any number of children (every closure created in a
scope holds that same scope object), so mutation through one holder is seen
by all of them.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from lisplet import LispValue
from lisplet.types.errors import LispletUnboundSymbol
from lisplet.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def extend(self) -> Environment:
        """Return a fresh, empty scope whose parent is this one."""
        return Environment(outer=self)

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` in this scope only, shadowing any outer binding."""
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def assign(self, name: Symbol, value: LispValue) -> None:
        """Overwrite the nearest existing binding for `name`.

        Raises LispletUnboundSymbol if no scope in the chain binds it; assign
        never creates a binding.
        """
        env = self.find(name)
        if env is None:
            raise LispletUnboundSymbol(name)
        env.vars[name] = value

    def lookup(self, name: Symbol) -> LispValue:
        """Return the value bound to `name`, searching outward.

        Raises LispletUnboundSymbol if not found.
        """
        env = self.find(name)
        if env is None:
            raise LispletUnboundSymbol(name)
        return env.vars[name]

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in this scope."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env: Optional[Environment] = self
            first = True
            while env is not None:
                if not first:
                    buffer.write(" -> ")
                env._write_vars(buffer)
                first = False
                env = env.outer
            buffer.write(">")
            return buffer.getvalue()
