from __future__ import annotations

from typing import Any, Optional


class LispletError(Exception):
    """ Base class for all Lisplet errors"""
    pass


class LispletSyntaxError(LispletError):
    """ Raised when the token stream or a special form is malformed"""

    def __init__(self, message: str, line: Optional[int] = None):
        self.message = message
        self.line = line
        if line is None:
            super().__init__(f"Syntax Error: {message}")
        else:
            super().__init__(f"Syntax Error: Line {line}: {message}")


class LispletUnboundSymbol(LispletError):
    """ Raised when a symbol is not bound anywhere in the environment chain"""

    def __init__(self, symbol: Any):
        self.symbol = symbol
        super().__init__(f"'{symbol}' is not defined")


class LispletTypeError(LispletError):
    """ Raised when a builtin receives an argument of the wrong kind"""

    def __init__(self, procedure: str, received: str, expected: str):
        self.procedure = procedure
        self.received = received
        self.expected = expected
        super().__init__(
            f"Type Error: {procedure}: received {received}, expected {expected}"
        )


class LispletArityError(LispletError):
    """ Raised when a procedure is called with the wrong number of arguments"""

    def __init__(
        self,
        message: str,
        expected: Optional[int] = None,
        actual: Optional[int] = None,
    ):
        self.expected = expected
        self.actual = actual
        super().__init__(message)


class LispletNotCallable(LispletError):
    """ Raised when the operator of an application is not a procedure"""

    def __init__(self, value: Any):
        from lisplet.printer import to_string

        self.value = value
        super().__init__(f"{to_string(value)} is not callable")


class LispletDivisionByZero(LispletError):
    """ Raised when / or % is given a zero divisor"""
