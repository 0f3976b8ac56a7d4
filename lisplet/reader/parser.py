"""
  Lisp Reader

Consumes the scanner's token stream and builds the expression tree:

    - lists       -> Python list
    - numbers     -> float (a literal float() rejects reads as Nil)
    - strings     -> str, with \\" \\\\ \\n \\t decoded
    - #t / #f     -> True / False
    - identifiers -> Symbol
"""

from __future__ import annotations

from typing import Iterable, Iterator

from lisplet import SExpression
from lisplet.reader.scanner import Token, TokenType, scan
from lisplet.types.errors import LispletSyntaxError
from lisplet.types.nil import Nil
from lisplet.types.symbol import Symbol

ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    '"': '"',
    "\\": "\\",
}


def decode_string(text: str) -> str:
    out = []
    chars = iter(text)
    for ch in chars:
        if ch == "\\":
            nxt = next(chars, "")
            out.append(ESCAPES.get(nxt, nxt))
        else:
            out.append(ch)
    return "".join(out)


def atom(token: Token) -> SExpression:
    if token.kind is TokenType.STRING_LITERAL:
        return decode_string(token.text)
    if token.kind is TokenType.NUMBER_LITERAL:
        try:
            return float(token.text)
        except ValueError:
            return Nil
    if token.text == "#t":
        return True
    if token.text == "#f":
        return False
    return Symbol(token.text)


class TokenStream:
    def __init__(self, token_iter: Iterable[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []
        self.last_line = 1

    def peek(self) -> Token:
        if not self.buffer:
            token = next(self.tokens, None)
            if token is None:
                token = Token(self.last_line, TokenType.EOF, "")
            self.buffer.append(token)
        return self.buffer[0]

    def advance(self) -> Token:
        token = self.peek()
        if token.kind is not TokenType.EOF:
            self.buffer.pop(0)
            self.last_line = token.line
        return token

    def at_end(self) -> bool:
        return self.peek().kind is TokenType.EOF

    def finish(self) -> None:
        """Raise if input ended inside a string literal."""
        token = self.peek()
        if token.kind is TokenType.EOF and token.text.startswith('"'):
            raise LispletSyntaxError("unterminated string literal", token.line)

    def parse_expr(self) -> SExpression:
        token = self.advance()

        if token.kind is TokenType.EOF:
            self.finish()
            raise LispletSyntaxError("unexpected end of input", token.line)

        if token.kind is TokenType.OPEN_PAREN:
            items = []
            while self.peek().kind is not TokenType.CLOSE_PAREN:
                if self.at_end():
                    self.finish()
                    raise LispletSyntaxError("missing closing parenthesis", token.line)
                items.append(self.parse_expr())
            self.advance()
            return items

        if token.kind is TokenType.CLOSE_PAREN:
            raise LispletSyntaxError("unexpected ')'", token.line)

        return atom(token)

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.parse_expr()
        self.finish()


def parse(source: str) -> SExpression:
    """Read exactly one expression from `source`."""
    stream = TokenStream(scan(source))
    expr = stream.parse_expr()
    if not stream.at_end():
        raise LispletSyntaxError("unexpected trailing input", stream.peek().line)
    stream.finish()
    return expr


def parse_all(source: str) -> Iterator[SExpression]:
    """Lazily read every top-level expression in `source`."""
    return TokenStream(scan(source)).parse_all()
