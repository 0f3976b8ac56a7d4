"""
  Lisp Scanner

A hand-rolled finite-state tokenizer. Each lexical class is a state function
that consumes code points and returns the next state; ``None`` stops the
machine. Tokens are produced lazily as the states emit them.

    (define x 1.5) ; comment
    -> OPEN_PAREN SYMBOL SYMBOL NUMBER_LITERAL CLOSE_PAREN [COMMENT] EOF

Line numbers are 1-based. NEW_LINE and COMMENT tokens exist in the raw stream
(`Scanner.tokens`) so that line tracking is explicit, but `scan` drops them.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterator, Optional


class TokenType(Enum):
    EOF = -1
    COMMENT = 0
    OPEN_PAREN = 1
    CLOSE_PAREN = 2
    NEW_LINE = 3
    STRING_LITERAL = 4
    NUMBER_LITERAL = 5
    SYMBOL = 6


@dataclass(frozen=True)
class Token:
    line: int
    kind: TokenType
    text: str
    # Character offset of the token in the source; not part of token identity.
    offset: int = field(default=0, compare=False)

    def __str__(self) -> str:
        if self.kind in (TokenType.EOF, TokenType.NEW_LINE):
            return f"<{self.kind.name}>"
        return f"<{self.kind.name}: {self.text}>"


# Returned by Scanner.next() once the input is exhausted.
EOF_CHAR = ""

DELIMITERS = frozenset('();"')

StateFn = Callable[["Scanner"], Optional["StateFn"]]


class Scanner:
    def __init__(self, source: str):
        self.source = source
        self.start = 0
        self.pos = 0
        self.width = 0
        self.line = 1
        self.start_line = 1
        self.pending: deque[Token] = deque()

    # --- cursor primitives ---
    def next(self) -> str:
        if self.pos >= len(self.source):
            self.width = 0
            return EOF_CHAR
        ch = self.source[self.pos]
        self.width = 1
        self.pos += 1
        return ch

    def peek(self) -> str:
        ch = self.next()
        self.backup()
        return ch

    def backup(self) -> None:
        self.pos -= self.width
        self.width = 0

    def ignore(self) -> None:
        self.start = self.pos
        self.start_line = self.line

    def emit(self, kind: TokenType, text: Optional[str] = None) -> None:
        if text is None:
            text = self.source[self.start : self.pos]
        self.pending.append(Token(self.start_line, kind, text, self.start))
        self.ignore()

    def tokens(self) -> Iterator[Token]:
        """Run the state machine, yielding every token including NEW_LINE/COMMENT."""
        state: Optional[StateFn] = lex_start
        while state is not None:
            state = state(self)
            while self.pending:
                yield self.pending.popleft()


def is_delimiter(ch: str) -> bool:
    return ch == EOF_CHAR or ch.isspace() or ch in DELIMITERS


# --- states ---
def lex_start(s: Scanner) -> Optional[StateFn]:
    ch = s.next()

    if ch == EOF_CHAR:
        s.emit(TokenType.EOF)
        return None
    if ch == "\n":
        s.emit(TokenType.NEW_LINE)
        s.line += 1
        s.start_line = s.line
        return lex_start
    if ch.isspace():
        return lex_space
    if ch == "(":
        s.emit(TokenType.OPEN_PAREN)
        return lex_start
    if ch == ")":
        s.emit(TokenType.CLOSE_PAREN)
        return lex_start
    if ch == ";":
        return lex_comment
    if ch == '"':
        s.ignore()
        return lex_string
    if ch == ".":
        return lex_fraction if s.peek().isdecimal() else lex_symbol
    if ch == "-":
        nxt = s.peek()
        return lex_number if nxt.isdecimal() or nxt == "." else lex_symbol
    if ch.isdecimal():
        return lex_number
    return lex_symbol


def lex_space(s: Scanner) -> StateFn:
    while s.peek() != "\n" and s.peek().isspace():
        s.next()
    s.ignore()
    return lex_start


def lex_comment(s: Scanner) -> StateFn:
    while s.peek() not in ("\n", EOF_CHAR):
        s.next()
    s.emit(TokenType.COMMENT)
    return lex_start


def lex_string(s: Scanner) -> Optional[StateFn]:
    while True:
        ch = s.next()
        if ch == EOF_CHAR:
            # Unterminated: the EOF text keeps the opening quote so the reader
            # can tell it apart from a clean end of input.
            s.emit(TokenType.EOF, '"' + s.source[s.start : s.pos])
            return None
        if ch == "\\":
            if s.next() == "\n":
                s.line += 1
            continue
        if ch == "\n":
            s.line += 1
        elif ch == '"':
            s.backup()
            s.emit(TokenType.STRING_LITERAL)
            s.next()
            s.ignore()
            return lex_start


def lex_number(s: Scanner) -> StateFn:
    while s.peek().isdecimal():
        s.next()
    if s.peek() == ".":
        s.next()
        return lex_fraction
    s.emit(TokenType.NUMBER_LITERAL)
    return lex_start


def lex_fraction(s: Scanner) -> StateFn:
    while s.peek().isdecimal():
        s.next()
    s.emit(TokenType.NUMBER_LITERAL)
    return lex_start


def lex_symbol(s: Scanner) -> StateFn:
    while not is_delimiter(s.peek()):
        s.next()
    s.emit(TokenType.SYMBOL)
    return lex_start


def scan(source: str) -> Iterator[Token]:
    """Yield the tokens of `source` with NEW_LINE and COMMENT removed.

    The final token is always EOF.
    """
    for token in Scanner(source).tokens():
        if token.kind in (TokenType.NEW_LINE, TokenType.COMMENT):
            continue
        yield token
