"""
Document indexer for Lisplet files.

Scans top-level forms with the interpreter's own scanner to find
`(define name ...)` definitions, and runs the reader over the whole text to
collect the first syntax error. Nothing is evaluated. Positions are 0-based,
as LSP expects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from lisplet.reader.parser import parse_all
from lisplet.reader.scanner import Token, TokenType, scan
from lisplet.types.errors import LispletSyntaxError


@dataclass
class SymbolDef:
    name: str
    kind: str  # "var" | "function"
    line: int
    col: int


@dataclass
class SyntaxProblem:
    message: str
    line: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    problems: List[SyntaxProblem] = field(default_factory=list)


def _position_from_offset(text: str, offset: int) -> Tuple[int, int]:
    # Return (line, col), 0-based
    line = text.count("\n", 0, offset)
    last_nl = text.rfind("\n", 0, offset)
    col = offset if last_nl == -1 else offset - last_nl - 1
    return line, col


def _is(token: Optional[Token], kind: TokenType, text: Optional[str] = None) -> bool:
    return token is not None and token.kind is kind and (text is None or token.text == text)


def _collect_definitions(text: str, idx: DocumentIndex) -> None:
    tokens = list(scan(text))
    depth = 0
    for i, tok in enumerate(tokens):
        if tok.kind is TokenType.OPEN_PAREN:
            if depth == 0:
                head, name, after, after2 = (tokens[i + k] if i + k < len(tokens) else None for k in range(1, 5))
                if _is(head, TokenType.SYMBOL, "define") and _is(name, TokenType.SYMBOL):
                    is_fn = _is(after, TokenType.OPEN_PAREN) and _is(after2, TokenType.SYMBOL, "lambda")
                    line, col = _position_from_offset(text, name.offset)
                    idx.symbols[name.text] = SymbolDef(
                        name=name.text,
                        kind="function" if is_fn else "var",
                        line=line,
                        col=col,
                    )
            depth += 1
        elif tok.kind is TokenType.CLOSE_PAREN:
            depth = max(depth - 1, 0)


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    _collect_definitions(text, idx)
    try:
        for _ in parse_all(text):
            pass
    except LispletSyntaxError as e:
        line = (e.line or 1) - 1
        idx.problems.append(SyntaxProblem(message=str(e), line=line))
    return idx


# Builtin signatures for quick hover/completion without eval
BUILTIN_SIGNATURES: Dict[str, str] = {
    "+": "(+ &rest nums)",
    "-": "(- x &rest nums)",
    "*": "(* &rest nums)",
    "/": "(/ x &rest nums)",
    "%": "(% n d)",
    "abs": "(abs n)",
    "max": "(max x &rest nums)",
    "min": "(min x &rest nums)",
    "<": "(< a b &rest nums)",
    "<=": "(<= a b &rest nums)",
    ">": "(> a b &rest nums)",
    ">=": "(>= a b &rest nums)",
    "=": "(= a b &rest nums)",
    "equal?": "(equal? a b &rest xs)",
    "&&": "(&& &rest bools)",
    "||": "(|| &rest bools)",
    "!": "(! b)",
    "and": "(and &rest bools)",
    "or": "(or &rest bools)",
    "not": "(not b)",
    "car": "(car xs)",
    "cdr": "(cdr xs)",
    "cons": "(cons x xs)",
    "list": "(list &rest xs)",
}
