"""
A minimal pygls-based Language Server for Lisplet.

Features:
- Text synchronization and document store
- Diagnostics: syntax errors reported by the reader, with their line
- Hover: builtin signatures and locally defined symbols
- Completion: builtins and top-level definitions
- Document Symbols: from the indexer

The buffer is never evaluated; every feature works from a static index.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from lsprotocol.types import (
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    TEXT_DOCUMENT_HOVER,
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    DocumentSymbol,
    DocumentSymbolParams,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
    SymbolKind,
)
from pygls.server import LanguageServer

from lisplet_lsp.indexer import BUILTIN_SIGNATURES, DocumentIndex, build_index


@dataclass
class DocumentState:
    text: str
    index: DocumentIndex


class LispletLanguageServer(LanguageServer):
    CMD_NAME = "lisplet-ls"
    VERSION = "0.1.0"

    def __init__(self):
        super().__init__(self.CMD_NAME, self.VERSION)
        self.documents: Dict[str, DocumentState] = {}


ls = LispletLanguageServer()


# --- Text sync ---
@ls.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(params: DidOpenTextDocumentParams):
    uri = params.text_document.uri
    _update(uri, params.text_document.text or "")


@ls.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    if params.content_changes:
        text = params.content_changes[-1].text
    else:
        text = ls.documents[uri].text if uri in ls.documents else ""
    _update(uri, text)


@ls.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    ls.documents.pop(uri, None)
    ls.publish_diagnostics(uri, [])


def _update(uri: str, text: str) -> None:
    idx = build_index(text)
    ls.documents[uri] = DocumentState(text=text, index=idx)
    ls.publish_diagnostics(uri, diagnostics_for(idx))


# --- Diagnostics ---
def _line_range(line: int, start: int = 0, length: int = 1) -> Range:
    return Range(
        start=Position(line=line, character=start),
        end=Position(line=line, character=start + length),
    )


def diagnostics_for(idx: DocumentIndex) -> List[Diagnostic]:
    return [
        Diagnostic(
            range=_line_range(problem.line),
            message=problem.message,
            severity=DiagnosticSeverity.Error,
            source=LispletLanguageServer.CMD_NAME,
        )
        for problem in idx.problems
    ]


# --- Hover ---
@ls.feature(TEXT_DOCUMENT_HOVER)
def on_hover(params: HoverParams) -> Optional[Hover]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None

    word = _extract_word_at(state.text, params.position)
    if not word:
        return None

    if word in BUILTIN_SIGNATURES:
        contents = BUILTIN_SIGNATURES[word]
    elif word in state.index.symbols:
        sdef = state.index.symbols[word]
        contents = f"{word} ({sdef.kind}, defined at {sdef.line + 1}:{sdef.col + 1})"
    else:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


# --- Completion ---
@ls.feature(TEXT_DOCUMENT_COMPLETION)
def on_completion(params: CompletionParams) -> CompletionList:
    items: List[CompletionItem] = [
        CompletionItem(label=name, kind=CompletionItemKind.Function, detail=sig)
        for name, sig in BUILTIN_SIGNATURES.items()
    ]
    state = ls.documents.get(params.text_document.uri)
    if state:
        for name, sdef in state.index.symbols.items():
            kind = CompletionItemKind.Function if sdef.kind == "function" else CompletionItemKind.Variable
            items.append(CompletionItem(label=name, kind=kind))
    return CompletionList(is_incomplete=False, items=items)


# --- Document Symbols ---
@ls.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def on_document_symbols(params: DocumentSymbolParams) -> Optional[List[DocumentSymbol]]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    symbols: List[DocumentSymbol] = []
    for name, sdef in state.index.symbols.items():
        rng = _line_range(sdef.line, sdef.col, len(name))
        symbols.append(
            DocumentSymbol(
                name=name,
                kind=SymbolKind.Function if sdef.kind == "function" else SymbolKind.Variable,
                range=rng,
                selection_range=rng,
            )
        )
    return symbols


# --- Helpers ---
def _extract_word_at(text: str, pos: Position) -> Optional[str]:
    lines = text.splitlines(True)
    if pos.line >= len(lines):
        return None
    line = lines[pos.line]
    start = end = pos.character
    while start > 0 and line[start - 1] not in ' \t()";\n\r':
        start -= 1
    while end < len(line) and line[end] not in ' \t()";\n\r':
        end += 1
    return line[start:end] or None


def main() -> None:
    # Run the language server over stdio
    ls.start_io()


if __name__ == "__main__":
    main()
