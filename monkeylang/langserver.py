"""Monkey Language Server.

This server provides basic language features for Monkey source files using
`pygls`. It reuses the Monkey lexer and parser to publish syntax
diagnostics and to build a simple index of top-level ``let`` bindings
supporting definition lookup, hover information, and document symbols.


File: langserver.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from lsprotocol.types import (
    TEXT_DOCUMENT_DEFINITION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    TEXT_DOCUMENT_HOVER,
    DefinitionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    DocumentSymbol,
    DocumentSymbolParams,
    Hover,
    HoverParams,
    Location,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
    SymbolKind,
)
from pygls.server import LanguageServer

from monkeylang.lexer import Lexer
from monkeylang.nodes import FunctionLiteral, LetStatement
from monkeylang.parser import Diagnostic as ParseDiagnostic
from monkeylang.parser import Parser

logger = logging.getLogger(__name__)


@dataclass
class MonkeySymbol:
    """Represents a top-level binding in a Monkey file."""

    name: str
    kind: SymbolKind
    uri: str
    line: int
    column: int
    detail: str

    @property
    def range(self) -> Range:
        return Range(
            Position(self.line, self.column),
            Position(self.line, self.column + len(self.name)),
        )


def collect_symbols(uri: str, text: str) -> tuple[List[MonkeySymbol], List[ParseDiagnostic]]:
    """
    Parse ``text`` and extract top-level ``let`` bindings.

    Returns:
        list[MonkeySymbol]: Bindings in source order, with 0-based positions.
        list[Diagnostic]: The parser's diagnostics.
    """
    parser = Parser(Lexer(text))
    program = parser.parse_program()
    symbols: List[MonkeySymbol] = []
    for stmt in program.statements:
        if not isinstance(stmt, LetStatement):
            continue
        name_tok = stmt.name.token
        if isinstance(stmt.value, FunctionLiteral):
            kind = SymbolKind.Function
        else:
            kind = SymbolKind.Variable
        symbols.append(
            MonkeySymbol(
                stmt.name.value,
                kind,
                uri,
                name_tok.line - 1,
                name_tok.column - 1,
                stmt.to_text(),
            )
        )
    return symbols, parser.diagnostics


def to_lsp_diagnostics(diagnostics: List[ParseDiagnostic]) -> List[Diagnostic]:
    """
    Convert parser diagnostics (1-based positions) into LSP diagnostics.
    """
    result: List[Diagnostic] = []
    for diag in diagnostics:
        start = Position(max(diag.line - 1, 0), max(diag.column - 1, 0))
        end = Position(start.line, start.character + 1)
        result.append(
            Diagnostic(
                range=Range(start, end),
                message=diag.message,
                severity=DiagnosticSeverity.Error,
                source="monkey",
            )
        )
    return result


class MonkeyLanguageServer(LanguageServer):
    """Language server for Monkey source files."""

    def __init__(self) -> None:
        super().__init__("monkey-ls", "v0.1")
        self.symbols_by_uri: Dict[str, List[MonkeySymbol]] = {}
        self.global_symbols: Dict[str, List[MonkeySymbol]] = {}

    def update_index(self, uri: str, text: str) -> List[Diagnostic]:
        """
        Parse ``text``, update the symbol index for ``uri`` and return the
        diagnostics to publish.
        """
        symbols, diagnostics = collect_symbols(uri, text)
        self.symbols_by_uri[uri] = symbols
        self._rebuild_global_index()
        logger.debug("indexed %s: %d symbol(s), %d error(s)", uri, len(symbols), len(diagnostics))
        return to_lsp_diagnostics(diagnostics)

    def _rebuild_global_index(self) -> None:
        self.global_symbols.clear()
        for syms in self.symbols_by_uri.values():
            for sym in syms:
                self.global_symbols.setdefault(sym.name, []).append(sym)

    def lookup(self, name: str, uri: Optional[str] = None) -> Optional[MonkeySymbol]:
        """
        Find the binding for ``name``, preferring the document ``uri``.
        """
        matches = self.global_symbols.get(name)
        if not matches:
            return None
        for sym in matches:
            if sym.uri == uri:
                return sym
        return matches[0]


lang_server = MonkeyLanguageServer()


def _refresh(ls: MonkeyLanguageServer, uri: str, text: str) -> None:
    diagnostics = ls.update_index(uri, text)
    ls.publish_diagnostics(uri, diagnostics)


@lang_server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: MonkeyLanguageServer, params: DidOpenTextDocumentParams) -> None:
    """Index a document and publish its diagnostics when it is opened."""
    _refresh(ls, params.text_document.uri, params.text_document.text)


@lang_server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: MonkeyLanguageServer, params: DidChangeTextDocumentParams) -> None:
    """Re-index a document when it changes."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    _refresh(ls, doc.uri, doc.source)


@lang_server.feature(TEXT_DOCUMENT_DEFINITION)
def definition(ls: MonkeyLanguageServer, params: DefinitionParams):
    """Return the binding location for the name under the cursor."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    word = doc.word_at_position(params.position)
    if not word:
        return None
    sym = ls.lookup(word, doc.uri)
    if sym is None:
        return None
    return Location(uri=sym.uri, range=sym.range)


@lang_server.feature(TEXT_DOCUMENT_HOVER)
def hover(ls: MonkeyLanguageServer, params: HoverParams) -> Optional[Hover]:
    """Show the canonical text of the binding under the cursor."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    word = doc.word_at_position(params.position)
    if not word:
        return None
    sym = ls.lookup(word, doc.uri)
    if sym is None:
        return None
    contents = MarkupContent(kind=MarkupKind.PlainText, value=sym.detail)
    return Hover(contents=contents)


@lang_server.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def document_symbols(ls: MonkeyLanguageServer, params: DocumentSymbolParams):
    """Return top-level bindings for the given document."""
    symbols = ls.symbols_by_uri.get(params.text_document.uri, [])
    return [
        DocumentSymbol(
            name=sym.name,
            kind=sym.kind,
            range=sym.range,
            selection_range=sym.range,
            detail=sym.detail,
        )
        for sym in symbols
    ]


def main() -> None:
    """Start the language server."""
    lang_server.start_io()


if __name__ == "__main__":
    main()
