"""
  schemer Reader: lexer and recursive-descent parser

- Lexing is longest-match; on a tie the earlier lexeme in `LEXEMES` wins,
  so "-5" is an integer while "-5a" and "-" are identifiers.
- Parsing builds `Value` trees and tracks quotation depth:

    - identifiers   -> VARIABLE at depth 0, SYMBOL once quoted
    - numbers       -> INTEGER / REAL leaves carrying their literal text
    - strings       -> SYMBOL carrying the raw quoted text
    - 'x            -> x read one level deeper (quote is not a node)
    - (a b)         -> LIST at depth 0 (code)
    - '(a b)        -> SYMBOL list terminated by EMPTY_LIST (data)
    - '()           -> EMPTY_LIST
"""

from __future__ import annotations

import re
from typing import Iterator, NamedTuple, Optional

from schemer.diagnostics import report
from schemer.errors import ReadSyntaxError
from schemer.types.value import EMPTY_LIST, Kind, Value


class Token(NamedTuple):
    kind: str
    text: str


_SYMBOL_CHARS = r"A-Za-z*<=>!?:$%_&~^+\-./"

LEXEMES: tuple[tuple[str, re.Pattern], ...] = (
    ("integer", re.compile(r"[-+]?[0-9]+")),
    ("real", re.compile(r"[-+]?(?:[0-9]+\.[0-9]*|[0-9]*\.[0-9]+)")),
    ("identifier", re.compile(rf"[0-9]*(?:[{_SYMBOL_CHARS}]+[0-9]*)+|#'*[A-Za-z]*")),
    ("string", re.compile(r'"[^"]*"')),
    ("lparen", re.compile(r"\(")),
    ("rparen", re.compile(r"\)")),
    ("quote", re.compile(r"'")),
)

_SKIP_RE = re.compile(r"(?:[ \t\r\n\f]+|;[^\n]*)+")


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Token(kind, text) in source order."""
    pos = 0
    n = len(source)
    while pos < n:
        skip = _SKIP_RE.match(source, pos)
        if skip:
            pos = skip.end()
            if pos >= n:
                break

        best: Optional[Token] = None
        for kind, pattern in LEXEMES:
            m = pattern.match(source, pos)
            if m and m.end() > pos and (best is None or len(m.group()) > len(best.text)):
                best = Token(kind, m.group())
        if best is None:
            best = Token("error", source[pos])
        yield best
        pos += len(best.text)


class Reader:
    """Reads top-level forms from loaded text, one per iteration step.

    Iterating stops at the end of the tokens, or at the first read error,
    which is reported and discards the rest of the loaded text.
    """

    def __init__(self, source: str = ""):
        self.tokens: list[Token] = []
        self.index = 0
        self.load(source)

    def load(self, source: str) -> None:
        """Replace the token sequence and reset the read position."""
        self.tokens = list(lex(source))
        self.index = 0

    def peek(self) -> Optional[Token]:
        if self.index >= len(self.tokens):
            return None
        return self.tokens[self.index]

    def advance(self) -> Optional[Token]:
        tok = self.peek()
        if tok is not None:
            self.index += 1
        return tok

    def at_end(self) -> bool:
        return self.index >= len(self.tokens)

    def read(self, quote_depth: int = 0) -> Value:
        tok = self.advance()
        if tok is None:
            raise ReadSyntaxError("unexpected end of input")

        kind, text = tok
        if kind == "integer":
            return Value(Kind.INTEGER, text, (), quote_depth)
        if kind == "real":
            return Value(Kind.REAL, text, (), quote_depth)
        if kind == "identifier":
            return Value(Kind.VARIABLE if quote_depth == 0 else Kind.SYMBOL, text, (), quote_depth)
        if kind == "string":
            return Value(Kind.SYMBOL, text, (), quote_depth)
        if kind == "quote":
            if self.at_end():
                raise ReadSyntaxError("expected an element for quoting \"'\"")
            return self.read(quote_depth + 1)
        if kind == "lparen":
            return self._read_list(quote_depth)
        if kind == "rparen":
            raise ReadSyntaxError("unexpected `)`")
        raise ReadSyntaxError(f"unexpected character `{text}`")

    def _read_list(self, quote_depth: int) -> Value:
        elements: list[Value] = []
        while True:
            tok = self.peek()
            if tok is None:
                raise ReadSyntaxError("expected a `)` to close `(`")
            if tok.kind == "rparen":
                self.advance()
                break
            elements.append(self.read(quote_depth))

        if quote_depth == 0:
            return Value(Kind.LIST, "", tuple(elements), 0)
        if quote_depth == 1 and not elements:
            return EMPTY_LIST
        if elements:
            elements.append(EMPTY_LIST)
        return Value(Kind.SYMBOL, "", tuple(elements), quote_depth)

    def __iter__(self) -> Reader:
        return self

    def __next__(self) -> Value:
        if self.at_end():
            raise StopIteration
        try:
            return self.read()
        except ReadSyntaxError as err:
            report(err)
            self.index = len(self.tokens)
            raise StopIteration from None


def read_all(source: str) -> Iterator[Value]:
    """Load `source` into a fresh Reader and yield its top-level forms."""
    yield from Reader(source)
