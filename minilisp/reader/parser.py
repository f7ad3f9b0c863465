"""
  MiniLisp Reader

Recursive-descent reader working directly over the source text with a
cursor; there is no separate token stream.

    form   := "'" form          -> (quote form)
            | "(" form* ")"
            | atom
    atom   := run of characters other than space, tab, newline, ( ) '

An atom matching -?[0-9]+ reads as a Number; anything else (including a lone
"-") is interned as a Symbol. There are no comments, strings or floats.
"""

from __future__ import annotations

import re
from typing import Iterator

from minilisp import SExpression
from minilisp.types.errors import MiniLispParseError
from minilisp.types.symbol import SymbolTable
from minilisp.types.value import List, Number

WHITESPACE = frozenset(" \t\n")
DELIMITERS = WHITESPACE | frozenset("()'")

NUMBER_RE = re.compile(r"-?[0-9]+")


class Reader:
    """Reads forms one at a time from `source`, advancing `pos` past each."""

    __slots__ = ("source", "pos", "symbols")

    def __init__(self, source: str, symbols: SymbolTable, pos: int = 0):
        self.source = source
        self.pos = pos
        self.symbols = symbols

    def skip_whitespace(self) -> None:
        n = len(self.source)
        while self.pos < n and self.source[self.pos] in WHITESPACE:
            self.pos += 1

    def at_end(self) -> bool:
        self.skip_whitespace()
        return self.pos >= len(self.source)

    def parse_expr(self) -> SExpression:
        self.skip_whitespace()
        if self.pos >= len(self.source):
            raise MiniLispParseError("Unexpected end of input")

        ch = self.source[self.pos]
        if ch == "'":
            self.pos += 1
            quoted = self.parse_expr()
            return List((self.symbols.intern("quote"), quoted))
        if ch == "(":
            return self.parse_list()
        return self.parse_atom()

    def parse_list(self) -> List:
        self.pos += 1  # consume '('
        items: list[SExpression] = []
        while True:
            self.skip_whitespace()
            if self.pos >= len(self.source):
                raise MiniLispParseError("Unterminated list")
            if self.source[self.pos] == ")":
                self.pos += 1
                return List(tuple(items))
            items.append(self.parse_expr())

    def parse_atom(self) -> SExpression:
        start = self.pos
        n = len(self.source)
        while self.pos < n and self.source[self.pos] not in DELIMITERS:
            self.pos += 1
        if self.pos == start:
            raise MiniLispParseError(f"Empty atom at position {start}")

        text = self.source[start:self.pos]
        if NUMBER_RE.fullmatch(text):
            return Number(int(text))
        return self.symbols.intern(text)

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.parse_expr()


def parse(source: str, symbols: SymbolTable) -> SExpression:
    """Read the first form of `source`; trailing text is left unread."""
    return Reader(source, symbols).parse_expr()


def parse_all(source: str, symbols: SymbolTable) -> list[SExpression]:
    """Read every form in `source`."""
    return list(Reader(source, symbols).parse_all())
