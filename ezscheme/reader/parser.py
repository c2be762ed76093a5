"""
  Recursive-descent reader for Scheme source.

Since Scheme code is also data, the parser mimics (read): it turns source
text into values of the data model.

    - booleans -> Boolean
    - numbers  -> Number (radix prefixes #b #o #d #x)
    - identifiers -> Symbol
    - strings  -> String (quotes stripped, no escapes)
    - lists    -> chains of Pair ending in Nil, or in the datum after '.'
    - 'datum   -> (quote datum)

The rules follow section 7.1.2 of R5RS, reordered where convenient.
"""

from __future__ import annotations

from typing import Iterator, Optional

from ezscheme import SExpression
from ezscheme.errors import LexError, ParseError
from ezscheme.reader.lexer import Token, tokenize
from ezscheme.types.atoms import Boolean, Number, String
from ezscheme.types.nil import Nil
from ezscheme.types.pair import Pair, from_list
from ezscheme.types.symbol import Symbol

RADIX = {"b": 2, "o": 8, "d": 10, "x": 16}

QUOTE = Symbol("quote")


class Parser:
    def __init__(self):
        self.text = ""
        self.tokens: Iterator[Token] = iter(())
        self.cur_token: Optional[Token] = None

    def parse(self, text: str) -> list[SExpression]:
        """Parse `text` into the list of its top-level expressions."""
        self.text = text
        self.tokens = tokenize(text)
        self.next_token()
        return self.parse_file()

    def pos_to_coord(self, pos: int) -> tuple[int, int]:
        """Convert an offset into the parsed text to a (line, column) pair."""
        line = self.text.count("\n", 0, pos) + 1
        last_newline = self.text.rfind("\n", 0, pos)
        column = pos - last_newline if last_newline >= 0 else pos
        return line, column

    # --- Token handling ---
    def parse_error(self, msg: str, token: Optional[Token] = None) -> ParseError:
        token = token or self.cur_token
        pos = token.pos if token is not None else len(self.text)
        return ParseError(msg, *self.pos_to_coord(pos))

    def next_token(self) -> None:
        try:
            self.cur_token = next(self.tokens, None)
        except LexError as e:
            raise LexError(e.pos, *self.pos_to_coord(e.pos)) from None

    def match(self, tok_type: str) -> str:
        """Check the current token's type, return its text and advance."""
        if self.cur_token is None:
            raise self.parse_error(f"Expected {tok_type}, found end of input")
        if self.cur_token.type != tok_type:
            raise self.parse_error(
                f"Expected {tok_type}, found {self.cur_token.type} '{self.cur_token.text}'"
            )
        text = self.cur_token.text
        self.next_token()
        return text

    # --- Grammar rules ---
    def parse_file(self) -> list[SExpression]:
        datums = []
        while self.cur_token is not None:
            datums.append(self.datum())
        return datums

    def datum(self) -> SExpression:
        if self.cur_token is None:
            raise self.parse_error("Unexpected end of input")
        if self.cur_token.type == "lparen":
            return self.list()
        if self.cur_token.type == "quote":
            return self.abbreviation()
        return self.simple_datum()

    def simple_datum(self) -> SExpression:
        tok = self.cur_token
        match tok.type:
            case "boolean":
                value = Boolean(tok.text == "#t")
            case "number":
                value = Number(self._parse_number(tok))
            case "identifier":
                value = Symbol(tok.text)
            case "string":
                value = String(tok.text[1:-1])
            case _:
                raise self.parse_error(f"Unexpected token '{tok.text}'")
        self.next_token()
        return value

    def _parse_number(self, tok: Token) -> int:
        text, base = tok.text, 10
        if text.startswith("#"):
            base = RADIX.get(text[1:2].lower())
            text = text[2:]
            if base is None:
                raise self.parse_error("Invalid number", tok)
        try:
            return int(text, base)
        except ValueError:
            raise self.parse_error("Invalid number", tok) from None

    def list(self) -> SExpression:
        # Items are collected into a Python list first, then folded right to
        # left into Pairs. dot_idx is the number of items seen before '.'.
        self.match("lparen")
        items: list[SExpression] = []
        dot_idx = -1

        while True:
            tok = self.cur_token
            if tok is None:
                raise self.parse_error("Unmatched parentheses at end of input")
            if tok.type == "rparen":
                break
            if tok.type == "identifier" and tok.text == ".":
                if dot_idx >= 0:
                    raise self.parse_error("Invalid usage of '.'", tok)
                # '( . a)' has no leading items and reads as the tail itself
                dot_idx = len(items)
                self.next_token()
                continue
            items.append(self.datum())

        if dot_idx >= 0 and dot_idx != len(items) - 1:
            raise self.parse_error("Invalid location for '.' in list")
        self.match("rparen")

        if dot_idx >= 0:
            return from_list(items[:-1], items[-1])
        return from_list(items)

    def abbreviation(self) -> SExpression:
        self.match("quote")
        return Pair(QUOTE, Pair(self.datum(), Nil))


def parse(text: str) -> list[SExpression]:
    return Parser().parse(text)


def parse_one(text: str) -> SExpression:
    """Parse `text` and return its first expression, or Nil if there is none."""
    exprs = parse(text)
    return exprs[0] if exprs else Nil
