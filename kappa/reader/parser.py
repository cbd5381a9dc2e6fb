"""
  Kappa Reader: Lexer and Parser

- Streaming, lazy parsing over a token generator
- Emits Kappa values directly:

    - nil / true / false -> Nil / True / False
    - integers -> int
    - strings -> str (escapes \\" \\\\ \\n)
    - :name -> Keyword
    - other atoms -> Symbol
    - ( ... ) -> List
    - [ ... ] -> Vector
    - { ... } -> dict (keys must be strings or keywords)
    - @form -> (deref form)
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from kappa import SExpression
from kappa.errors import KappaSyntaxError, KappaTypeError
from kappa.types import Keyword, List, Nil, Symbol, Vector, make_map


TOKEN_RE = re.compile(
    r"[\s,]*(?:"
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<deref>@)"  # @form -> (deref form)
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbracket>\[)"  # [
    r"|(?P<rbracket>\])"  # ]
    r"|(?P<lbrace>\{)"  # {
    r"|(?P<rbrace>\})"  # }
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<bad_string>"(?:\\.|[^\\"])*)'  # unterminated string
    r'|(?P<symbol>[^\s\[\]{}()\'"`,;@]+)'  # fallback: atoms
    r")?",
    re.DOTALL,
)

INT_RE = re.compile(r"-?[0-9]+")
ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)

CLOSERS = {"lparen": "rparen", "lbracket": "rbracket", "lbrace": "rbrace"}
CLOSER_CHARS = {"rparen": ")", "rbracket": "]", "rbrace": "}"}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m or m.end() == pos:
            raise KappaSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        kind = m.lastgroup
        if kind is None:
            if pos < n:
                raise KappaSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
            break
        if kind == "comment":
            continue
        if kind == "bad_string":
            raise KappaSyntaxError("expected '\"', got EOF")
        yield kind, m.group(kind)


def unescape(token: str) -> str:
    """Strip the quotes from a string token and resolve its escapes."""
    return ESCAPE_RE.sub(lambda m: "\n" if m.group(1) == "n" else m.group(1), token[1:-1])


def read_atom(token: str) -> SExpression:
    if INT_RE.fullmatch(token):
        try:
            return int(token)
        except ValueError as ex:
            # Raised past sys.get_int_max_str_digits()
            raise KappaSyntaxError(f"Integer literal too long: {ex}") from ex
    if token == "nil":
        return Nil
    if token == "true":
        return True
    if token == "false":
        return False
    if token.startswith(":"):
        return Keyword(token[1:])
    return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> SExpression | None:
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type in CLOSERS:
            self.advance()
            items = self._parse_until(CLOSERS[tok_type])
            if tok_type == "lparen":
                return List(items)
            if tok_type == "lbracket":
                return Vector(items)
            try:
                return make_map(items)
            except KappaTypeError as ex:
                raise KappaSyntaxError(str(ex)) from ex

        if tok_type in CLOSER_CHARS:
            raise KappaSyntaxError(f"Unexpected '{tok_val}'")

        if tok_type == "deref":
            self.advance()
            target = self.parse_expr()
            if target is None:
                raise KappaSyntaxError("expected form after '@', got EOF")
            return List((Symbol("deref"), target))

        self.advance()
        if tok_type == "string":
            return unescape(tok_val)
        return read_atom(tok_val)

    def _parse_until(self, closer: str) -> list[SExpression]:
        items = []
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                raise KappaSyntaxError(f"expected '{CLOSER_CHARS[closer]}', got EOF")
            if tok_type == closer:
                self.advance()
                return items
            items.append(self.parse_expr())

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read_str(source: str) -> SExpression | None:
    """Parse the first form in `source`; None when there is nothing to read."""
    return TokenStream(lex(source)).parse_expr()
