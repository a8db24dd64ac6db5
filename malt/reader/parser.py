"""
  malt Reader: lexer and parser

- Streaming, lazy parsing
- Emits Python primitives:

    - nil -> Nil
    - true / false -> bool
    - integers -> int
    - strings -> str
    - lists -> Python list
    - everything else -> Symbol
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional

from malt import SExpression
from malt.types.errors import MaltParseError
from malt.types.nil import Nil
from malt.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"[\s,]*(?:"
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*"?)'  # double-quoted strings, possibly unterminated
    r'|(?P<symbol>[^\s(),;"]+)'  # fallback: symbols and numbers
    r")"
)

INT_RE = re.compile(r"-?[0-9]+")

ESCAPES: dict[str, str] = {
    "n": "\n",
    '"': '"',
    "\\": "\\",
}

LITERALS = {
    "nil": Nil,
    "true": True,
    "false": False,
}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None or m.lastgroup is None:
            # only separators were left
            break
        pos = m.end()
        if m.lastgroup == "comment":
            continue
        yield m.lastgroup, m.group(m.lastgroup)


def unescape(token: str) -> str:
    """Decode the body of a double-quoted string token."""
    if len(token) < 2 or not token.endswith('"') or _odd_backslashes_before_end(token):
        raise MaltParseError("expected '\"', got EOF")
    body = token[1:-1]
    out = []
    i = 0
    while i < len(body):
        c = body[i]
        if c == "\\":
            nxt = body[i + 1]
            if nxt not in ESCAPES:
                raise MaltParseError(f"unknown escape sequence \\{nxt}")
            out.append(ESCAPES[nxt])
            i += 2
        else:
            out.append(c)
            i += 1
    return "".join(out)


def _odd_backslashes_before_end(token: str) -> bool:
    # "abc\" is unterminated: the closing quote is escaped
    count = 0
    i = len(token) - 2
    while i > 0 and token[i] == "\\":
        count += 1
        i -= 1
    return count % 2 == 1


def parse_atom(token: str) -> SExpression:
    if token in LITERALS:
        return LITERALS[token]
    if INT_RE.fullmatch(token):
        return int(token)
    return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterable[tuple[str, str]]):
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

    def parse_expr(self) -> SExpression:
        """Parse one form. Returns None (not Nil) at end of input."""
        tok_type, tok_val = self.advance()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            return parse_atom(tok_val)

        if tok_type == "string":
            return unescape(tok_val)

        if tok_type == "lparen":
            items = []
            while True:
                nxt, _ = self.peek()
                if nxt is None:
                    raise MaltParseError("expected ')', got EOF")
                if nxt == "rparen":
                    self.advance()
                    return items
                items.append(self.parse_expr())

        if tok_type == "rparen":
            raise MaltParseError("unexpected ')'")

        raise MaltParseError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read_str(source: str) -> SExpression:
    """Read the first form in `source`; None if it holds only whitespace/comments."""
    return TokenStream(lex(source)).parse_expr()


def read_all(source: str) -> list[SExpression]:
    """Read every form in `source`."""
    return list(TokenStream(lex(source)).parse_all())
