"""
  Lexer for mal source text.

The tokenizer only finds token boundaries; the reader decides what each token
means. Tokens are plain strings:

    - structural delimiters:  ( ) [ ] { }
    - reader-macro prefixes:  ' ` ~ ~@ @ ^
    - string literals:        "..." (backslash escapes; an unterminated literal
                              at the end of input is still one token)
    - comments:               ; up to the end of the line
    - atoms:                  any other run of non-special, non-blank characters

Whitespace and commas separate tokens and are dropped.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

TOKEN_RE = re.compile(
    r"[\s,]*"
    r"("
    r"~@"  # splice-unquote
    r"|[\[\]{}()'`~^@]"  # single-character tokens
    r'|"(?:\\.|[^\\"])*"?'  # strings, possibly unterminated
    r"|;.*"  # comment to end of line
    r"|[^\s\[\]{}('\"`,;)]+"  # atoms
    r")"
)


def tokenize(source: str) -> Iterator[str]:
    """Token generator: yields each token of `source` in order."""
    for match in TOKEN_RE.finditer(source):
        token = match.group(1)
        if token:
            yield token


def is_comment(token: str) -> bool:
    return token.startswith(";")


class Tokenizer:
    """A lazy token stream with one token of lookahead.

    A stream cannot be rewound; build a new Tokenizer over the same source to
    read it again.
    """

    __slots__ = ("tokens", "buffer")

    def __init__(self, source: str):
        self.tokens: Iterator[str] = tokenize(source)
        self.buffer: list[str] = []

    def peek(self) -> Optional[str]:
        """Return the current token without consuming it, or None at end of input."""
        if not self.buffer:
            token = next(self.tokens, None)
            if token is None:
                return None
            self.buffer.append(token)
        return self.buffer[0]

    def next(self) -> Optional[str]:
        """Consume and return the current token, or None at end of input."""
        if self.buffer:
            return self.buffer.pop()
        return next(self.tokens, None)

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        token = self.next()
        if token is None:
            raise StopIteration
        return token
