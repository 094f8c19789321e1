"""
  mal Reader

Recursive-descent parser over a Tokenizer, emitting the expression tree:

    - nil             -> Nil
    - true / false    -> bool
    - integers        -> int (signed 64-bit)
    - :name           -> Keyword
    - "text"          -> str (escapes decoded)
    - ( ... )         -> List
    - [ ... ]         -> Vector
    - { ... }         -> MapLiteral
    - 'x `x ~x ~@x @x -> (quote x), (quasiquote x), (unquote x),
                         (splice-unquote x), (deref x)
    - ^meta form      -> (with-meta form meta)
    - anything else   -> Symbol

Comments are skipped wherever they appear.
"""

from __future__ import annotations

import re
from typing import Iterator

from mal import SExpression
from mal.errors import MalformedQuoteOrMeta, UnexpectedEndOfInput, UnexpectedToken
from mal.reader.tokenizer import Tokenizer, is_comment
from mal.types.integer import fits_int64
from mal.types.nil import Nil
from mal.types.sequences import List, MapLiteral, Vector
from mal.types.symbol import Keyword, Symbol

INT_RE = re.compile(r"-?[0-9]+")
STRING_RE = re.compile(r'"(?:\\.|[^\\"])*"')
ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)

SEQUENCES: dict[str, tuple[str, type]] = {
    "(": (")", List),
    "[": ("]", Vector),
    "{": ("}", MapLiteral),
}
CLOSERS = frozenset(closer for closer, _ in SEQUENCES.values())

QUOTE_FORMS: dict[str, Symbol] = {
    "'": Symbol("quote"),
    "`": Symbol("quasiquote"),
    "~": Symbol("unquote"),
    "~@": Symbol("splice-unquote"),
    "@": Symbol("deref"),
}
META = "^"
WITH_META = Symbol("with-meta")

LITERALS: dict[str, SExpression] = {
    "true": True,
    "false": False,
    "nil": Nil,
}

_ESCAPES = {"n": "\n"}


def _skip_comments(tokens: Tokenizer) -> None:
    while (token := tokens.peek()) is not None and is_comment(token):
        tokens.next()


def read_from(tokens: Tokenizer) -> SExpression:
    """Read exactly one form from `tokens`.

    Raises UnexpectedEndOfInput if the stream holds no further form.
    """
    _skip_comments(tokens)
    token = tokens.next()
    if token is None:
        raise UnexpectedEndOfInput()

    if token in SEQUENCES:
        closer, kind = SEQUENCES[token]
        return kind(read_seq(tokens, closer))
    if token in CLOSERS:
        raise UnexpectedToken(token)
    if token in QUOTE_FORMS:
        return List([QUOTE_FORMS[token], _read_operand(tokens, token)])
    if token == META:
        meta = _read_operand(tokens, token)
        form = _read_operand(tokens, token)
        # the reader swaps the operands: ^meta form -> (with-meta form meta)
        return List([WITH_META, form, meta])
    return read_atom(token)


def read_seq(tokens: Tokenizer, closer: str) -> list[SExpression]:
    """Read forms up to and including `closer`."""
    items: list[SExpression] = []
    while True:
        _skip_comments(tokens)
        token = tokens.peek()
        if token is None:
            raise UnexpectedEndOfInput(closer)
        if token == closer:
            tokens.next()
            return items
        if token in CLOSERS:
            raise UnexpectedToken(token, closer)
        items.append(read_from(tokens))


def _read_operand(tokens: Tokenizer, prefix: str) -> SExpression:
    _skip_comments(tokens)
    token = tokens.peek()
    if token is None or token in CLOSERS:
        raise MalformedQuoteOrMeta(prefix)
    return read_from(tokens)


def read_atom(token: str) -> SExpression:
    if token in LITERALS:
        return LITERALS[token]
    if INT_RE.fullmatch(token):
        value = int(token)
        if not fits_int64(value):
            raise UnexpectedToken(token)
        return value
    if token.startswith('"'):
        return read_string(token)
    if token.startswith(":"):
        return Keyword(token[1:])
    return Symbol(token)


def read_string(token: str) -> str:
    """Decode a string literal token, including its surrounding quotes."""
    if not STRING_RE.fullmatch(token):
        raise UnexpectedEndOfInput('"')
    return ESCAPE_RE.sub(lambda m: _ESCAPES.get(m.group(1), m.group(1)), token[1:-1])


def read_forms(tokens: Tokenizer) -> Iterator[SExpression]:
    """Yield every top-level form remaining in `tokens`."""
    while True:
        _skip_comments(tokens)
        if tokens.peek() is None:
            return
        yield read_from(tokens)


def read_str(source: str) -> SExpression:
    """Read the first form of `source`."""
    return read_from(Tokenizer(source))
