"""Split puzzle input into literal runs and single-character delimiters."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable


class TokenType(enum.Enum):
    """Kind of a token produced by :func:`tokenize`."""

    LITERAL = "literal"
    COMMA = "comma"
    COLON = "colon"
    SPACE = "space"
    NEWLINE = "newline"


@dataclass(frozen=True)
class Token:
    """A piece of input text together with its kind."""

    kind: TokenType
    value: str


_DELIMITER_TYPES = {
    ",": TokenType.COMMA,
    ":": TokenType.COLON,
    " ": TokenType.SPACE,
    "\n": TokenType.NEWLINE,
}

DEFAULT_DELIMITERS = ",:\n"


def tokenize(text: str, delimiters: Iterable[str] = DEFAULT_DELIMITERS) -> list[Token]:
    """Split ``text`` at every delimiter character.

    Each delimiter becomes a token of its own; the non-empty stretches of text
    between delimiters become literal tokens. Concatenating the values of the
    returned tokens gives back ``text``.
    """
    kinds: dict[str, TokenType] = {}
    for char in delimiters:
        try:
            kinds[char] = _DELIMITER_TYPES[char]
        except KeyError:
            raise ValueError(f"unsupported delimiter {char!r}") from None

    tokens: list[Token] = []
    start = 0
    for index, char in enumerate(text):
        kind = kinds.get(char)
        if kind is None:
            continue
        if start < index:
            tokens.append(Token(TokenType.LITERAL, text[start:index]))
        tokens.append(Token(kind, char))
        start = index + 1
    if start < len(text):
        tokens.append(Token(TokenType.LITERAL, text[start:]))
    return tokens