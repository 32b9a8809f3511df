"""Tokenization of normalized formula text.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Final

from ..support.excepthook import NoTraceException


class LexError(NoTraceException):
    """Raised on a character that cannot start any token.
    """

    def __init__(self, character: str, position: int) -> None:
        super().__init__(f'unexpected character {character!r} at position {position}')
        self.character = character
        self.position = position


@dataclass(frozen=True)
class Token:
    """A token of a formula text.
    """

    kind: str
    """One of ``'forall'``, ``'exists'``, ``'not'``, ``'and'``, ``'or'``,
    ``'implies'``, ``'iff'``, ``'name'``, or one of the punctuation
    characters ``'('``, ``')'``, ``','``, ``'.'``, ``':'``.
    """

    value: str
    """The text of the token.
    """

    position: int
    """The offset of the first character of the token in the text.
    """

    def __str__(self) -> str:
        return self.value


SYMBOLS: Final = {
    '∀': 'forall', '∃': 'exists', '¬': 'not', '∧': 'and', '∨': 'or',
    '→': 'implies', '↔': 'iff',
    '(': '(', ')': ')', ',': ',', '.': '.', ':': ':'}

NAME: Final = re.compile(r'[A-Za-z_][A-Za-z0-9_]*')


def tokenize(text: str) -> list[Token]:
    """Split normalized `text` into tokens. Whitespace separates tokens and
    is otherwise ignored.

    >>> [(t.kind, t.value) for t in tokenize('∀x1 (P(x1) ∧ ¬Q)')]
    [('forall', '∀'), ('name', 'x1'), ('(', '('), ('name', 'P'), ('(', '('),
     ('name', 'x1'), (')', ')'), ('and', '∧'), ('not', '¬'), ('name', 'Q'),
     (')', ')')]
    >>> tokenize('P ∧ @')
    Traceback (most recent call last):
    ...
    normalforms.parser.lexer.LexError: unexpected character '@' at position 4
    """
    tokens = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch.isspace():
            i += 1
        elif ch in SYMBOLS:
            tokens.append(Token(SYMBOLS[ch], ch, i))
            i += 1
        elif match := NAME.match(text, i):
            tokens.append(Token('name', match.group(), i))
            i = match.end()
        else:
            raise LexError(ch, i)
    return tokens
