"""Reading formulas from text. Processing proceeds in three stages:
:func:`.normalize` unifies the spellings of operators, :func:`.tokenize`
splits the normalized text into tokens, and :class:`.Parser` builds a
:class:`.Formula` from the tokens. The function :func:`parse` combines the
three stages.
"""

from .normalizer import normalize  # noqa

from .lexer import LexError, Token, tokenize  # noqa

from .parser import parse, ParseError, Parser  # noqa


__all__ = ['normalize', 'tokenize', 'parse', 'Parser', 'Token', 'LexError', 'ParseError']
