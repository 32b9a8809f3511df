"""Normalization of formula text. Operators may be written in LaTeX, in
ASCII, or with their Unicode symbols. After normalization, every operator is
a single Unicode symbol.
"""

import re
from typing import Final

LATEX_SPACING: Final = re.compile(r'\\,|\\;|\\:|\\!|\\quad|\\qquad|\\ ')

ALIASES: Final = (
    ('\\forall', '∀'),
    ('\\exists', '∃'),
    ('\\neg', '¬'),
    ('\\lnot', '¬'),
    ('\\land', '∧'),
    ('\\lor', '∨'),
    ('\\leftrightarrow', '↔'),
    ('\\to', '→'),
    ('<->', '↔'),
    ('->', '→'),
    ('!', '¬'),
    ('~', '¬'),
    ('&', '∧'),
    ('|', '∨'))
"""Operator spellings along with their symbols. The replacements are
applied in this order, so that, e.g., ``<->`` is not read as ``<`` followed
by ``->``.
"""


def normalize(text: str) -> str:
    r"""Replace all spellings of operators in `text` with their symbols.

    Non-breaking spaces become spaces, runs of backslashes collapse into a
    single one, LaTeX spacing commands become spaces, and surrounding
    whitespace is removed.

    >>> normalize(r'\\forall x\, (P(x) \to \lnot Q(x))')
    '∀ x  (P(x) → ¬ Q(x))'
    >>> normalize(' P <-> ~Q | R & !S -> T ')
    'P ↔ ¬Q ∨ R ∧ ¬S → T'
    """
    text = text.replace('\u00a0', ' ')
    text = re.sub(r'\\+', r'\\', text)
    text = LATEX_SPACING.sub(' ', text)
    for alias, symbol in ALIASES:
        text = text.replace(alias, symbol)
    return text.strip()
