r"""Normalization of input text prior to lexing.

Formulas are accepted in a LaTeX dialect, e.g. ``\forall x (P(x) \to Q)``,
in an ASCII dialect, e.g. ``P -> !Q & R``, or with Unicode logic symbols.
:func:`normalize` maps all of them to the Unicode symbols, which are the only
logic symbols known to the lexer.
"""

import re
from typing import Final, Optional


SPACING: Final = re.compile(r'\\,|\\;|\\:|\\!|\\quad|\\qquad|\\ ')
r"""LaTeX spacing directives, which are replaced with a space.
"""

SYMBOLS: Final = (
    ('\\forall', '∀'),
    ('\\exists', '∃'),
    ('\\neg', '¬'),
    ('\\lnot', '¬'),
    ('\\land', '∧'),
    ('\\wedge', '∧'),
    ('\\lor', '∨'),
    ('\\vee', '∨'),
    ('\\longleftrightarrow', '↔'),
    ('\\leftrightarrow', '↔'),
    ('\\iff', '↔'),
    ('\\longrightarrow', '→'),
    ('\\rightarrow', '→'),
    ('\\implies', '→'),
    ('\\to', '→'),
    ('<->', '↔'),
    ('->', '→'),
    ('!', '¬'),
    ('~', '¬'),
    ('&', '∧'),
    ('|', '∨'))
"""The substitution table of :func:`normalize`. Substitutions are applied one
after the other in this order. A spelling must come before all spellings that
are contained in it, e.g., ``<->`` before ``->``.
"""


def clean(text: Optional[str]) -> str:
    r"""Remove all math delimiters ``$`` and surrounding white space.

    >>> clean(' $P \\to Q$ ')
    'P \\to Q'
    """
    if not text:
        return ''
    return text.replace('$', '').strip()


def normalize(text: Optional[str]) -> str:
    r"""Replace all spellings of quantifiers and Boolean operators by the
    corresponding Unicode symbols. Before, non-breaking spaces become
    ordinary spaces, runs of backslashes are collapsed into a single one, and
    LaTeX spacing directives are removed.

    >>> normalize('\\\\forall x\\,(P(x) \\\\to \\\\lnot Q)')
    '∀ x (P(x) → ¬ Q)'
    >>> normalize('!(A & B) <-> ~A | ~B')
    '¬(A ∧ B) ↔ ¬A ∨ ¬B'
    >>> normalize(None)
    ''
    """
    if not text:
        return ''
    text = text.replace('\u00a0', ' ')
    text = re.sub(r'\\+', lambda _: '\\', text)
    text = SPACING.sub(' ', text)
    for spelling, symbol in SYMBOLS:
        text = text.replace(spelling, symbol)
    return text
