"""Reading formulas from strings: normalization of the input dialects,
lexing, and parsing.
"""

from .normalizer import clean, normalize  # noqa

from .lexer import FormulaSyntaxError, LexError, Token, TokenKind, tokenize  # noqa

from .parser import FormulaParser, ParseError, parse  # noqa


__all__ = [
    'clean', 'normalize', 'tokenize', 'parse',

    'FormulaSyntaxError', 'LexError', 'ParseError'
]
