"""A lexer for normalized formulas.

The input is expected to use the Unicode logic symbols, see
:func:`.normalizer.normalize`. The words ``forall`` and ``exists`` are
keywords that are lexed as quantifiers.
"""

from __future__ import annotations

from enum import Enum
from typing import Final, NamedTuple

from ..support.excepthook import NoTraceException


class FormulaSyntaxError(NoTraceException):
    """Base class of the errors raised when an input string is not a
    well-formed formula.
    """
    pass


class LexError(FormulaSyntaxError):
    """Raised when the lexer meets a character that cannot start a token.

    >>> raise LexError('#', 2)
    Traceback (most recent call last):
    ...
    logicnf.syntax.lexer.LexError: unexpected character '#' at position 2
    """

    def __init__(self, character: str, position: int) -> None:
        super().__init__(f'unexpected character {character!r} at position {position}')
        self.character = character
        self.position = position


class TokenKind(Enum):
    LPAREN = '('
    RPAREN = ')'
    COMMA = ','
    DOT = '.'
    COLON = ':'
    FORALL = 'forall'
    EXISTS = 'exists'
    NOT = 'not'
    AND = 'and'
    OR = 'or'
    IMPLIES = 'implies'
    IFF = 'iff'
    NAME = 'name'

    def __str__(self) -> str:
        return self.value


class Token(NamedTuple):
    kind: TokenKind
    text: str
    position: int


STRUCTURAL: Final = {
    '(': TokenKind.LPAREN,
    ')': TokenKind.RPAREN,
    ',': TokenKind.COMMA,
    '.': TokenKind.DOT,
    ':': TokenKind.COLON}

SYMBOLS: Final = {
    '∀': TokenKind.FORALL,
    '∃': TokenKind.EXISTS,
    '¬': TokenKind.NOT,
    '∧': TokenKind.AND,
    '∨': TokenKind.OR,
    '→': TokenKind.IMPLIES,
    '↔': TokenKind.IFF}

KEYWORDS: Final = {
    'forall': TokenKind.FORALL,
    'exists': TokenKind.EXISTS}


def _is_name_start(ch: str) -> bool:
    return ch == '_' or ('A' <= ch <= 'Z') or ('a' <= ch <= 'z')


def _is_name_char(ch: str) -> bool:
    return _is_name_start(ch) or '0' <= ch <= '9'


def tokenize(text: str) -> list[Token]:
    """Split `text` into tokens in a single pass from left to right. White
    space is skipped. Names start with an ASCII letter or an underscore and
    extend as far as possible over letters, digits, and underscores.

    >>> [str(t.kind) for t in tokenize('∀x (P(x1) ∧ ¬q_)')]
    ['forall', 'name', '(', 'name', '(', 'name', ')', 'and', 'not', 'name', ')']
    >>> tokenize('exists y. R')  # doctest: +NORMALIZE_WHITESPACE
    [Token(kind=<TokenKind.EXISTS: 'exists'>, text='exists', position=0),
     Token(kind=<TokenKind.NAME: 'name'>, text='y', position=7),
     Token(kind=<TokenKind.DOT: '.'>, text='.', position=8),
     Token(kind=<TokenKind.NAME: 'name'>, text='R', position=10)]
    >>> tokenize('P ∧ 1')
    Traceback (most recent call last):
    ...
    logicnf.syntax.lexer.LexError: unexpected character '1' at position 4
    """
    tokens: list[Token] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch.isspace():
            i += 1
            continue
        if ch in STRUCTURAL:
            tokens.append(Token(STRUCTURAL[ch], ch, i))
            i += 1
            continue
        if ch in SYMBOLS:
            tokens.append(Token(SYMBOLS[ch], ch, i))
            i += 1
            continue
        if _is_name_start(ch):
            j = i + 1
            while j < len(text) and _is_name_char(text[j]):
                j += 1
            name = text[i:j]
            tokens.append(Token(KEYWORDS.get(name, TokenKind.NAME), name, i))
            i = j
            continue
        raise LexError(ch, i)
    return tokens
