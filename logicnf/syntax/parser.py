r"""A recursive descent parser for first-order formulas.

The grammar, with precedence from lowest to highest, is::

    expr    := iff
    iff     := implies ( '↔' implies )*
    implies := or ( '→' or )*
    or      := and ( '∨' and )*
    and     := unary ( '∧' unary )*
    unary   := '¬' unary | ('∀'|'∃') name ['.'|':'] unary | primary
    primary := '(' expr ')' | name ['(' args ')']
    args    := expr (',' expr)*

All binary operators associate to the left. The scope of a quantifier is the
shortest unary expression following the quantified variable:

>>> parse('forall x P(x) & Q')
And(All(x, P(x)), Q)
>>> parse('forall x (P(x) & Q)')
All(x, And(P(x), Q))
"""

from __future__ import annotations

from typing import Optional

from ..firstorder import (All, And, Equivalent, Ex, Formula, Implies, Not, Or,
                          Predicate, Variable)
from .lexer import FormulaSyntaxError, Token, TokenKind, tokenize
from .normalizer import clean, normalize


class ParseError(FormulaSyntaxError):
    """Raised when the token sequence is not a formula. `found` is the kind of
    the offending token, or ``None`` at the end of the input.

    >>> raise ParseError('name', TokenKind.AND)
    Traceback (most recent call last):
    ...
    logicnf.syntax.parser.ParseError: expected name, found and
    """

    def __init__(self, expected: str, found: Optional[TokenKind]) -> None:
        found_as_str = 'end of input' if found is None else str(found)
        super().__init__(f'expected {expected}, found {found_as_str}')
        self.expected = expected
        self.found = found


BINARY = (
    (TokenKind.IFF, Equivalent),
    (TokenKind.IMPLIES, Implies),
    (TokenKind.OR, Or),
    (TokenKind.AND, And))
"""The binary operators from lowest to highest precedence.
"""


class TokenStream:
    """A cursor over the tokens of one single input. Each call of
    :meth:`FormulaParser.parse` creates its own stream, so that a parser
    instance holds no state between calls.
    """

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        self.index = 0

    def advance(self) -> Token:
        token = self.tokens[self.index]
        self.index += 1
        return token

    def at_end(self) -> bool:
        return self.index >= len(self.tokens)

    def check(self, kind: TokenKind) -> bool:
        return not self.at_end() and self.tokens[self.index].kind is kind

    def consume(self, kind: TokenKind) -> Token:
        if not self.check(kind):
            raise ParseError(str(kind), self.peek_kind())
        return self.advance()

    def match(self, kind: TokenKind) -> bool:
        if self.check(kind):
            self.index += 1
            return True
        return False

    def peek_kind(self) -> Optional[TokenKind]:
        return None if self.at_end() else self.tokens[self.index].kind


class FormulaParser:
    r"""Parse a string into a :class:`.Formula`. The string is cleaned from
    ``$`` delimiters and normalized before it is tokenized.

    >>> parse(r'$\forall x (P(x) \to Q(x))$')
    All(x, Implies(P(x), Q(x)))
    >>> parse('p -> q & r')
    Implies(p, And(q, r))
    >>> parse('!p & q')
    And(Not(p), q)
    >>> parse('P & & Q')
    Traceback (most recent call last):
    ...
    logicnf.syntax.parser.ParseError: expected primary expression, found and
    """

    def __call__(self, s: str) -> Formula:
        return self.parse(tokenize(normalize(clean(s))))

    def parse(self, tokens: list[Token]) -> Formula:
        """Parse a complete token sequence. Tokens left over after a complete
        formula are an error.

        >>> parse('P Q')
        Traceback (most recent call last):
        ...
        logicnf.syntax.parser.ParseError: expected end of input, found name
        """
        stream = TokenStream(tokens)
        f = self._parse_binary(stream, 0)
        if not stream.at_end():
            raise ParseError('end of input', stream.peek_kind())
        return f

    def _parse_binary(self, stream: TokenStream, level: int) -> Formula:
        if level == len(BINARY):
            return self._parse_unary(stream)
        kind, op = BINARY[level]
        f = self._parse_binary(stream, level + 1)
        while stream.match(kind):
            f = op(f, self._parse_binary(stream, level + 1))
        return f

    def _parse_unary(self, stream: TokenStream) -> Formula:
        if stream.match(TokenKind.NOT):
            return Not(self._parse_unary(stream))
        if stream.check(TokenKind.FORALL) or stream.check(TokenKind.EXISTS):
            q = All if stream.advance().kind is TokenKind.FORALL else Ex
            var = stream.consume(TokenKind.NAME).text
            if not stream.match(TokenKind.DOT):
                stream.match(TokenKind.COLON)
            return q(var, self._parse_unary(stream))
        return self._parse_primary(stream)

    def _parse_primary(self, stream: TokenStream) -> Formula:
        if stream.match(TokenKind.LPAREN):
            f = self._parse_binary(stream, 0)
            stream.consume(TokenKind.RPAREN)
            return f
        if stream.check(TokenKind.NAME):
            name = stream.advance().text
            if stream.match(TokenKind.LPAREN):
                args = [self._parse_binary(stream, 0)]
                while stream.match(TokenKind.COMMA):
                    args.append(self._parse_binary(stream, 0))
                stream.consume(TokenKind.RPAREN)
                return Predicate(name, args)
            return Variable(name)
        raise ParseError('primary expression', stream.peek_kind())


parse = FormulaParser()
