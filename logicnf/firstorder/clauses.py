r"""Clausal form and Horn clauses.

A formula in conjunctive normal form is a conjunction of clauses, and a
clause is a disjunction of literals. :func:`extract_clauses` flattens such a
formula into a list of :class:`Clause`. The literals keep their canonical
LaTeX text only; they do not refer back to the formula.

A Horn clause is a clause with at most one positive literal:

>>> from logicnf.syntax import parse
>>> clauses = extract_clauses(parse('(!P | !Q | R) & (P | Q)'))
>>> [clause.is_horn() for clause in clauses]
[True, False]
>>> is_horn(clauses)
False
>>> clauses_as_latex(clauses)
'(\\lnot P \\lor \\lnot Q \\lor R) \\land (P \\lor Q)'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

from .boolean import And, Not, Or
from .formula import Formula


@dataclass(frozen=True)
class Literal:
    """A possibly negated formula, held as the canonical LaTeX text of the
    formula without its negation.
    """

    negated: bool
    formula: str

    def as_latex(self) -> str:
        """
        >>> Literal(True, 'P(x)').as_latex()
        '\\\\lnot P(x)'
        """
        return f'\\lnot {self.formula}' if self.negated else self.formula


@dataclass(frozen=True)
class Clause:
    """A disjunction of literals in their original order. Duplicates are
    kept.
    """

    literals: tuple[Literal, ...]

    def __iter__(self) -> Iterator[Literal]:
        return iter(self.literals)

    def __len__(self) -> int:
        return len(self.literals)

    @property
    def positive_count(self) -> int:
        """The number of literals that are not negated.
        """
        return sum(1 for literal in self.literals if not literal.negated)

    def as_latex(self) -> str:
        """
        >>> Clause((Literal(True, 'P'), Literal(False, 'Q'))).as_latex()
        '(\\\\lnot P \\\\lor Q)'
        >>> Clause((Literal(False, 'Q'),)).as_latex()
        '(Q)'
        """
        return '(' + ' \\lor '.join(literal.as_latex() for literal in self.literals) + ')'

    def is_horn(self) -> bool:
        """Test whether `self` has at most one positive literal.
        """
        return self.positive_count <= 1


def extract_clauses(f: Formula) -> list[Clause]:
    """Flatten the conjunctions at the top of `f` into clauses, and the
    disjunctions at the top of each clause into literals, both from left to
    right. Any other subformula is a literal. Only one negation is stripped
    from a literal, which is all there is in an NNF.

    >>> from logicnf.syntax import parse
    >>> extract_clauses(parse('(P | !Q) & R'))  # doctest: +NORMALIZE_WHITESPACE
    [Clause(literals=(Literal(negated=False, formula='P'),
                      Literal(negated=True, formula='Q'))),
     Clause(literals=(Literal(negated=False, formula='R'),))]

    Quantified subformulas are not entered:

    >>> [c.as_latex() for c in extract_clauses(parse('forall x (P(x) & Q)'))]
    ['(\\\\forall x (P(x) \\\\land Q))']
    """
    match f:
        case And(left=lhs, right=rhs):
            return extract_clauses(lhs) + extract_clauses(rhs)
        case _:
            return [Clause(tuple(_extract_literals(f)))]


def _extract_literals(f: Formula) -> Iterator[Literal]:
    match f:
        case Or(left=lhs, right=rhs):
            yield from _extract_literals(lhs)
            yield from _extract_literals(rhs)
        case Not(arg=arg):
            yield Literal(True, arg.as_latex())
        case _:
            yield Literal(False, f.as_latex())


def is_horn(clauses: Sequence[Clause]) -> bool:
    """Test whether all `clauses` are Horn clauses. This holds in particular
    for an empty sequence.
    """
    return all(clause.is_horn() for clause in clauses)


def clauses_as_latex(clauses: Sequence[Clause]) -> str:
    """The conjunction of the parenthesized `clauses`, or the empty string if
    there are none.
    """
    return ' \\land '.join(clause.as_latex() for clause in clauses)
