"""Boolean normal forms by distribution.

Distributing :class:`Or` over :class:`And` turns a quantifier-free NNF into a
conjunctive normal form (CNF), and distributing :class:`And` over :class:`Or`
turns it into a disjunctive normal form (DNF). Applied to a prenex formula,
the quantifier prefix is kept and only the matrix is transformed.

There is no simplification whatsoever. In particular, tautological clauses
and duplicate literals are kept. The size of the result can be exponential
in the size of the input.
"""

from __future__ import annotations

from .atomic import AtomicFormula
from .boolean import And, BinaryFormula, Not, Or
from .formula import Formula
from .quantified import All, Ex


class Distribution:
    r"""Distribute the operator `op`, which is one of :class:`And`,
    :class:`Or`, over its dual. Operands are processed first. When an operand
    of `op` then has the dual operator at its top, the law

    .. math::
        (p \circ q) \bullet r \equiv (p \bullet r) \circ (q \bullet r)

    is applied, with :math:`\bullet` the operator `op` and :math:`\circ` its
    dual, and symmetrically for the right operand. The new operands are
    distributed again until no such shape remains.

    >>> from logicnf.syntax import parse
    >>> print(distribute_or(parse('(A & B) | C')))
    ((A ∨ C) ∧ (B ∨ C))
    >>> print(distribute_and(parse('(A | B) & C')))
    ((A ∧ C) ∨ (B ∧ C))
    >>> print(distribute_or(parse('A | (B | (C & D))')))
    ((A ∨ (B ∨ C)) ∧ (A ∨ (B ∨ D)))
    """

    def __init__(self, op: type[And] | type[Or]) -> None:
        assert op in (And, Or)
        self.op = op
        self.dual = op.dual()

    def __call__(self, f: Formula) -> Formula:
        match f:
            case And() | Or():
                lhs = self(f.left)
                rhs = self(f.right)
                if f.op is self.op:
                    return self._distribute(lhs, rhs)
                return f.op(lhs, rhs)
            case Not(arg=arg):
                return Not(self(arg))
            case All(var=var, arg=arg) | Ex(var=var, arg=arg):
                return f.op(var, self(arg))
            case BinaryFormula():
                return f.op(self(f.left), self(f.right))
            case AtomicFormula():
                return f
            case _:
                assert False, type(f)

    def _distribute(self, lhs: Formula, rhs: Formula) -> Formula:
        """Combine two distributed operands with :attr:`op`.
        """
        if isinstance(lhs, self.dual):
            return self.dual(self._distribute(lhs.left, rhs),
                             self._distribute(lhs.right, rhs))
        if isinstance(rhs, self.dual):
            return self.dual(self._distribute(lhs, rhs.left),
                             self._distribute(lhs, rhs.right))
        return self.op(lhs, rhs)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.op.__name__})'


distribute_or = Distribution(Or)
"""Distribute :class:`Or` over :class:`And`, which yields a CNF.
"""

distribute_and = Distribution(And)
"""Distribute :class:`And` over :class:`Or`, which yields a DNF.
"""
