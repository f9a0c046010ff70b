"""Eliminate implications and convert to Negation Normal Form.

A Negation Normal Form (NNF) is an equivalent formula within which the
application of :class:`Not` is restricted to atomic formulas. The only other
operators admitted are :class:`And`, :class:`Or`, :class:`Ex`, and
:class:`All`. Both transformations are pure; they return new formulas and
leave their input untouched.
"""

from __future__ import annotations

from .atomic import AtomicFormula
from .boolean import And, Equivalent, Implies, Not, Or
from .formula import Formula
from .quantified import All, Ex


class ImplicationElimination:
    r"""Replace :math:`a \to b` by :math:`\lnot a \lor b`, and
    :math:`a \leftrightarrow b` by
    :math:`(\lnot a \lor b) \land (\lnot b \lor a)`. Subformulas are
    processed first, also within the scope of quantifiers.

    >>> from logicnf.syntax import parse
    >>> eliminate_implications(parse('P -> Q'))
    Or(Not(P), Q)
    >>> print(eliminate_implications(parse('forall x (P(x) <-> Q)')))
    ∀x ((¬P(x) ∨ Q) ∧ (¬Q ∨ P(x)))
    """

    def __call__(self, f: Formula) -> Formula:
        match f:
            case Implies(left=lhs, right=rhs):
                return Or(Not(self(lhs)), self(rhs))
            case Equivalent(left=lhs, right=rhs):
                lhs = self(lhs)
                rhs = self(rhs)
                return And(Or(Not(lhs), rhs), Or(Not(rhs), lhs))
            case And(left=lhs, right=rhs) | Or(left=lhs, right=rhs):
                return f.op(self(lhs), self(rhs))
            case Not(arg=arg):
                return Not(self(arg))
            case All(var=var, arg=arg) | Ex(var=var, arg=arg):
                return f.op(var, self(arg))
            case AtomicFormula():
                return f
            case _:
                assert False, type(f)


class NegationNormalForm:
    r"""Push negations down to the atomic formulas using De Morgan's laws,
    the involutive law, and the duality of quantifiers:

    * :math:`\lnot (a \land b) \leadsto \lnot a \lor \lnot b`
    * :math:`\lnot (a \lor b) \leadsto \lnot a \land \lnot b`
    * :math:`\lnot \lnot a \leadsto a`
    * :math:`\lnot \forall x\, a \leadsto \exists x \lnot a`
    * :math:`\lnot \exists x\, a \leadsto \forall x \lnot a`

    A single recursive pass carries the parity of the negations met on the
    path from the root, so that the result is an NNF also when negations are
    nested below one of the rewrites above.

    >>> from logicnf.syntax import parse
    >>> print(nnf(parse('!(A & B)')))
    (¬A ∨ ¬B)
    >>> print(nnf(parse('!forall x P(x)')))
    ∃x ¬P(x)
    >>> print(nnf(parse('!(!A | exists y !Q(y))')))
    (A ∧ ∀y Q(y))

    Implications and equivalences are expected to have been eliminated
    before. If they are present nevertheless, they are kept, and a negation
    in front of them stays there.
    """

    def __call__(self, f: Formula) -> Formula:
        return self._nnf(f, False)

    def _nnf(self, f: Formula, negated: bool) -> Formula:
        match f:
            case Not(arg=arg):
                return self._nnf(arg, not negated)
            case And(left=lhs, right=rhs) | Or(left=lhs, right=rhs):
                op = f.dual() if negated else f.op
                return op(self._nnf(lhs, negated), self._nnf(rhs, negated))
            case All(var=var, arg=arg) | Ex(var=var, arg=arg):
                q = f.dual() if negated else f.op
                return q(var, self._nnf(arg, negated))
            case Implies(left=lhs, right=rhs) | Equivalent(left=lhs, right=rhs):
                g = f.op(self._nnf(lhs, False), self._nnf(rhs, False))
                return Not(g) if negated else g
            case AtomicFormula():
                return Not(f) if negated else f
            case _:
                assert False, type(f)


eliminate_implications = ImplicationElimination()
nnf = NegationNormalForm()
