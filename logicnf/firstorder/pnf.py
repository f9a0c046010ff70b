"""Convert to Prenex Normal Form.

A Prenex Normal Form (PNF) is a Negation Normal Form (NNF) in which all
quantifiers :class:`Ex` and :class:`All` stand at the beginning of the
formula. The quantifiers are moved to the front in the order in which they
are found from left to right, keeping their kinds. At a binary operator, the
quantifiers of the left operand stay outside the quantifiers of the right
operand.

Bound variables are not renamed. The result is equivalent to the input only
if no quantified variable occurs free in a sibling subformula that a
quantifier is moved across, and if distinct quantifiers use distinct
variables.
"""

from __future__ import annotations

from .atomic import AtomicFormula
from .boolean import And, Not, Or
from .formula import Formula
from .nnf import eliminate_implications, nnf
from .quantified import All, Ex, Prefix


class PrenexNormalForm:
    r"""
    >>> from logicnf.syntax import parse
    >>> print(pnf(parse('forall x (P(x) -> Q(x))')))
    ∀x (¬P(x) ∨ Q(x))
    >>> print(pnf(parse('forall x P(x) & exists y (Q(y) | forall z R(z))')))
    ∀x ∃y ∀z (P(x) ∧ (Q(y) ∨ R(z)))
    >>> print(pnf(parse('!exists x forall y R(x, y)')))
    ∀x ∃y ¬R(x, y)
    """

    def __call__(self, f: Formula, is_nnf: bool = False) -> Formula:
        return self.pnf(f, is_nnf=is_nnf)

    def pnf(self, f: Formula, is_nnf: bool) -> Formula:
        """A keyword argument `is_nnf=True` indicates that `f` is already
        free of implications and in NNF. :meth:`pnf` then skips the initial
        computation of the NNF. Conversions use this, because they record the
        NNF as a step of their own.
        """
        if not is_nnf:
            f = nnf(eliminate_implications(f))
        return self._pnf(f)

    def _pnf(self, f: Formula) -> Formula:
        match f:
            case AtomicFormula():
                return f
            case And(left=lhs, right=rhs) | Or(left=lhs, right=rhs):
                lhs_matrix, lhs_prefix = self._pnf(lhs).matrix()
                rhs_matrix, rhs_prefix = self._pnf(rhs).matrix()
                return f.op(lhs_matrix, rhs_matrix).quantify(
                    Prefix(*lhs_prefix, *rhs_prefix))
            case All(var=var, arg=arg) | Ex(var=var, arg=arg):
                return f.op(var, self._pnf(arg))
            case Not(arg=arg):
                # In an NNF the argument is atomic. Otherwise push the
                # negation across leading quantifiers like De Morgan does.
                arg = self._pnf(arg)
                if Formula.is_quantified_formula(arg):
                    return arg.dual()(arg.var, self._pnf(Not(arg.arg)))
                return Not(arg)
            case _:
                assert False, type(f)


pnf = PrenexNormalForm()
