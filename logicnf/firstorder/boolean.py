"""We introduce formulas with Boolean toplevel operators as subclasses of
:class:`.Formula`. All binary operators are strictly binary. In contrast to
n-ary representations, nested conjunctions and disjunctions are never
flattened, so that the printed form reflects every single rewrite step.
"""
from __future__ import annotations

from typing import final

from .formula import Formula


class BooleanFormula(Formula):
    r"""A class whose instances are Boolean formulas in the sense that their
    toplevel operator is one of the Boolean operators :math:`\lnot`,
    :math:`\land`, :math:`\lor`, :math:`\to`, :math:`\leftrightarrow`.
    """
    pass


class BinaryFormula(BooleanFormula):
    """A class whose instances have a binary Boolean toplevel operator.
    """

    def __init__(self, left: Formula, right: Formula) -> None:
        super().__init__()
        for arg in (left, right):
            if not isinstance(arg, Formula):
                raise ValueError(f'{arg!r} is not a Formula')
        self._args = (left, right)

    @property
    def left(self) -> Formula:
        """The left operand.

        .. seealso::
            * :attr:`args <.formula.Formula.args>` -- all arguments as a tuple
            * :attr:`op <.formula.Formula.op>` -- operator
        """
        return self.args[0]

    @property
    def right(self) -> Formula:
        """The right operand.

        .. seealso::
            * :attr:`args <.formula.Formula.args>` -- all arguments as a tuple
            * :attr:`op <.formula.Formula.op>` -- operator
        """
        return self.args[1]


@final
class Equivalent(BinaryFormula):
    r"""A class whose instances are equivalences in the sense that their
    toplevel operator represents the Boolean operator
    :math:`\leftrightarrow`.

    >>> from logicnf.firstorder import Variable
    >>> Equivalent(Variable('P'), Variable('Q'))
    Equivalent(P, Q)
    """
    pass


@final
class Implies(BinaryFormula):
    r"""A class whose instances are implications in the sense that their
    toplevel operator represents the Boolean operator :math:`\to`.

    >>> from logicnf.firstorder import Variable
    >>> Implies(Variable('P'), Variable('Q')).as_latex()
    '(P \\to Q)'

    .. seealso::
        * :meth:`>>, __rshift__() <.formula.Formula.__rshift__>` -- \
            infix notation of :class:`Implies`
    """
    pass


@final
class And(BinaryFormula):
    r"""A class whose instances are conjunctions in the sense that their
    toplevel operator represents the Boolean operator :math:`\land`.

    >>> from logicnf.firstorder import Variable
    >>> A, B, C = Variable('A'), Variable('B'), Variable('C')
    >>> And(And(A, B), C)
    And(And(A, B), C)
    >>> And(A, 'B')
    Traceback (most recent call last):
    ...
    ValueError: 'B' is not a Formula

    .. seealso::
        * :meth:`&, __and__() <.formula.Formula.__and__>` -- \
            infix notation of :class:`And`
    """

    @classmethod
    def dual(cls) -> type[Or]:
        r"""A class method yielding the class :class:`Or`, which implements
        the dual operator :math:`\lor` of :math:`\land`.
        """
        return Or


@final
class Or(BinaryFormula):
    r"""A class whose instances are disjunctions in the sense that their
    toplevel operator represents the Boolean operator :math:`\lor`.

    >>> from logicnf.firstorder import Variable
    >>> Or(Variable('A'), Variable('B')).as_latex()
    '(A \\lor B)'

    .. seealso::
        * :meth:`|, __or__() <.formula.Formula.__or__>` -- \
            infix notation of :class:`Or`
    """

    @classmethod
    def dual(cls) -> type[And]:
        r"""A class method yielding the class :class:`And`, which implements
        the dual operator :math:`\land` of :math:`\lor`.
        """
        return And


@final
class Not(BooleanFormula):
    r"""A class whose instances are negated formulas in the sense that their
    toplevel operator is the Boolean operator :math:`\lnot`.

    >>> from logicnf.firstorder import Variable
    >>> Not(Variable('A'))
    Not(A)
    >>> print(Not(Not(Variable('A'))))
    ¬¬A

    .. seealso::
        * :meth:`~, __invert__() <.formula.Formula.__invert__>` -- \
            short notation of :class:`Not`
    """

    def __init__(self, arg: Formula) -> None:
        super().__init__()
        if not isinstance(arg, Formula):
            raise ValueError(f'{arg!r} is not a Formula')
        self._args = (arg, )

    @property
    def arg(self) -> Formula:
        r"""The one argument of the operator :math:`\lnot`.
        """
        return self.args[0]
