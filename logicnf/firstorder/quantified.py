r"""We provide subclasses of :class:`Formula <.formula.Formula>` that implement
quantified formulas in the sense that their toplevel operator is one of the
quantifiers :math:`\exists` or :math:`\forall`.

The quantified variable is given by its name. There is no symbol table: two
quantifiers with the same variable name are not told apart, and no
transformation renames variables.
"""
from __future__ import annotations

from collections import deque
from typing import final

from .atomic import IDENTIFIER
from .formula import Formula


class QuantifiedFormula(Formula):
    r"""A class whose instances are quantified formulas in the sense that their
    toplevel operator is one of the quantifiers :math:`\exists` or
    :math:`\forall`. Note that members of :class:`QuantifiedFormula` may have
    subformulas with other logical operators deeper in the expression tree.
    """
    @property
    def var(self) -> str:
        """The name of the quantified variable.

        >>> from logicnf.firstorder import Variable
        >>> f = All('x', Ex('y', Variable('P')))
        >>> f.var
        'x'

        .. seealso::
            * :attr:`args <.formula.Formula.args>` -- all arguments as a tuple
            * :attr:`op <.formula.Formula.op>` -- operator
        """
        return self.args[0]

    @property
    def arg(self) -> Formula:
        """The subformula in the scope of the :class:`QuantifiedFormula`.

        >>> from logicnf.firstorder import Variable
        >>> All('x', Ex('y', Variable('P'))).arg
        Ex(y, P)
        """
        return self.args[1]

    def __init__(self, var: str, arg: Formula) -> None:
        assert self.op in (Ex, All)  # in lack of abstract class properties
        super().__init__()
        if not isinstance(var, str) or IDENTIFIER.fullmatch(var) is None:
            raise ValueError(f'{var!r} is not a variable name')
        if not isinstance(arg, Formula):
            raise ValueError(f'{arg!r} is not a Formula')
        self._args = (var, arg)

    def __repr__(self) -> str:
        return f'{self.op.__name__}({self.var}, {self.arg!r})'

    def _repr_pretty_(self, p, cycle: bool) -> None:
        assert not cycle
        op = self.__class__.__name__
        with p.group(len(op) + 1, op + '(', ')'):
            p.text(self.var + ',')
            p.breakable()
            p.pretty(self.arg)


@final
class Ex(QuantifiedFormula):
    r"""A class whose instances are existentially quantified formulas in the
    sense that their toplevel operator represents the quantifier symbol
    :math:`\exists`.

    >>> from logicnf.firstorder import Predicate, Variable
    >>> f = Ex('x', Predicate('P', (Variable('x'),)))
    >>> f
    Ex(x, P(x))
    >>> f.as_latex()
    '\\exists x P(x)'
    """
    @classmethod
    def dual(cls) -> type[All]:
        r"""A class method yielding the class :class:`All`, which implements
        the dual operator :math:`\forall` of :math:`\exists`.
        """
        return All


@final
class All(QuantifiedFormula):
    r"""A class whose instances are universally quantified formulas in the
    sense that their toplevel operator represents the quantifier symbol
    :math:`\forall`.

    >>> from logicnf.firstorder import Predicate, Variable
    >>> print(All('x', Predicate('P', (Variable('x'),))))
    ∀x P(x)
    """
    @classmethod
    def dual(cls) -> type[Ex]:
        """A class method yielding the dual class :class:`Ex` of class:`All`.
        """
        return Ex


class Prefix(deque[tuple[type[All | Ex], list[str]]]):
    """Holds a quantifier prefix of a formula.

    >>> p = Prefix((All, ['x', 'y']), (Ex, ['z']))
    >>> print(p)
    All ['x', 'y']  Ex ['z']

    .. seealso::
        * :external:class:`collections.deque` -- for methods inherited from double-ended queues
        * :meth:`matrix <.Formula.matrix>` -- the matrix of a prenex formula
        * :meth:`quantify <.Formula.quantify>` -- add quantifier prefix
    """

    def __init__(self, *blocks: tuple[type[All | Ex], list[str]]) -> None:
        super().__init__(blocks)

    def __str__(self) -> str:
        return '  '.join(q.__name__ + ' ' + str(vars_) for q, vars_ in self)
