"""Atomic formulas are the leaves of the expression tree. There are two
kinds: a :class:`Variable` is a bare name, which serves both as a
propositional variable and as an argument term of a predicate; a
:class:`Predicate` applies a name to a possibly empty sequence of argument
formulas. Atomic formulas are opaque to all rewrite stages, which in
particular never enter the arguments of a predicate.
"""

from __future__ import annotations

from abc import abstractmethod
import re
from typing import final, Iterable, Iterator

from .formula import Formula


IDENTIFIER = re.compile(r'[A-Za-z_][A-Za-z0-9_]*')


class AtomicFormula(Formula):
    """This abstract class specifies the methods that atomic formulas must
    implement in addition to those inherited from :class:`.Formula`.
    """

    @property
    def name(self) -> str:
        """The name of the variable or predicate.
        """
        return self.args[0]

    @abstractmethod
    def __str__(self) -> str:
        """Representation of the atomic formula using Unicode logic symbols
        within arguments.
        """
        ...

    @abstractmethod
    def as_latex(self) -> str:
        """LaTeX representation as a string.
        """
        ...

    @final
    def atoms(self) -> Iterator[AtomicFormula]:
        yield self

    def _repr_pretty_(self, p, cycle: bool) -> None:
        assert not cycle
        p.text(repr(self))


def _check_name(name: object) -> None:
    if not isinstance(name, str) or IDENTIFIER.fullmatch(name) is None:
        raise ValueError(f'{name!r} is not an identifier')


@final
class Variable(AtomicFormula):
    """A variable or propositional constant, identified by its name.

    >>> Variable('x')
    x
    >>> Variable('x') == Variable('x')
    True
    >>> Variable('1x')
    Traceback (most recent call last):
    ...
    ValueError: '1x' is not an identifier
    """

    def __init__(self, name: str) -> None:
        super().__init__()
        _check_name(name)
        self._args = (name,)

    def __repr__(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name

    def as_latex(self) -> str:
        return self.name


@final
class Predicate(AtomicFormula):
    """An application of a predicate symbol to argument formulas. Without
    arguments, a predicate is printed as its bare name, which is then
    indistinguishable from a :class:`Variable` in the output, although the two
    are structurally different.

    >>> x, y = Variable('x'), Variable('y')
    >>> f = Predicate('R', (x, y))
    >>> f
    R(x, y)
    >>> f.as_latex()
    'R(x, y)'
    >>> Predicate('P', ()).as_latex()
    'P'
    """

    @property
    def terms(self) -> tuple[Formula, ...]:
        """The arguments of the predicate.
        """
        return self.args[1]

    def __init__(self, name: str, terms: Iterable[Formula] = ()) -> None:
        super().__init__()
        _check_name(name)
        terms = tuple(terms)
        for term in terms:
            if not isinstance(term, Formula):
                raise ValueError(f'{term!r} is not a Formula')
        self._args = (name, terms)

    def __repr__(self) -> str:
        if not self.terms:
            return f'{self.op.__name__}({self.name!r}, ())'
        return f'{self.name}({", ".join(repr(t) for t in self.terms)})'

    def __str__(self) -> str:
        if not self.terms:
            return self.name
        return f'{self.name}({", ".join(str(t) for t in self.terms)})'

    def as_latex(self) -> str:
        if not self.terms:
            return self.name
        return f'{self.name}({", ".join(t.as_latex() for t in self.terms)})'
