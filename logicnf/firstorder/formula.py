from __future__ import annotations

from abc import abstractmethod
from typing import Any, Final, Iterator, Optional, Self
from typing_extensions import TypeIs

from IPython.lib import pretty


class Formula:
    r"""This abstract base class implements representations of and methods on
    first-order formulas recursively built using first-order operators:

    1. Boolean operators:

       a. Negation :math:`\lnot`

       b. Conjunction :math:`\land` and disjunction :math:`\lor`

       c. Implication :math:`\to`

       d. Bi-implication :math:`\leftrightarrow`

    2. Quantifiers :math:`\exists x` and :math:`\forall x`, where :math:`x` is
       the name of a variable.

    Boolean operators are strictly binary. Instances are immutable. Every
    transformation builds a new formula, so that intermediate results of a
    conversion can be printed and compared independently.
    """

    _hash: Optional[int]

    @property
    def op(self) -> type[Self]:
        """Operator. This property can be used with instances of subclasses of
        :class:`Formula`. It yields the respective subclass.
        """
        return type(self)

    @property
    def args(self) -> tuple[Any, ...]:
        """The arguments of a formula as a tuple.

        .. seealso::
            * :attr:`BinaryFormula.left <.boolean.BinaryFormula.left>`
            * :attr:`BinaryFormula.right <.boolean.BinaryFormula.right>`
            * :attr:`Not.arg <.boolean.Not.arg>`
            * :attr:`QuantifiedFormula.arg <.quantified.QuantifiedFormula.arg>`
            * :attr:`QuantifiedFormula.var <.quantified.QuantifiedFormula.var>`
        """
        return self._args

    def __and__(self, other: Formula) -> Formula:
        """Override the :obj:`& <object.__and__>` operator to apply
        :class:`.boolean.And`.

        >>> from logicnf.firstorder import Variable
        >>> Variable('A') & Variable('B')
        And(A, B)
        """
        return And(self, other)

    def __eq__(self, other: object) -> bool:
        """A recursive test for structural equality of `self` and `other`.

        >>> from logicnf.firstorder import Predicate, Variable
        >>> Predicate('P', (Variable('x'),)) == Predicate('P', (Variable('x'),))
        True
        >>> Predicate('P', ()) == Variable('P')
        False
        """
        if self is other:
            return True
        if not isinstance(other, Formula):
            return False
        if self.op is not other.op:
            return False
        if hash(self) != hash(other):
            return False
        return self.args == other.args

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash((self.op.__name__, self.args))
        return self._hash

    @abstractmethod
    def __init__(self, *args: object) -> None:
        """This abstract base class is not supposed to have instances itself.
        Technically this is enforced via this abstract initializer.
        """
        self._hash = None

    def __invert__(self) -> Formula:
        """Override the :obj:`~ <object.__invert__>` operator to apply
        :class:`Not`.

        >>> from logicnf.firstorder import Variable
        >>> ~ Variable('A')
        Not(A)
        """
        return Not(self)

    def __or__(self, other: Formula) -> Formula:
        """Override the :obj:`| <object.__or__>` operator to apply :class:`Or`.
        """
        return Or(self, other)

    def __repr__(self) -> str:
        """A representation of the :class:`Formula` `self` that is suitable
        for use as an input.
        """
        r = self.op.__name__
        r += '('
        if self.args:
            r += self.args[0].__repr__()
            for a in self.args[1:]:
                r += ', ' + a.__repr__()
        r += ')'
        return r

    def __rshift__(self, other: Formula) -> Formula:
        """Override the :obj:`>> <object.__rshift__>` operator to apply
        :class:`Implies`.

        >>> from logicnf.firstorder import Variable
        >>> Variable('A') >> Variable('B')
        Implies(A, B)
        """
        return Implies(self, other)

    def __str__(self) -> str:
        """Representation of the formula using Unicode logic symbols. It has
        the same structure as :meth:`as_latex`.

        >>> from logicnf.syntax import parse
        >>> print(parse(r'\\forall x (P(x) \\to \\lnot Q(x, y))'))
        ∀x (P(x) → ¬Q(x, y))
        """
        SYMBOL: Final = {
            All: '∀', Ex: '∃', And: '∧', Or: '∨', Implies: '→',
            Equivalent: '↔', Not: '¬'}
        match self:
            case All() | Ex():
                return f'{SYMBOL[self.op]}{self.var} {self.arg}'
            case And() | Or() | Implies() | Equivalent():
                return f'({self.left} {SYMBOL[self.op]} {self.right})'
            case Not():
                return f'{SYMBOL[Not]}{self.arg}'
            case _:
                # Atomic formulas are caught by the implementation of the
                # abstract method AtomicFormula.__str__.
                assert False, repr(self)

    def as_latex(self) -> str:
        r"""The canonical LaTeX representation as a string. Every binary
        connective is parenthesized, so that the bodies of quantifiers and
        negations never need extra parentheses. The result can be parsed
        again.

        This representation is also used to decide whether a rewrite stage
        has visibly changed a formula.

        >>> from logicnf.syntax import parse
        >>> parse('forall x (P(x) -> Q(x)) & !R').as_latex()
        '(\\forall x (P(x) \\to Q(x)) \\land \\lnot R)'

        .. seealso:: :meth:`_repr_latex_` -- LaTeX representation for Jupyter notebooks
        """
        SYMBOL: Final = {
            All: '\\forall', Ex: '\\exists', And: '\\land', Or: '\\lor',
            Implies: '\\to', Equivalent: '\\leftrightarrow', Not: '\\lnot'}
        match self:
            case All() | Ex():
                return f'{SYMBOL[self.op]} {self.var} {self.arg.as_latex()}'
            case And() | Or() | Implies() | Equivalent():
                return f'({self.left.as_latex()} {SYMBOL[self.op]} {self.right.as_latex()})'
            case Not():
                return f'{SYMBOL[Not]} {self.arg.as_latex()}'
            case _:
                # Atomic formulas are caught by the implementation of the
                # abstract method AtomicFormula.as_latex.
                assert False, repr(self)

    def atoms(self) -> Iterator[AtomicFormula]:
        """An iterator over all instances of :class:`AtomicFormula
        <.firstorder.atomic.AtomicFormula>` occurring in `self`. Arguments of
        predicates are not entered.

        >>> from logicnf.syntax import parse
        >>> list(parse('(P(x) -> Q) & exists y P(y) & Q').atoms())
        [P(x), Q, P(y), Q]
        """
        match self:
            case All() | Ex():
                yield from self.arg.atoms()
            case And() | Or() | Not() | Implies() | Equivalent():
                for arg in self.args:
                    yield from arg.atoms()
            case _:
                # Atomic formulas are caught by the final method
                # AtomicFormula.atoms.
                assert False, type(self)

    @staticmethod
    def is_quantified_formula(f: Formula) -> TypeIs[QuantifiedFormula]:
        """Type narrowing :func:`isinstance` test for
        :class:`.quantified.QuantifiedFormula`.
        """
        return isinstance(f, QuantifiedFormula)

    def matrix(self) -> tuple[Formula, Prefix]:
        """The matrix of a prenex formula is its quantifier free part. Its
        prefix is a double ended queue holding blocks of quantifiers.

        >>> from logicnf.syntax import parse
        >>> m, B = parse('forall x forall y exists z R(x, y, z)').matrix()
        >>> m
        R(x, y, z)
        >>> print(B)
        All ['x', 'y']  Ex ['z']

        If `self` is not prenex, then the leading quantifiers are considered
        and the matrix will not be quantifier-free:

        >>> m, B = parse('forall x (P(x) | exists y Q(y))').matrix()
        >>> m
        Or(P(x), Ex(y, Q(y)))

        .. seealso::
            * :class:`Prefix <.quantified.Prefix>` -- a quantifier prefix
            * :meth:`quantify` -- add quantifier prefix
        """
        block_vars = []
        mat = self
        pre = Prefix()
        while Formula.is_quantified_formula(mat):
            block_quantifier = type(mat)
            while isinstance(mat, block_quantifier):
                block_vars.append(mat.var)
                mat = mat.arg
            pre.append((block_quantifier, block_vars))
            block_vars = []
        return mat, pre

    def quantify(self, prefix: Prefix) -> Formula:
        """Add quantifier prefix.

        >>> from logicnf.firstorder import Predicate, Variable
        >>> f = Predicate('R', (Variable('x'), Variable('y')))
        >>> f.quantify(Prefix((All, ['x']), (Ex, ['y'])))
        All(x, Ex(y, R(x, y)))

        .. seealso::
            * :class:`Prefix <.quantified.Prefix>` -- a quantifier prefix
            * :meth:`matrix` -- prenex formula without quantifier prefix
        """
        f = self
        for q, V in reversed(prefix):
            for v in reversed(V):
                f = q(v, f)
        return f

    def qvars(self) -> Iterator[str]:
        """An iterator over all quantified variables in `self`, in the order
        of their quantifiers from left to right.

        >>> from logicnf.syntax import parse
        >>> list(parse('forall y (exists x P(x, y) & exists z Q(z))').qvars())
        ['y', 'x', 'z']
        """
        match self:
            case All() | Ex():
                yield self.var
                yield from self.arg.qvars()
            case And() | Or() | Not() | Implies() | Equivalent():
                for arg in self.args:
                    yield from arg.qvars()
            case AtomicFormula():
                yield from ()
            case _:
                assert False, type(self)

    def _repr_latex_(self) -> str:
        """A LaTeX representation for Jupyter notebooks. In general, the
        underlying method :meth:`as_latex` should be used instead.

        .. seealso:: :meth:`as_latex` -- LaTeX representation
        """
        return f'$\\displaystyle {self.as_latex()}$'

    def _repr_pretty_(self, p: pretty.RepresentationPrinter, cycle: bool) -> None:
        assert not cycle
        op = self.__class__.__name__
        with p.group(len(op) + 1, op + '(', ')'):
            for idx, arg in enumerate(self.args):
                if idx:
                    p.text(',')
                    p.breakable()
                p.pretty(arg)

    def eliminate_implications(self) -> Formula:
        """Replace implications and equivalences by disjunctions and
        conjunctions.

        .. seealso:: :data:`.nnf.eliminate_implications`
        """
        return eliminate_implications(self)

    def to_nnf(self) -> Formula:
        """Convert to Negation Normal Form by applying De Morgan's laws.

        .. seealso:: :data:`.nnf.nnf`
        """
        return nnf(self)

    def to_pnf(self, is_nnf: bool = False) -> Formula:
        """Convert to Prenex Normal Form.

        .. seealso:: :data:`.pnf.pnf`
        """
        return pnf(self, is_nnf=is_nnf)


# The following imports are intentionally late to avoid circularity.
from .atomic import AtomicFormula
from .boolean import And, Equivalent, Implies, Not, Or
from .quantified import All, Ex, Prefix, QuantifiedFormula
from .nnf import eliminate_implications, nnf
from .pnf import pnf
