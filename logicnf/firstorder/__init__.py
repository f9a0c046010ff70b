r"""Implementation of first-order formulas and of the syntactic
transformations into normal forms.

An abstract base class :class:`Formula` implements representations of and
methods on first-order formulas recursively built using first-order
operators:

1. Boolean operators:

   a. Negation :math:`\lnot`

   b. Conjunction :math:`\land` and disjunction :math:`\lor`

   c. Implication :math:`\to`

   d. Bi-implication :math:`\leftrightarrow`

2. Quantifiers :math:`\exists x` and :math:`\forall x`, where :math:`x` is a
   variable name.

Operators are mapped to classes as follows:

+---------------+---------------+--------------+------------------+-----------------------------+-----------------+-----------------+
| :math:`\lnot` | :math:`\land` | :math:`\lor` | :math:`\to`      | :math:`\leftrightarrow`     | :math:`\exists` | :math:`\forall` |
+---------------+---------------+--------------+------------------+-----------------------------+-----------------+-----------------+
| :class:`Not`  | :class:`And`  | :class:`Or`  | :class:`Implies` | :class:`Equivalent`         | :class:`Ex`     | :class:`All`    |
+---------------+---------------+--------------+------------------+-----------------------------+-----------------+-----------------+

The leaves are atomic formulas, which are either instances of
:class:`Variable` or applications of a :class:`Predicate` to argument
formulas:

>>> x = Variable('x')
>>> f = All('x', Implies(Predicate('P', [x]), Predicate('Q', [x])))
>>> f
All(x, Implies(P(x), Q(x)))
>>> print(f)
∀x (P(x) → Q(x))

The transformations are callable objects, which are applied in this order
to obtain the various normal forms:

>>> g = eliminate_implications(f); print(g)
∀x (¬P(x) ∨ Q(x))
>>> nnf(g) == g
True
>>> print(distribute_and(pnf(g, is_nnf=True)))
∀x (¬P(x) ∨ Q(x))
"""  # noqa

from .formula import Formula  # noqa

from .atomic import AtomicFormula, Predicate, Variable  # noqa

from .boolean import BooleanFormula, BinaryFormula, Equivalent, Implies, And, Or, Not  # noqa

from .quantified import QuantifiedFormula, Ex, All, Prefix  # noqa

from .nnf import eliminate_implications, nnf  # noqa

from .pnf import pnf  # noqa

from .bnf import Distribution, distribute_and, distribute_or  # noqa

from .clauses import Clause, Literal, clauses_as_latex, extract_clauses, is_horn  # noqa


__all__ = [
    'Variable', 'Predicate',

    'Ex', 'All',

    'Equivalent', 'Implies', 'And', 'Or', 'Not',

    'eliminate_implications', 'nnf', 'pnf', 'distribute_and', 'distribute_or',

    'Clause', 'Literal', 'extract_clauses', 'is_horn'
]
