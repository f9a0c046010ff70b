__version__ = 0.1

___status__ = 'Prototype'

from . import firstorder

from .firstorder import (Formula, AtomicFormula, Predicate, Variable,  # noqa
                         BooleanFormula, Equivalent, Implies, And, Or, Not,
                         QuantifiedFormula, Ex, All, Prefix, Clause, Literal)

from .syntax import FormulaSyntaxError, LexError, ParseError, parse  # noqa

from .pipeline import (Conversion, ConversionResult, Stage, Step,  # noqa
                       clausal, cnf, dnf, horn, prenex)

__all__ = firstorder.__all__ + [
    'FormulaSyntaxError', 'LexError', 'ParseError', 'parse',

    'Conversion', 'ConversionResult', 'Stage', 'Step',

    'prenex', 'cnf', 'dnf', 'clausal', 'horn'
]
