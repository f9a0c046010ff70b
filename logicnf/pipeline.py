"""This module :mod:`logicnf.pipeline` provides step-by-step conversions of
formulas given as strings into normal forms. All conversions run the same
pipeline, which is parameterized with an ordered list of stages:

+----------+-------------------------------------------------------------------+
| Prenex   | eliminate implications, De Morgan, prenex                         |
+----------+-------------------------------------------------------------------+
| CNF      | eliminate implications, De Morgan, prenex, distribute AND over OR |
+----------+-------------------------------------------------------------------+
| DNF      | eliminate implications, De Morgan, prenex, distribute OR over AND |
+----------+-------------------------------------------------------------------+
| Clausal  | eliminate implications, De Morgan, distribute AND over OR,        |
|          | extract clauses                                                   |
+----------+-------------------------------------------------------------------+
| Horn     | as Clausal, classify clauses                                      |
+----------+-------------------------------------------------------------------+

A conversion records the original formula, the result of every stage that
visibly changes the formula, and the result. Whether a stage changes the
formula is decided by comparing the canonical LaTeX representations.

>>> result = cnf('$(A \\\\land B) \\\\lor C$')
>>> for step in result.steps:
...     print(step.index, step.description, step.formula)
1 Original formula: (A \\land B) \\lor C
2 Distribute AND over OR: ((A \\lor C) \\land (B \\lor C))
3 CNF Result: ((A \\lor C) \\land (B \\lor C))
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import logging
import time
from typing import Callable, Final, Iterable, Optional

from .firstorder import (
    Clause, Formula, clauses_as_latex, distribute_and, distribute_or,
    eliminate_implications, extract_clauses, is_horn, nnf, pnf)
from .support.logging import DeltaTimeFormatter, Timer
from .syntax import FormulaSyntaxError, clean, parse

# Create logger
delta_time_formatter = DeltaTimeFormatter(
    f'%(asctime)s - %(name)s - %(levelname)-5s - %(delta)s: %(message)s')

stream_handler = logging.StreamHandler()
stream_handler.setFormatter(delta_time_formatter)

logger = logging.getLogger(__name__)
logger.propagate = False
logger.addHandler(stream_handler)
logger.addFilter(lambda record: str(record.msg).strip() != '')
logger.setLevel(logging.WARNING)


ERROR: Final = 'Error'
"""The result of a conversion that has failed.
"""

NESTED_TOO_DEEPLY: Final = 'formula is nested too deeply'
"""The error message for input that exceeds the recursion limit of the
parser or of the rewrite stages.
"""


class Stage(Enum):
    """The rewrite stages of the pipeline. The value of a member is the
    description used for its step unless a conversion overrides it.
    """

    ELIMINATE_IMPLICATIONS = 'Eliminate implications:'
    DE_MORGAN = "Apply De Morgan's laws:"
    PRENEX = 'Convert to Prenex form:'
    DISTRIBUTE_AND_OVER_OR = 'Distribute AND over OR:'
    DISTRIBUTE_OR_OVER_AND = 'Distribute OR over AND:'

    def apply(self, f: Formula) -> Formula:
        return TRANSFORMATIONS[self](f)


TRANSFORMATIONS: Final[dict[Stage, Callable[[Formula], Formula]]] = {
    Stage.ELIMINATE_IMPLICATIONS: eliminate_implications,
    Stage.DE_MORGAN: nnf,
    # Every pipeline applies De Morgan before prenexing.
    Stage.PRENEX: lambda f: pnf(f, is_nnf=True),
    Stage.DISTRIBUTE_AND_OVER_OR: distribute_or,
    Stage.DISTRIBUTE_OR_OVER_AND: distribute_and}


@dataclass(frozen=True)
class Step:
    """One step of a conversion, for display.
    """

    index: int
    """The position of the step in its conversion, starting at 1.
    """

    description: str

    formula: str
    """The formula after the step in LaTeX notation, or the original input.
    Steps that only comment on the conversion have an empty formula.
    """


@dataclass
class StepRecorder:
    """Collects the steps of one single conversion.

    >>> recorder = StepRecorder()
    >>> recorder.add('Original formula:', 'P \\\\to Q')
    Step(index=1, description='Original formula:', formula='P \\\\to Q')
    >>> recorder.current = '(P \\\\to Q)'
    >>> recorder.add_if_changed('Apply De Morgan:', '(P \\\\to Q)')
    False
    >>> recorder.add_if_changed('Eliminate implications:', '(\\\\lnot P \\\\lor Q)')
    True
    >>> [step.index for step in recorder.steps]
    [1, 2]
    """

    steps: list[Step] = field(default_factory=list)

    current: Optional[str] = None
    """The canonical text of the formula at the current stage of the
    conversion, which :meth:`add_if_changed` compares with.
    """

    def add(self, description: str, formula: str) -> Step:
        step = Step(len(self.steps) + 1, description, formula)
        self.steps.append(step)
        return step

    def add_if_changed(self, description: str, formula: str) -> bool:
        """Add a step if `formula` differs from :attr:`current`, and make
        `formula` the current one.
        """
        changed = formula != self.current
        self.current = formula
        if changed:
            self.add(description, formula)
        return changed


@dataclass
class ConversionResult:
    """The outcome of a conversion. The presentation of the steps and of the
    result is left to the caller.
    """

    steps: list[Step]

    result: str
    """The resulting formula in LaTeX notation, or :data:`ERROR`.
    """

    clauses: Optional[list[Clause]] = None
    """The clauses of clausal and Horn conversions, :obj:`None` otherwise.
    """

    is_horn: Optional[bool] = None
    """Whether all clauses are Horn clauses for Horn conversions,
    :obj:`None` otherwise.
    """

    time_total: Optional[float] = None
    """The wall time of the conversion in seconds.
    """

    @property
    def failed(self) -> bool:
        return self.result == ERROR


@dataclass
class Options:
    """This class holds options that can be provided to
    :meth:`.Conversion.__call__`.
    """

    log_level: int = logging.NOTSET
    """The `log_level` of the logger used by :class:`.Conversion`.
    """


class Conversion:
    r"""A callable conversion of a formula string into a normal form.

    :param name:
      The name of the normal form, which is used in the result step
      ``<name> Result:``.

    :param stages:
      The rewrite stages in the order of their application.

    :param descriptions:
      Step descriptions overriding the default descriptions of the stages.

    :param clausal:
      Extract clauses from the last formula. The result is then the clausal
      form instead of the formula.

    :param horn:
      Classify the clauses as Horn clauses. This implies `clausal`.

    >>> result = horn('(P & Q) -> R')
    >>> result.result
    '(\\lnot P \\lor \\lnot Q \\lor R)'
    >>> result.is_horn
    True
    >>> for step in result.steps:  # doctest: +NORMALIZE_WHITESPACE
    ...     print(step.index, step.description, step.formula)
    1 Original formula: (P & Q) -> R
    2 Eliminate implications: (\lnot (P \land Q) \lor R)
    3 Apply De Morgan's laws: ((\lnot P \lor \lnot Q) \lor R)
    4 Extract clauses: (\lnot P \lor \lnot Q \lor R)
    5 Formula is in Horn clause form!
    6 Horn clauses: (\lnot P \lor \lnot Q \lor R)
    """

    def __init__(self, name: str, stages: Iterable[Stage],
                 descriptions: Optional[dict[Stage, str]] = None,
                 clausal: bool = False, horn: bool = False) -> None:
        self.name = name
        self.stages = tuple(stages)
        self.descriptions = dict(descriptions or {})
        self.clausal = clausal or horn
        self.horn = horn

    def __call__(self, s: str, log_level: int = logging.NOTSET) -> ConversionResult:
        """The entry point of the callable class :class:`.Conversion`.

        :param s:
          The input formula, optionally in ``$`` delimiters.

        :param log_level:
          The level of the logger :data:`logger` during the conversion.

        :returns:
          The steps, the result and the elapsed time. If `s` cannot be
          processed, the result is :data:`ERROR`, and the last step holds the
          error message.
        """
        timer = Timer()
        delta_time_formatter.set_reference_time(time.time())
        options = Options(log_level=log_level)
        save_level = logger.getEffectiveLevel()
        try:
            logger.setLevel(options.log_level)
            logger.info(f'{self.name}: {options}')
            result = self.convert(s)
            logger.info(f'{self.name}: finished after {timer.get():.6f} s')
        finally:
            logger.setLevel(save_level)
        result.time_total = timer.get()
        return result

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.name!r})'

    def convert(self, s: str) -> ConversionResult:
        recorder = StepRecorder()
        text = clean(s)
        recorder.add('Original formula:', text)
        try:
            f = parse(text)
            # The first stage is compared with the parsed formula, not with
            # the input text. So `A & B` records no elimination step.
            recorder.current = f.as_latex()
            logger.debug(f'{self.name}: parsed {recorder.current}')
            f = self.rewrite(f, recorder)
            if not self.clausal:
                result = f.as_latex()
                recorder.add(f'{self.name} Result:', result)
                logger.info(f'{self.name}: result {result}')
                return ConversionResult(recorder.steps, result)
            clauses = extract_clauses(f)
            result = clauses_as_latex(clauses)
            recorder.add('Extract clauses:', result)
            logger.info(f'{self.name}: {len(clauses)} clauses {result}')
            if not self.horn:
                return ConversionResult(recorder.steps, result, clauses=clauses)
            verdict = is_horn(clauses)
            self.add_horn_steps(recorder, verdict, result)
            logger.info(f'{self.name}: is Horn: {verdict}')
            return ConversionResult(recorder.steps, result, clauses=clauses,
                                    is_horn=verdict)
        except FormulaSyntaxError as exc:
            return self.failure(recorder, str(exc))
        except RecursionError:
            return self.failure(recorder, NESTED_TOO_DEEPLY)

    def failure(self, recorder: StepRecorder, message: str) -> ConversionResult:
        logger.info(f'{self.name}: {message}')
        recorder.add('Error:', f'Failed to process formula: {message}')
        return ConversionResult(recorder.steps, ERROR,
                                clauses=[] if self.clausal else None,
                                is_horn=False if self.horn else None)

    def rewrite(self, f: Formula, recorder: StepRecorder) -> Formula:
        """Apply the stages to `f`, recording each one that changes the
        canonical text of the formula.
        """
        for stage in self.stages:
            f = stage.apply(f)
            description = self.descriptions.get(stage, stage.value)
            changed = recorder.add_if_changed(description, f.as_latex())
            logger.debug(f'{self.name}: {stage.name} '
                         f'{"changed" if changed else "did not change"} the formula')
        return f

    @staticmethod
    def add_horn_steps(recorder: StepRecorder, verdict: bool, clauses_as_latex: str) -> None:
        if verdict:
            recorder.add('Formula is in Horn clause form!', '')
            if clauses_as_latex:
                recorder.add('Horn clauses:', clauses_as_latex)
        else:
            recorder.add('Note: Formula is not in Horn form', '')


_NNF: Final = (Stage.ELIMINATE_IMPLICATIONS, Stage.DE_MORGAN)

prenex = Conversion('Prenex', (*_NNF, Stage.PRENEX))

cnf = Conversion('CNF', (*_NNF, Stage.PRENEX, Stage.DISTRIBUTE_AND_OVER_OR))

dnf = Conversion('DNF', (*_NNF, Stage.PRENEX, Stage.DISTRIBUTE_OR_OVER_AND))

# Clause extraction is defined for quantifier-free matrices, so there is no
# prenex stage.
clausal = Conversion('Clausal', (*_NNF, Stage.DISTRIBUTE_AND_OVER_OR),
                     descriptions={Stage.DISTRIBUTE_AND_OVER_OR: 'Convert to CNF:'},
                     clausal=True)

horn = Conversion('Horn', (*_NNF, Stage.DISTRIBUTE_AND_OVER_OR),
                  descriptions={Stage.DISTRIBUTE_AND_OVER_OR: 'Convert to CNF:'},
                  horn=True)

CONVERSIONS: Final = {
    'prenex': prenex, 'cnf': cnf, 'dnf': dnf, 'clausal': clausal, 'horn': horn}
