import sys
import time

import pytest

from logicnf.support import excepthook
from logicnf.support.logging import DeltaTimeFormatter, Timer
from logicnf.syntax import ParseError, TokenKind, parse


def test_excepthook_is_installed():
    excepthook.install()
    assert sys.excepthook is excepthook.excepthook


def test_syntax_errors_are_reported_without_traceback(capsys):
    try:
        parse('P & & Q')
    except ParseError as exc:
        excepthook.excepthook(type(exc), exc, exc.__traceback__)
    assert capsys.readouterr().err \
        == 'ParseError: expected primary expression, found and\n'


def test_parse_error_attributes():
    with pytest.raises(ParseError) as excinfo:
        parse('(P')
    assert excinfo.value.expected == ')'
    assert excinfo.value.found is None
    with pytest.raises(ParseError) as excinfo:
        parse('P Q')
    assert excinfo.value.found is TokenKind.NAME


def test_delta_time_formatter_reference_time():
    formatter = DeltaTimeFormatter('%(delta)s: %(message)s')
    now = time.time()
    formatter.set_reference_time(now)
    assert abs(formatter.get_reference_time() - now) < 1e-6


def test_timer_reset():
    timer = Timer()
    time.sleep(0.01)
    assert timer.get() >= 0.01
    timer.reset()
    assert timer.get() < 0.01
