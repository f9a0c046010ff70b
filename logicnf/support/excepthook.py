"""Report errors in user input by their message only, without a traceback.

Malformed formulas are a normal situation during interactive use. The
exceptions raised for them derive from :class:`NoTraceException`. The hooks
installed here print such an exception as a single line::

    ParseError: expected primary expression, found and

in the Python shell as well as in IPython. All other exceptions are left to
the previous hooks.
"""

import sys
from types import TracebackType
from typing import Any, Optional

import IPython


class NoTraceException(Exception):
    """An exception whose message is informative enough for the user, so
    that it is reported without a traceback.
    """
    pass


def print_message(exc: BaseException) -> None:
    print(f'{type(exc).__name__}: {exc}', file=sys.stderr, flush=True)


def excepthook(exc_type: type[BaseException], exc: BaseException,
               tb: Optional[TracebackType]) -> None:
    if isinstance(exc, NoTraceException):
        print_message(exc)
    else:
        sys_excepthook(exc_type, exc, tb)


def ipython_handler(shell: Any, exc_type: type[NoTraceException],
                    exc: NoTraceException, tb: TracebackType, tb_offset=None) -> None:
    print_message(exc)


def install() -> None:
    """Install :func:`excepthook` as :data:`sys.excepthook`, and
    :func:`ipython_handler` when running in IPython. Repeated calls have no
    further effect.
    """
    global sys_excepthook
    if sys.excepthook is not excepthook:
        sys_excepthook = sys.excepthook
        sys.excepthook = excepthook
    shell = IPython.get_ipython()
    if shell is not None:
        shell.set_custom_exc((NoTraceException,), ipython_handler)


sys_excepthook = sys.excepthook
install()
