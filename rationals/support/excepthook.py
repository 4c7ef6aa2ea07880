import sys
from typing import Any, Optional
from types import TracebackType


class NoTraceException(Exception):
    """An exception that prints an error message and exits without a
    traceback. All errors raised by :mod:`rationals` derive from this class.
    They are caused by incorrect input, such as a zero denominator or a
    malformed string, which is a normal situation during interactive use and
    does not require inspection of the code.
    """
    pass


class InvalidArgument(NoTraceException, ValueError):
    """Raised when a :class:`.Rational` cannot be constructed from the given
    numerator and denominator, most notably when the denominator is zero.

    >>> issubclass(InvalidArgument, ValueError)
    True
    """
    pass


class ParseError(NoTraceException, ValueError):
    """Raised when a string is neither an integer literal nor a pair of
    integer literals separated by ``/``.
    """
    pass


class DivisionByZero(NoTraceException, ZeroDivisionError):
    """Raised when dividing by a rational number with numerator zero.

    >>> issubclass(DivisionByZero, InvalidArgument)
    False
    >>> issubclass(DivisionByZero, ZeroDivisionError)
    True
    """
    pass


def handler(exc: NoTraceException, tb: Optional[TracebackType]) -> None:
    """
    >>> handler(ParseError("cannot parse '1/x'"), None)  # doctest: +SKIP
    ParseError: cannot parse '1/x'
    """
    message = exc.args[0] if exc.args else ''
    print(f'{type(exc).__name__}: {message}', file=sys.stderr, flush=True)


_previous_excepthook = sys.excepthook


def excepthook(exc_type: type[BaseException], exc: BaseException,
               tb: Optional[TracebackType]) -> None:
    """Report :class:`NoTraceException` without a traceback, and delegate
    everything else to the hook that was installed before.
    """
    if isinstance(exc, NoTraceException):
        handler(exc, tb)
    else:
        _previous_excepthook(exc_type, exc, tb)


def _ipython_excepthook(shell: Any, exc_type: type[NoTraceException],
                        exc: NoTraceException, tb: TracebackType,
                        tb_offset: Optional[int] = None) -> None:
    handler(exc, tb)


def install() -> None:
    """Install :func:`excepthook` for the Python shell, and the equivalent
    custom exception handler when running under IPython.
    """
    sys.excepthook = excepthook
    try:
        from IPython import get_ipython
    except ImportError:
        return
    shell = get_ipython()
    if shell is not None:
        shell.set_custom_exc((NoTraceException,), _ipython_excepthook)


install()
