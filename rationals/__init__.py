__version__ = '0.1'

__author__ = 'The rationals developers'
__license__ = 'GPL-2.0-or-later'
__status__ = 'Prototype'

from .rational import (Rational, Ordering, make, div_by, normalize,  # noqa
                       to_string, parse, add, subtract, multiply, divide,
                       negate, compare, equals, max_bits, set_max_bits)

from .ranges import ClosedRange, RationalRange, make_range, contains  # noqa

from .support.excepthook import (NoTraceException, InvalidArgument,  # noqa
                                 ParseError, DivisionByZero)

from .support.logging import show_progress  # noqa

__all__ = [
    'Rational', 'Ordering', 'make', 'div_by', 'normalize', 'to_string',
    'parse', 'add', 'subtract', 'multiply', 'divide', 'negate', 'compare',
    'equals', 'max_bits', 'set_max_bits',
    'ClosedRange', 'RationalRange', 'make_range', 'contains',
    'NoTraceException', 'InvalidArgument', 'ParseError', 'DivisionByZero',
    'show_progress'
]
