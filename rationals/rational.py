r"""Exact rational numbers over arbitrary-precision integers.

A :class:`Rational` stores a numerator and a denominator as
:external:class:`gmpy2.mpz`. The stored pair need not be in lowest terms, and
the denominator may be negative. Reduction happens on demand in
:meth:`Rational.normalize`, and all arithmetic returns normalized values:

>>> half = div_by(1, 2)
>>> third = div_by(1, 3)
>>> half + third
Rational(5, 6)
>>> half - third
Rational(1, 6)
>>> half * third
Rational(1, 6)
>>> half / third
Rational(3, 2)
>>> -half
Rational(-1, 2)
>>> half < div_by(2, 3)
True
>>> div_by(2000000000, 4000000000) == half
True
>>> big = div_by(mpz('912016490186296920119201192141970416029'),
...              mpz('1824032980372593840238402384283940832058'))
>>> big == half
True

Normalization yields a positive denominator and coprime numerator and
denominator; zero becomes ``0/1``:

>>> values = [make(n, d) for n in range(-4, 5) for d in range(-3, 4) if d != 0]
>>> all(r.normalize().denominator > 0 for r in values)
True
>>> all(gcd(r.normalize().numerator, r.normalize().denominator) == 1
...     for r in values)
True
>>> make(0, -7).normalize()
Rational(0, 1)

Equality is invariant under scaling, and the order is total and consistent
with equality:

>>> all(make(3 * k, -5 * k) == make(-3, 5) for k in range(-6, 7) if k != 0)
True
>>> import itertools
>>> all(sum((a < b, a == b, a > b)) == 1
...     for a, b in itertools.product(values, repeat=2))
True
>>> all(not (a == b and b == c) or a == c
...     for a, b, c in itertools.product(values[::5], repeat=3))
True

Arithmetic identities:

>>> all(add(a, negate(a)) == make(0, 1) for a in values)
True
>>> one = make(1, 1)
>>> all(repr(multiply(a, divide(one, a))) == 'Rational(1, 1)'
...     for a in values if a.numerator != 0)
True
>>> few = values[::7]
>>> all(a + b == b + a and a * b == b * a
...     for a, b in itertools.product(few, repeat=2))
True
>>> all((a + b) + c == a + (b + c) and (a * b) * c == a * (b * c)
...     for a, b, c in itertools.product(few, repeat=3))
True
>>> all(parse(to_string(r.normalize())) == r.normalize() for r in values)
True
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging
import operator
import re
from typing import TYPE_CHECKING, Final, Optional, SupportsIndex

from gmpy2 import gcd, mpz, sign
import sympy

from .support.excepthook import DivisionByZero, InvalidArgument, ParseError

if TYPE_CHECKING:
    from .ranges import ClosedRange


logger = logging.getLogger(__name__)

_INTEGER_LITERAL: Final = re.compile(r'[+-]?[0-9]+')

_max_bits: Optional[int] = None


def max_bits() -> Optional[int]:
    """The maximal bit length admitted for numerators and denominators, or
    :data:`None` if there is no limit.
    """
    return _max_bits


def set_max_bits(limit: Optional[int]) -> Optional[int]:
    """Limit the bit length of numerators and denominators of all
    subsequently constructed rationals to `limit`, or remove the limit with
    :data:`None`. Return the previous limit.

    Arithmetic checks the limit only on its normalized results:

    >>> save_limit = set_max_bits(8)
    >>> Rational(255, 85)
    Rational(255, 85)
    >>> Rational(256, 2)
    Traceback (most recent call last):
    ...
    rationals.support.excepthook.InvalidArgument: 256/2 exceeds the limit of 8 bits
    >>> make(255, 2) * make(2, 255)
    Rational(1, 1)
    >>> make(255, 1) + make(1, 1)
    Traceback (most recent call last):
    ...
    rationals.support.excepthook.InvalidArgument: 256/1 exceeds the limit of 8 bits

    Values constructed before the limit was set remain usable:

    >>> set_max_bits(None)
    8
    >>> r = make(2**20, 3)
    >>> r_hash = hash(r)
    >>> set_max_bits(8)
    >>> r == r, hash(r) == r_hash, str(r)
    (True, True, '1048576/3')
    >>> r.normalize() == r
    True
    >>> r + r
    Traceback (most recent call last):
    ...
    rationals.support.excepthook.InvalidArgument: 2097152/3 exceeds the limit of 8 bits
    >>> set_max_bits(save_limit)
    8
    """
    global _max_bits
    save_max_bits = _max_bits
    _max_bits = limit
    return save_max_bits


class Ordering(Enum):
    """The result of a three-way comparison of rational numbers as returned
    by :meth:`Rational.compare`.
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1


def _check_max_bits(numerator: mpz, denominator: mpz) -> None:
    if _max_bits is not None and max(numerator.bit_length(),
                                     denominator.bit_length()) > _max_bits:
        raise InvalidArgument(f'{numerator}/{denominator} exceeds the '
                              f'limit of {_max_bits} bits')


def _as_mpz(value: object, role: str) -> mpz:
    if isinstance(value, mpz):
        return value
    if isinstance(value, bool):
        raise InvalidArgument(
            f'expected integer {role}; {value!r} is {type(value)}')
    try:
        return mpz(operator.index(value))  # type: ignore[arg-type]
    except TypeError:
        raise InvalidArgument(
            f'expected integer {role}; {value!r} is {type(value)}') from None


@dataclass(frozen=True, eq=False, repr=False)
class Rational:
    """A rational number `numerator`/`denominator`.

    >>> r = Rational(-2, 4)
    >>> r
    Rational(-2, 4)
    >>> r.numerator, r.denominator
    (mpz(-2), mpz(4))
    >>> print(r)
    -1/2
    >>> r == Rational(1, -2)
    True
    >>> hash(r) == hash(Rational(1, -2))
    True
    >>> Rational(7)
    Rational(7, 1)
    >>> Rational(1, 0)
    Traceback (most recent call last):
    ...
    rationals.support.excepthook.InvalidArgument: zero denominator in 1/0
    >>> Rational(1, 2.0)
    Traceback (most recent call last):
    ...
    rationals.support.excepthook.InvalidArgument: expected integer denominator; 2.0 is <class 'float'>
    >>> Rational(True, 2)
    Traceback (most recent call last):
    ...
    rationals.support.excepthook.InvalidArgument: expected integer numerator; True is <class 'bool'>
    """

    numerator: mpz
    denominator: mpz = mpz(1)

    def __post_init__(self) -> None:
        numerator = _as_mpz(self.numerator, 'numerator')
        denominator = _as_mpz(self.denominator, 'denominator')
        if denominator == 0:
            logger.debug(f'rejected zero denominator for numerator {numerator}')
            raise InvalidArgument(f'zero denominator in {numerator}/0')
        _check_max_bits(numerator, denominator)
        object.__setattr__(self, 'numerator', numerator)
        object.__setattr__(self, 'denominator', denominator)

    def __add__(self, other: object) -> Rational:
        if not isinstance(other, Rational):
            return NotImplemented
        return add(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return self.compare(other) is Ordering.EQUAL

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return self.compare(other) is not Ordering.LESS

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return self.compare(other) is Ordering.GREATER

    def __hash__(self) -> int:
        # Equal rationals have equal normal forms.
        normalized = self.normalize()
        return hash((normalized.numerator, normalized.denominator))

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return self.compare(other) is not Ordering.GREATER

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return self.compare(other) is Ordering.LESS

    def __mul__(self, other: object) -> Rational:
        if not isinstance(other, Rational):
            return NotImplemented
        return multiply(self, other)

    def __neg__(self) -> Rational:
        return negate(self)

    def __repr__(self) -> str:
        return f'Rational({self.numerator}, {self.denominator})'

    def __str__(self) -> str:
        return to_string(self)

    def __sub__(self, other: object) -> Rational:
        if not isinstance(other, Rational):
            return NotImplemented
        return subtract(self, other)

    def __truediv__(self, other: object) -> Rational:
        if not isinstance(other, Rational):
            return NotImplemented
        return divide(self, other)

    def as_latex(self) -> str:
        r"""LaTeX representation of the normal form as a string.

        >>> Rational(10, 12).as_latex()
        '\\frac{5}{6}'
        >>> Rational(4, 2).as_latex()
        '2'
        """
        return sympy.latex(self.sympy())

    def compare(self, other: Rational) -> Ordering:
        """Three-way comparison of `self` and `other` by cross multiplication
        of their normal forms.

        >>> Rational(1, 2).compare(Rational(2, 3))
        <Ordering.LESS: -1>
        >>> Rational(-2, -4).compare(Rational(1, 2))
        <Ordering.EQUAL: 0>
        """
        return compare(self, other)

    @classmethod
    def from_string(cls, text: str) -> Rational:
        """Same as :func:`parse`.

        >>> Rational.from_string('-3/9')
        Rational(-3, 9)
        """
        return parse(text)

    def normalize(self) -> Rational:
        """Return the equal rational in lowest terms with positive
        denominator. `self` is not modified.

        >>> r = Rational(6, -4)
        >>> r.normalize()
        Rational(-3, 2)
        >>> r
        Rational(6, -4)
        """
        return normalize(self)

    def range_to(self, end: Rational) -> ClosedRange[Rational]:
        """The closed range from `self` to `end`.

        >>> div_by(1, 2) in div_by(1, 3).range_to(div_by(2, 3))
        True
        """
        from .ranges import ClosedRange
        return ClosedRange(self, end)

    def sympy(self) -> sympy.Rational:
        """The equal :class:`sympy.Rational`.

        >>> Rational(-2, 4).sympy()
        -1/2
        """
        normalized = self.normalize()
        return sympy.Rational(int(normalized.numerator),
                              int(normalized.denominator))

    def _repr_latex_(self) -> str:
        """A LaTeX representation for Jupyter notebooks.

        .. seealso:: :meth:`as_latex` -- LaTeX representation
        """
        return f'$\\displaystyle {self.as_latex()}$'


def make(numerator: SupportsIndex, denominator: SupportsIndex) -> Rational:
    """Construct `numerator`/`denominator` without normalizing.

    >>> make(4, -6)
    Rational(4, -6)
    >>> make(5, 0)
    Traceback (most recent call last):
    ...
    rationals.support.excepthook.InvalidArgument: zero denominator in 5/0
    """
    return Rational(numerator, denominator)  # type: ignore[arg-type]


def div_by(numerator: SupportsIndex, denominator: SupportsIndex) -> Rational:
    """Construct a rational from two integers of the same kind, Python
    :class:`int`, :class:`gmpy2.mpz`, or fixed-width integers such as
    :class:`numpy.int64`. Both are widened to :class:`gmpy2.mpz`.

    >>> div_by(3, 6)
    Rational(3, 6)
    >>> div_by(mpz(2)**100, mpz(2)**101) == div_by(1, 2)
    True
    """
    return make(numerator, denominator)


def _normal_form(numerator: mpz, denominator: mpz,
                 check_limit: bool = True) -> Rational:
    # denominator != 0
    g = gcd(numerator, denominator)
    numerator //= g
    denominator //= g
    if denominator < 0:
        numerator, denominator = -numerator, -denominator
    if check_limit:
        _check_max_bits(numerator, denominator)
    # Bypass __post_init__, the pair is already validated.
    r = object.__new__(Rational)
    object.__setattr__(r, 'numerator', numerator)
    object.__setattr__(r, 'denominator', denominator)
    return r


def normalize(r: Rational) -> Rational:
    """
    >>> normalize(make(117, 1098))
    Rational(13, 122)
    >>> normalize(make(-5, -10))
    Rational(1, 2)
    >>> normalize(make(0, -3))
    Rational(0, 1)
    """
    # Reduction never increases the bit length.
    return _normal_form(r.numerator, r.denominator, check_limit=False)


def to_string(r: Rational) -> str:
    """The normal form of `r` as ``<numerator>/<denominator>``, or just
    ``<numerator>`` when the denominator is 1.

    >>> to_string(make(2, 1))
    '2'
    >>> to_string(make(-2, 4))
    '-1/2'
    >>> to_string(make(3, -3))
    '-1'
    >>> to_string(make(0, -8))
    '0'
    """
    normalized = r.normalize()
    if normalized.denominator == 1:
        return str(normalized.numerator)
    return f'{normalized.numerator}/{normalized.denominator}'


def parse(text: str) -> Rational:
    """Parse ``<integer>`` or ``<integer>/<integer>``, splitting at the first
    ``/``. Integers are decimal with an optional sign. The result is not
    normalized.

    >>> parse('117/1098')
    Rational(117, 1098)
    >>> print(parse('117/1098'))
    13/122
    >>> parse('-42')
    Rational(-42, 1)
    >>> parse('+1/-2')
    Rational(1, -2)
    >>> parse('1/2/3')
    Traceback (most recent call last):
    ...
    rationals.support.excepthook.ParseError: cannot parse '1/2/3': '2/3' is not an integer
    >>> parse(' 1')
    Traceback (most recent call last):
    ...
    rationals.support.excepthook.ParseError: cannot parse ' 1': ' 1' is not an integer
    >>> parse('1/0')
    Traceback (most recent call last):
    ...
    rationals.support.excepthook.ParseError: cannot parse '1/0': zero denominator in 1/0
    >>> parse('')
    Traceback (most recent call last):
    ...
    rationals.support.excepthook.ParseError: cannot parse '': '' is not an integer
    >>> parse('x/2')
    Traceback (most recent call last):
    ...
    rationals.support.excepthook.ParseError: cannot parse 'x/2': 'x' is not an integer

    Literals are not limited in length:

    >>> long_literal = parse('1' * 5000 + '/3')
    >>> long_literal.numerator == mpz('1' * 5000)
    True
    >>> r = make(mpz(7)**6000, 3)
    >>> len(to_string(r)) > 5000
    True
    >>> parse(to_string(r)) == r
    True
    """
    numerator_text, slash, denominator_text = text.partition('/')
    if not slash:
        denominator_text = '1'
    for part in (numerator_text, denominator_text):
        if not _INTEGER_LITERAL.fullmatch(part):
            logger.debug(f'{part!r} in {text!r} is not an integer literal')
            raise ParseError(f'cannot parse {text!r}: {part!r} is not an integer')
    try:
        return Rational(mpz(numerator_text.removeprefix('+')),
                        mpz(denominator_text.removeprefix('+')))
    except InvalidArgument as exc:
        raise ParseError(f'cannot parse {text!r}: {exc}') from exc


def add(a: Rational, b: Rational) -> Rational:
    """
    >>> add(make(1, 2), make(1, 3))
    Rational(5, 6)
    >>> add(make(1, -2), make(2, 4))
    Rational(0, 1)
    """
    return _normal_form(a.numerator * b.denominator + a.denominator * b.numerator,
                        a.denominator * b.denominator)


def subtract(a: Rational, b: Rational) -> Rational:
    """
    >>> subtract(make(1, 2), make(1, 3))
    Rational(1, 6)
    >>> subtract(make(1, 3), make(1, 2))
    Rational(-1, 6)
    """
    return _normal_form(a.numerator * b.denominator - a.denominator * b.numerator,
                        a.denominator * b.denominator)


def multiply(a: Rational, b: Rational) -> Rational:
    """
    >>> multiply(make(2, 3), make(-9, 4))
    Rational(-3, 2)
    """
    return _normal_form(a.numerator * b.numerator,
                        a.denominator * b.denominator)


def divide(a: Rational, b: Rational) -> Rational:
    """
    >>> divide(make(1, 2), make(1, 3))
    Rational(3, 2)
    >>> divide(make(1, 2), make(-1, 3))
    Rational(-3, 2)
    >>> divide(make(1, 2), make(0, 5))
    Traceback (most recent call last):
    ...
    rationals.support.excepthook.DivisionByZero: division of 1/2 by zero
    """
    if b.numerator == 0:
        logger.debug(f'attempt to divide {a} by {b!r}')
        raise DivisionByZero(f'division of {a} by zero')
    return _normal_form(a.numerator * b.denominator,
                        b.numerator * a.denominator)


def negate(a: Rational) -> Rational:
    """
    >>> negate(make(2, -4))
    Rational(1, 2)
    """
    return _normal_form(-a.numerator, a.denominator)


def compare(a: Rational, b: Rational) -> Ordering:
    """
    >>> compare(make(1, 3), make(1, 2))
    <Ordering.LESS: -1>
    >>> compare(make(-1, -2), make(2, 4))
    <Ordering.EQUAL: 0>
    >>> compare(make(1, -3), make(-1, 2))
    <Ordering.GREATER: 1>
    """
    a = a.normalize()
    b = b.normalize()
    return Ordering(sign(a.numerator * b.denominator - b.numerator * a.denominator))


def equals(a: Rational, b: Rational) -> bool:
    """
    >>> equals(make(2, 4), make(-1, -2))
    True
    >>> equals(make(2, 4), make(1, -2))
    False
    """
    return compare(a, b) is Ordering.EQUAL
