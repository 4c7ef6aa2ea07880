"""Closed intervals over totally ordered types.

A :class:`ClosedRange` does not require its start to be less than or equal to
its end. Ranges with start greater than end are empty:

>>> from rationals import div_by
>>> r = make_range(div_by(2, 3), div_by(1, 3))
>>> r.is_empty()
True
>>> any(contains(r, div_by(n, 6)) for n in range(-12, 13))
False
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeAlias, TypeVar

from .rational import Rational


class SupportsLessEqual(Protocol):

    def __le__(self, other: Any, /) -> bool:
        ...


τ = TypeVar('τ', bound=SupportsLessEqual)
"""A type variable denoting the type of the endpoints of a
:class:`ClosedRange`.
"""


@dataclass(frozen=True)
class ClosedRange(Generic[τ]):
    """The closed interval from `start` to `end`, both inclusive.

    >>> ClosedRange(1, 3)
    ClosedRange(1, 3)
    >>> [n for n in range(6) if n in ClosedRange(1, 3)]
    [1, 2, 3]
    >>> print(ClosedRange(1, 3))
    [1, 3]
    """

    start: τ
    end: τ

    def __contains__(self, value: τ) -> bool:
        return self.start <= value and value <= self.end

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.start!r}, {self.end!r})'

    def __str__(self) -> str:
        return f'[{self.start}, {self.end}]'

    def is_empty(self) -> bool:
        """
        >>> ClosedRange(2, 2).is_empty()
        False
        >>> ClosedRange(2, 1).is_empty()
        True
        """
        return not self.start <= self.end


RationalRange: TypeAlias = ClosedRange[Rational]


def make_range(start: Rational, end: Rational) -> RationalRange:
    """
    >>> from rationals import div_by
    >>> r = make_range(div_by(2, 6), div_by(-2, -3))
    >>> r
    ClosedRange(Rational(2, 6), Rational(-2, -3))
    >>> print(r)
    [1/3, 2/3]
    """
    return ClosedRange(start, end)


def contains(range_: RationalRange, value: Rational) -> bool:
    """
    >>> from rationals import div_by
    >>> third_to_two_thirds = make_range(div_by(1, 3), div_by(2, 3))
    >>> contains(third_to_two_thirds, div_by(1, 2))
    True
    >>> contains(third_to_two_thirds, div_by(-2, -6))
    True
    >>> contains(third_to_two_thirds, div_by(4, 6))
    True
    >>> contains(third_to_two_thirds, div_by(3, 4))
    False
    """
    return value in range_
