"""Demonstration of :mod:`rationals`. Run with ``python -m rationals``; every
line printed should be ``True``.

>>> main()  # doctest: +NORMALIZE_WHITESPACE
True
True
True
True
True
True
True
True
True
True
True
True
"""

from gmpy2 import mpz

from .rational import Rational, div_by, parse
from .support.logging import logger


def main() -> None:
    half = div_by(1, 2)
    third = div_by(1, 3)
    two_thirds = div_by(2, 3)

    logger.info(f'computing with {half} and {third}')

    total: Rational = half + third
    print(div_by(5, 6) == total)

    difference: Rational = half - third
    print(div_by(1, 6) == difference)

    product: Rational = half * third
    print(div_by(1, 6) == product)

    quotient: Rational = half / third
    print(div_by(3, 2) == quotient)

    negation: Rational = -half
    print(div_by(-1, 2) == negation)

    print(str(div_by(2, 1)) == '2')
    print(str(div_by(-2, 4)) == '-1/2')
    print(str(parse('117/1098')) == '13/122')

    print(half < two_thirds)

    print(half in third.range_to(two_thirds))

    print(div_by(2000000000, 4000000000) == half)

    print(div_by(mpz('912016490186296920119201192141970416029'),
                 mpz('1824032980372593840238402384283940832058')) == half)


if __name__ == '__main__':
    main()
