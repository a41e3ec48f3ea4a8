r"""
Exact Lagrange interpolation over the integers.

A share set is a collection of points on an integer polynomial f of degree k-1, and the
secret is f(0). Rather than solving for the coefficients we evaluate the Lagrange form
directly:

    f(x) = \sum_i y_i \prod_{j != i} (x - x_j) / (x_i - x_j)

Every basis term is moved over one common denominator (the product of the basis
denominators) so the only division happens once, at the end. That division has to come
out even: the basis values themselves may be fractions (x = 1, 2, 4 gives L_0(0) = 8/3)
but their weighted sum is an integer whenever the points really sit on an integer
polynomial. A non-zero remainder means they don't, and we refuse to round it away.

https://en.wikipedia.org/wiki/Lagrange_polynomial
"""

from typing import Sequence
from collections import namedtuple, Counter

Point = namedtuple('Point', 'X Y')
Share = namedtuple('Share', 'x base digits')


class InvalidPointSet(ValueError):
    pass


class InexactInterpolation(ArithmeticError):
    pass


def product(vals):
    acc = 1
    for v in vals:
        acc *= v
    return acc


def _exact_div(num, den):
    'num / den, which must leave no remainder'
    quot, rem = divmod(num, den)
    if rem:
        raise InexactInterpolation(
            'Interpolation did not divide evenly; the points are not on a common '
            'integer polynomial or the threshold is wrong.')
    return quot


def _check_points(points):
    if not points:
        raise InvalidPointSet('Need at least one point to interpolate.')
    dupes = sorted(x for x, c in Counter(p.X for p in points).items() if c > 1)
    if dupes:
        raise InvalidPointSet(
            'Points must be distinct, x value(s) {} appear more than once.'.format(
                ', '.join(str(d) for d in dupes)))


def interpolate(x: int, points: Sequence[Point]) -> int:
    "return f(x) for the polynomial passing through `points`."
    _check_points(points)
    k = len(points)
    xs = [p.X for p in points]
    ys = [p.Y for p in points]
    nums = []  # numerators
    dens = []  # denominators
    for i in range(k):
        others = list(xs)
        cur = others.pop(i)  # current x value
        nums.append(product(x - o for o in others))
        dens.append(product(cur - o for o in others))
    den = product(dens)  # common denominator
    num = sum(nums[i] * ys[i] * (den // dens[i]) for i in range(k))
    return _exact_div(num, den)


def reconstruct_at_zero(points: Sequence[Point], k: int = None) -> int:
    'recover the secret f(0) from exactly k points'
    if k is not None and len(points) != k:
        raise InvalidPointSet(f'Expected exactly {k} points, got {len(points)}.')
    return interpolate(0, points)
