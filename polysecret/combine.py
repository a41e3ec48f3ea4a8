'combine raw shares into the secret they encode'
from typing import Sequence, List, Callable, Union

from nacl.utils import random  # cryptographically strong random function

from . import sss
from .decode import decode, DecodeError
from .sss import Point, Share, InvalidPointSet, InexactInterpolation


class InsufficientShares(Exception):
    pass


class InconsistentShares(Exception):
    def __init__(self, msg, share_id=None):
        super().__init__(msg)
        self.share_id = share_id


def first_k_ascending(points, k):
    return sorted(points, key=lambda p: p.X)[:k]


def first_k_as_given(points, k):
    return list(points[:k])


def random_k(points, k):
    # shuffle by sorting on a fresh random key per point
    return sorted(points, key=lambda _: random(16))[:k]


SELECTORS = {
    'ascending': first_k_ascending,
    'given': first_k_as_given,
    'random': random_k,
}

Selector = Union[str, Callable[[Sequence[Point], int], List[Point]]]


def decode_shares(shares: Sequence[Share]) -> List[Point]:
    "decode every share's digits into a Point, tagging failures with the share's id"
    pts = []
    for s in shares:
        try:
            y = decode(s.digits, s.base)
        except DecodeError as e:
            e.share_id = s.x  # add some helpful info
            e.args = (f'Share {s.x}: {e}', )
            raise
        pts.append(Point(s.x, y))
    return pts


def select_points(points: Sequence[Point], k: int, select: Selector = 'ascending') -> List[Point]:
    if callable(select):
        selector = select
    else:
        try:
            selector = SELECTORS[select]
        except KeyError:
            raise ValueError(f'Unknown selection policy {select!r}, use one of '
                             f'{", ".join(SELECTORS)}.') from None
    return selector(points, k)


def verify_points(chosen: Sequence[Point], points: Sequence[Point]):
    "check every point left out of `chosen` lies on the curve `chosen` describes"
    for p in points:
        if p in chosen:
            continue
        try:
            expected = sss.interpolate(p.X, chosen)
        except InexactInterpolation as e:
            raise InconsistentShares(
                f'Share {p.X} does not lie on the reconstructed polynomial.',
                share_id=p.X) from e
        if expected != p.Y:
            raise InconsistentShares(
                f'Share {p.X} does not lie on the reconstructed polynomial.',
                share_id=p.X)


def reconstruct(shares: Sequence[Share],
                k: int,
                select: Selector = 'ascending',
                verify: bool = False) -> int:
    """
    Recover the secret from `shares` using `k` of them.

    shares: Share records, their digits are decoded in their own base

    k: threshold, the secret polynomial has degree k-1

    select: subset policy, one of SELECTORS or a callable (points, k) -> points

    verify: also check the shares that were not used against the result
    """
    if k < 1:
        raise InvalidPointSet(f'Threshold must be at least 1, got {k}.')
    if len(shares) < k:
        raise InsufficientShares(
            f'Need {k} shares to reach the threshold, only {len(shares)} given.')
    pts = decode_shares(shares)
    chosen = select_points(pts, k, select)
    secret = sss.reconstruct_at_zero(chosen, k)
    if verify:
        verify_points(chosen, pts)
    return secret
