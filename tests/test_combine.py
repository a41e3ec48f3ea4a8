import pytest
import itertools
from pathlib import Path

from polysecret import combine
from polysecret import io
from polysecret import sss
from polysecret.decode import DigitOutOfRangeForBase, InvalidDigitCharacter
from polysecret.sss import Share, Point

DATA = Path(__file__).parent / 'data'
CASE2_SECRET = -6290016743746469796


@pytest.fixture()
def shares():
    return [Share(1, 10, '4'), Share(2, 2, '111'), Share(3, 10, '12'), Share(6, 4, '213')]


@pytest.fixture()
def case2():
    return io.from_file(DATA / 'testcase2.json')


def test_decode_shares(shares):
    pts = combine.decode_shares(shares)
    assert pts == [Point(1, 4), Point(2, 7), Point(3, 12), Point(6, 39)]


def test_decode_shares_tags_failures(shares):
    shares[2] = Share(3, 2, '3')
    with pytest.raises(DigitOutOfRangeForBase) as e:
        combine.decode_shares(shares)
    assert e.value.share_id == 3
    assert 'Share 3' in str(e.value)
    shares[2] = Share(7, 16, 'f!')
    with pytest.raises(InvalidDigitCharacter) as e:
        combine.reconstruct(shares, 3)
    assert e.value.share_id == 7


def test_reconstruct_example(shares):
    assert combine.reconstruct(shares, 3) == 3
    assert combine.reconstruct(shares[::-1], 3) == 3
    assert combine.reconstruct(shares, 3, verify=True) == 3


def test_every_subset_agrees(shares):
    for comb in itertools.combinations(shares, 3):
        assert combine.reconstruct(list(comb), 3) == 3


def test_selectors(shares):
    pts = combine.decode_shares(shares[::-1])
    assert combine.select_points(pts, 3) == [Point(1, 4), Point(2, 7), Point(3, 12)]
    assert combine.select_points(pts, 2, 'given') == [Point(6, 39), Point(3, 12)]
    chosen = combine.select_points(pts, 3, 'random')
    assert len(chosen) == 3
    assert len({p.X for p in chosen}) == 3
    assert set(chosen) <= set(pts)
    last = combine.select_points(pts, 2, lambda points, k: list(points[-k:]))
    assert last == [Point(2, 7), Point(1, 4)]
    with pytest.raises(ValueError):
        combine.select_points(pts, 3, 'descending')


def test_reconstruct_with_policies(shares):
    assert combine.reconstruct(shares[::-1], 3, select='given') == 3
    for _ in range(10):
        assert combine.reconstruct(shares, 3, select='random', verify=True) == 3


def test_insufficient_shares(shares):
    with pytest.raises(combine.InsufficientShares):
        combine.reconstruct(shares[:2], 3)
    with pytest.raises(combine.InsufficientShares):
        combine.reconstruct([], 1)
    with pytest.raises(sss.InvalidPointSet):
        combine.reconstruct(shares, 0)


def test_inexact_propagates():
    shares = [Share(1, 10, '1'), Share(2, 10, '2'), Share(4, 10, '5')]
    with pytest.raises(sss.InexactInterpolation):
        combine.reconstruct(shares, 3)


def test_duplicate_ids_not_merged(shares):
    shares.insert(1, Share(1, 10, '5'))
    with pytest.raises(sss.InvalidPointSet):
        combine.reconstruct(shares, 3)
    shares[1] = Share(1, 10, '4')
    with pytest.raises(sss.InvalidPointSet):
        combine.reconstruct(shares, 3)


def test_verify_detects_disagreement(shares):
    shares.append(Share(4, 10, '20'))  # f(4) is 19
    assert combine.reconstruct(shares, 3) == 3
    with pytest.raises(combine.InconsistentShares) as e:
        combine.reconstruct(shares, 3, verify=True)
    assert e.value.share_id == 4


def test_verify_duplicate_id(shares):
    shares.append(Share(6, 10, '40'))
    assert combine.reconstruct(shares, 3) == 3
    with pytest.raises(combine.InconsistentShares) as e:
        combine.reconstruct(shares, 3, verify=True)
    assert e.value.share_id == 6


def test_case2(case2):
    assert case2.k == 7
    assert combine.reconstruct(case2.shares, case2.k) == CASE2_SECRET
    with pytest.raises(combine.InconsistentShares) as e:
        combine.reconstruct(case2.shares, case2.k, verify=True)
    assert e.value.share_id == 8
