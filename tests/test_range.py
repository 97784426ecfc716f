import dataclasses
import datetime

import pytest

from rangeoverlap import Range, localcontext
from rangeoverlap.overlap import (
    A_CONTAINS_B,
    A_ENDS_IN_B,
    B_CONTAINS_A,
    NO_OVERLAP,
)


def test_classify():
    a = Range(0, 10)
    b = Range(5)
    assert a.classify(b, False) is A_ENDS_IN_B
    assert b.classify(a, False) is A_ENDS_IN_B.swap()
    assert Range().classify(a) is A_CONTAINS_B
    assert a.classify(Range(end=20)) is B_CONTAINS_A
    assert a.classify(Range(10, 20), False) is NO_OVERLAP
    assert a.overlaps(Range(10, 20), True)
    assert not a.overlaps(Range(10, 20), False)


def test_contains():
    a = Range(0, 10)

    with localcontext(inclusive=False):
        assert 5 in a
        assert 0 not in a
        assert 10 not in a

    with localcontext(inclusive=True):
        assert 0 in a
        assert 10 in a
        assert 11 not in a

    assert Range(end=0).contains(-(10**100), False)
    assert not Range(start=0).contains(0, False)
    assert 42 in Range()


def test_validity():
    assert Range(1, 2).isbounded()
    assert not Range(1).isbounded()
    assert Range(1, 1).isvalid()
    assert Range(None, 1).isvalid()
    assert not Range(2, 1).isvalid()

    with localcontext(strict=True):
        with pytest.raises(ValueError):
            Range(2, 1).classify(Range(0, 5))


def test_immutable():
    a = Range(0, 10)

    with pytest.raises(dataclasses.FrozenInstanceError):
        a.start = 5  # type: ignore

    assert a == Range(0, 10)
    assert repr(a) == "Range(start=0, end=10)"


def test_str():
    with localcontext(inclusive=True):
        assert str(Range(1, 5)) == "[1, 5]"
        assert str(Range(None, 5)) == "(-inf, 5]"

    with localcontext(inclusive=False):
        assert str(Range(1, 5)) == "(1, 5)"
        assert str(Range()) == "(-inf, +inf)"
        assert str(Range(datetime.date(2017, 1, 1))) == "(2017-01-01, +inf)"
