import pytest

from florakit.constants import (
    ENGINE_FATAL,
    ENGINE_SUCCESS,
    rand_between,
)


def test_rand_between_exit_codes_cover_both():
    seen = {rand_between(ENGINE_SUCCESS, ENGINE_FATAL) for _ in range(500)}
    assert seen == {0, 1}


def test_rand_between_stays_in_range():
    for _ in range(500):
        value = rand_between(3, 9)
        assert 3 <= value <= 9


def test_rand_between_is_inclusive_at_both_ends():
    seen = {rand_between(0, 3) for _ in range(2000)}
    assert seen == {0, 1, 2, 3}


def test_rand_between_single_value():
    assert rand_between(7, 7) == 7


def test_rand_between_negative_range():
    for _ in range(200):
        assert -5 <= rand_between(-5, -1) <= -1


def test_rand_between_empty_range_raises():
    with pytest.raises(ValueError):
        rand_between(10, 2)