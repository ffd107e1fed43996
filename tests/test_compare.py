import itertools

import pytest

from numcraft.compare import largest_of_three, swap, youngest


@pytest.mark.parametrize("values", list(itertools.permutations([3, 9, 5])))
def test_largest_any_order(values):
    assert largest_of_three(*values) == 9


@pytest.mark.parametrize(
    "a, b, c", [(1, 1, 1), (-5, -2, -9), (4, 4, 2), (2, 4, 4), (0, -1, 0)]
)
def test_largest_matches_max(a, b, c):
    assert largest_of_three(a, b, c) == max(a, b, c)


def test_youngest_single():
    assert youngest({"ali": 30, "jan": 20, "zia": 25}) == ["jan"]


def test_youngest_ties_keep_order():
    assert youngest({"ali": 18, "jan": 22, "zia": 18}) == ["ali", "zia"]


def test_youngest_all_equal():
    ages = {"ali": 40, "jan": 40, "zia": 40}
    assert youngest(ages) == ["ali", "jan", "zia"]


def test_youngest_is_minimum():
    ages = {"ali": 31, "jan": 12, "zia": 47, "sam": 12}
    result = youngest(ages)
    assert all(ages[name] == min(ages.values()) for name in result)
    assert set(result) == {"jan", "sam"}


def test_youngest_empty_raises():
    with pytest.raises(ValueError):
        youngest({})


@pytest.mark.parametrize("a, b", [(3, 7), (-1, 0), (5, 5), ("x", 2)])
def test_swap_exchanges(a, b):
    assert swap(a, b) == (b, a)


def test_swap_twice_is_identity():
    assert swap(*swap(11, 42)) == (11, 42)