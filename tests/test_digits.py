import pytest

from numcraft.digits import digit_sum, first_digit, first_last_sum, last_digit


def test_digit_sum_of_known_number():
    assert digit_sum(12345) == 15


def test_digit_sum_of_zero_is_zero():
    assert digit_sum(0) == 0


@pytest.mark.parametrize("n", [7, 19, 305, 98765, 1000001, 2**40])
def test_digit_sum_ignores_sign(n):
    assert digit_sum(-n) == digit_sum(n)


@pytest.mark.parametrize("n", [0, 9, 18, 12345, 99999, 123456789, 10**12 + 7])
def test_digit_sum_keeps_residue_mod_nine(n):
    assert digit_sum(n) % 9 == n % 9


@pytest.mark.parametrize("n", [1, 10, 100, 1000, 10**9])
def test_digit_sum_of_power_of_ten_is_one(n):
    assert digit_sum(n) == 1


@pytest.mark.parametrize("n", [0, 5, 42, 1234, 98765, 2**50])
def test_first_digit_matches_leading_character(n):
    assert first_digit(n) == int(str(n)[0])
    assert first_digit(-n) == first_digit(n)


@pytest.mark.parametrize("n", [0, 5, 42, 1234, 98765, 2**50])
def test_last_digit_matches_trailing_character(n):
    assert last_digit(n) == int(str(n)[-1])
    assert last_digit(-n) == last_digit(n)


@pytest.mark.parametrize("n", [0, 3, 47, 1234, 50006, 987654321])
def test_first_last_sum_combines_both_ends(n):
    assert first_last_sum(n) == first_digit(n) + last_digit(n)


def test_single_digit_counts_twice():
    assert first_last_sum(4) == 2 * 4
    assert first_last_sum(-4) == 2 * 4


def test_first_last_sum_of_four_digit_number():
    assert first_last_sum(4321) == 5