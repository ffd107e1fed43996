import pytest

from numcraft.matrices import add, format_matrix, multiply, transpose

A23 = [[1, 2, 3], [4, 5, 6]]
IDENTITY3 = [[1, 0, 0], [0, 1, 0], [0, 0, 1]]


def test_transpose_swaps_indices():
    result = transpose(A23)
    assert len(result) == 3
    assert all(len(row) == 2 for row in result)
    for i, row in enumerate(A23):
        for j, value in enumerate(row):
            assert result[j][i] == value


def test_transpose_twice_is_identity():
    assert transpose(transpose(A23)) == A23


def test_transpose_empty():
    assert transpose([]) == []


def test_add_is_commutative():
    b = [[7, 8, 9], [10, 11, 12]]
    assert add(A23, b) == add(b, A23)


def test_add_zero_matrix():
    zero = [[0, 0, 0], [0, 0, 0]]
    assert add(A23, zero) == A23


def test_add_elementwise():
    b = [[-1, -2, -3], [-4, -5, -6]]
    assert add(A23, b) == [[0, 0, 0], [0, 0, 0]]


def test_add_shape_mismatch():
    with pytest.raises(ValueError):
        add(A23, [[1, 2], [3, 4]])


def test_multiply_by_identity():
    assert multiply(A23, IDENTITY3) == A23


def test_multiply_known_product():
    assert multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]]) == [[19, 22], [43, 50]]


def test_multiply_transpose_relation():
    b = [[2, 0, 1], [1, 3, 0], [0, 1, 4]]
    assert transpose(multiply(A23, b)) == multiply(transpose(b), transpose(A23))


def test_multiply_dimension_mismatch():
    with pytest.raises(ValueError):
        multiply(A23, A23)


def test_ragged_matrix_rejected():
    with pytest.raises(ValueError):
        transpose([[1, 2], [3]])


def test_format_matrix_layout():
    assert format_matrix([[1, 2], [3, 4]]) == "1\t2\t\n3\t4\t\n"


def test_format_matrix_round_trip():
    text = format_matrix(A23)
    parsed = [[int(cell) for cell in line.split("\t") if cell] for line in text.splitlines()]
    assert parsed == A23


def test_format_empty_matrix():
    assert format_matrix([]) == ""