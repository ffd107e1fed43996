"""Matrix transpose, addition, multiplication and text layout.

Matrices are lists of rows, each row a list of numbers.
"""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["transpose", "add", "multiply", "format_matrix"]

Matrix = Sequence[Sequence[int]]


def _shape(matrix: Matrix) -> tuple[int, int]:
    """Return (rows, columns), raising ValueError for ragged rows."""
    rows = len(matrix)
    columns = len(matrix[0]) if rows else 0
    if any(len(row) != columns for row in matrix):
        raise ValueError("all rows of a matrix must have the same length")
    return rows, columns


def transpose(matrix: Matrix) -> list[list[int]]:
    """Return the transpose: element ``[i][j]`` moves to ``[j][i]``."""
    _shape(matrix)
    return [list(column) for column in zip(*matrix)]


def add(a: Matrix, b: Matrix) -> list[list[int]]:
    """Return the element-wise sum of two matrices of the same shape."""
    if _shape(a) != _shape(b):
        raise ValueError("matrices must have the same shape to be added")
    return [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def multiply(a: Matrix, b: Matrix) -> list[list[int]]:
    """Return the matrix product ``a`` times ``b``.

    Raises ValueError unless ``a`` has as many columns as ``b`` has rows.
    """
    _, inner = _shape(a)
    rows_b, _ = _shape(b)
    if inner != rows_b:
        raise ValueError(
            f"cannot multiply: {inner} columns against {rows_b} rows"
        )
    columns_b = transpose(b)
    return [
        [sum(x * y for x, y in zip(row, column)) for column in columns_b]
        for row in a
    ]


def format_matrix(matrix: Matrix) -> str:
    """Lay a matrix out as text, each value followed by a tab, one row a line."""
    _shape(matrix)
    return "".join(
        "".join(f"{value}\t" for value in row) + "\n" for row in matrix
    )