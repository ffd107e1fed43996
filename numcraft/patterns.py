"""Text patterns drawn with stars, dashes and digits.

Every function returns the pattern as a list of lines, without line endings.
"""

from __future__ import annotations

__all__ = [
    "diamond",
    "hollow_diamond",
    "inverted_triangle",
    "pyramid",
    "reverse_slanted_numbers",
    "right_aligned_triangle",
    "slanted_numbers",
    "triangle_block",
    "fixed_triangle",
    "x_shape",
]

_DIAMOND_HALF = 5
_BLOCK_LINE = "*" * 24
_BLOCK_HEIGHT = 3
_SLANT_ROWS = 9
_PYRAMID_SPACING = 12
_PYRAMID_STARS = (1, 3, 5, 8, 11, 15, 24)
_PYRAMID_BASE = 25
_FIXED_TRIANGLE = (
    " *",
    " ***",
    " *****",
    " *******",
    "*********",
)


def _diamond_rows() -> list[int]:
    """Row widths of a diamond: growing to the middle, then shrinking."""
    growing = list(range(1, _DIAMOND_HALF + 1))
    return growing + growing[-2::-1]


def diamond() -> list[str]:
    """Return a filled diamond of stars, nine rows high."""
    return [
        " " * (_DIAMOND_HALF - width) + "* " * width for width in _diamond_rows()
    ]


def hollow_diamond() -> list[str]:
    """Return the outline of a diamond, nine rows high."""
    lines = []
    for width in _diamond_rows():
        cells = (
            "* " if position in (1, width) else "  "
            for position in range(1, width + 1)
        )
        lines.append(" " * (_DIAMOND_HALF - width) + "".join(cells))
    return lines


def inverted_triangle() -> list[str]:
    """Return a left-aligned triangle of stars shrinking from 11 to 1."""
    return ["*" * (count + 1) for count in range(10, -1, -1)]


def pyramid() -> list[str]:
    """Return an uneven pyramid of stars standing on a 25-star base."""
    lines = [
        " " * (_PYRAMID_SPACING - row) + "*" * stars
        for row, stars in enumerate(_PYRAMID_STARS, start=1)
    ]
    lines.append("*" * _PYRAMID_BASE)
    return lines


def reverse_slanted_numbers() -> list[str]:
    """Return the row numbers 0 to 8, each led by a shrinking run of dashes."""
    last = _SLANT_ROWS - 1
    return ["-" * (last - row) + str(row) for row in range(_SLANT_ROWS)]


def right_aligned_triangle() -> list[str]:
    """Return a five-row triangle of stars aligned to the right."""
    return [
        " " * (_DIAMOND_HALF - width) + "*" * width
        for width in range(1, _DIAMOND_HALF + 1)
    ]


def slanted_numbers() -> list[str]:
    """Return the row numbers 0 to 8, each led by a growing run of dashes."""
    return ["-" * row + str(row) for row in range(_SLANT_ROWS)]


def triangle_block(rows: int = 5) -> list[str]:
    """Return a centred triangle of ``rows`` rows above a three-line block.

    Row ``i`` holds ``2 * i - 1`` stars. A ``rows`` below one gives only
    the block.
    """
    triangle = [
        " " * (rows - row) + "*" * (2 * row - 1) for row in range(1, rows + 1)
    ]
    return triangle + [_BLOCK_LINE] * _BLOCK_HEIGHT


def fixed_triangle() -> list[str]:
    """Return the hand-drawn triangle above a three-line block."""
    return list(_FIXED_TRIANGLE) + [_BLOCK_LINE] * _BLOCK_HEIGHT


def x_shape() -> list[str]:
    """Return a nine-by-nine X drawn with row numbers on a field of dashes."""
    last = _SLANT_ROWS - 1
    return [
        "".join(
            str(row) if column in (row, last - row) else "-"
            for column in range(_SLANT_ROWS)
        )
        for row in range(_SLANT_ROWS)
    ]