"""Integer arithmetic on two operands chosen by an operator symbol."""

from __future__ import annotations

import enum

__all__ = ["Operation", "calculate"]


class Operation(enum.Enum):
    """An arithmetic operation, keyed by the symbol that selects it."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    REMAINDER = "%"

    @property
    def label(self) -> str:
        """The name under which the result is reported."""
        return _LABELS[self]


_LABELS = {
    Operation.ADD: "Sum",
    Operation.SUBTRACT: "Difference",
    Operation.MULTIPLY: "Product",
    Operation.DIVIDE: "Qoutient",
    Operation.REMAINDER: "Remainder",
}


def _truncating_quotient(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def calculate(operation: Operation | str, a: int, b: int) -> int:
    """Apply ``operation`` to ``a`` and ``b``.

    ``operation`` is an Operation or its symbol. Division rounds toward
    zero and the remainder takes the sign of ``a``. Raises ValueError for
    an unknown symbol and ZeroDivisionError when dividing by zero.
    """
    op = Operation(operation)
    if op is Operation.ADD:
        return a + b
    if op is Operation.SUBTRACT:
        return a - b
    if op is Operation.MULTIPLY:
        return a * b
    if b == 0:
        raise ZeroDivisionError("division by zero")
    quotient = _truncating_quotient(a, b)
    if op is Operation.DIVIDE:
        return quotient
    return a - b * quotient