"""Profit and loss, margins, salaries and banknote counts."""

from __future__ import annotations

import enum
from dataclasses import dataclass

__all__ = [
    "Status",
    "BatchReport",
    "TradeResult",
    "analyze_batch",
    "compare_prices",
    "margin_percentage",
    "unit_cost",
    "gross_salary",
    "count_notes",
]

DEARNESS_ALLOWANCE_RATE = 0.4
HOUSE_RENT_ALLOWANCE_RATE = 0.2
NOTE_DENOMINATIONS = (100, 50, 10)


class Status(enum.Enum):
    """Outcome of a sale."""

    PROFIT = "profit"
    LOSS = "loss"
    BREAK_EVEN = "break-even"


@dataclass(frozen=True)
class BatchReport:
    """Analysis of a batch of items sold together.

    ``amount`` and ``percentage`` are magnitudes: a loss of 20 is reported
    as ``amount == 20`` with ``status`` LOSS.
    """

    status: Status
    amount: float
    percentage: float
    total_cost: float
    cost_per_item: float


@dataclass(frozen=True)
class TradeResult:
    """Outcome of buying at one price and selling at another."""

    status: Status
    amount: float
    percentage: float


def _status_of(gain: float) -> Status:
    if gain > 0:
        return Status.PROFIT
    if gain < 0:
        return Status.LOSS
    return Status.BREAK_EVEN


def analyze_batch(
    total_selling_price: float, gain_loss: float, items: float
) -> BatchReport:
    """Work out cost price and margin from total sales and the gain or loss.

    ``gain_loss`` is positive for a profit and negative for a loss. Raises
    ValueError when ``items`` is not positive or the cost price comes to zero.
    """
    if items <= 0:
        raise ValueError("number of items must be greater than zero")
    total_cost = total_selling_price - gain_loss
    if total_cost == 0:
        raise ValueError("total cost price is zero; percentage is undefined")
    status = _status_of(gain_loss)
    percentage = gain_loss / total_cost * 100
    if status is Status.BREAK_EVEN:
        percentage = 0.0
    elif status is Status.LOSS:
        percentage = -percentage
    return BatchReport(
        status=status,
        amount=abs(gain_loss),
        percentage=percentage,
        total_cost=total_cost,
        cost_per_item=total_cost / items,
    )


def compare_prices(cost: float, sell: float) -> TradeResult:
    """Compare a cost price with a selling price.

    The percentage is taken relative to the cost price. Raises ValueError
    when the prices differ and the cost price is zero.
    """
    difference = sell - cost
    status = _status_of(difference)
    if status is Status.BREAK_EVEN:
        return TradeResult(status, 0.0, 0.0)
    if cost == 0:
        raise ValueError("cost price is zero; percentage is undefined")
    amount = abs(difference)
    return TradeResult(status, amount, amount / cost * 100)


def margin_percentage(cost: float, sell: float) -> float:
    """Return the signed margin of ``sell`` over ``cost`` in percent.

    A zero cost price gives 0.
    """
    if cost == 0:
        return 0.0
    return (sell - cost) / cost * 100


def unit_cost(total_sell: float, total_profit: float, quantity: float) -> float:
    """Return the cost price of one unit.

    A quantity that is not positive gives 0.
    """
    if quantity <= 0:
        return 0.0
    return (total_sell - total_profit) / quantity


def gross_salary(basic: float) -> float:
    """Return basic salary plus 40% dearness and 20% house-rent allowance."""
    dearness = DEARNESS_ALLOWANCE_RATE * basic
    house_rent = HOUSE_RENT_ALLOWANCE_RATE * basic
    return basic + dearness + house_rent


def _truncating_divmod(amount: int, divisor: int) -> tuple[int, int]:
    quotient = abs(amount) // divisor
    if amount < 0:
        quotient = -quotient
    return quotient, amount - quotient * divisor


def count_notes(amount: int) -> dict[int, int]:
    """Break ``amount`` into 100, 50 and 10 notes, largest first.

    Returns a mapping from denomination to count. Whatever is left below
    the smallest note is not paid out.
    """
    counts: dict[int, int] = {}
    remaining = amount
    for denomination in NOTE_DENOMINATIONS:
        counts[denomination], remaining = _truncating_divmod(remaining, denomination)
    return counts