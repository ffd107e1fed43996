"""Interactive menu loops for the calculator, finance, shape and unit tools.

Each loop reads whitespace-separated answers from a text stream and writes
its prompts and results to another. The loop ends when the user picks the
exit choice or the input runs out.
"""

from __future__ import annotations

import contextlib
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from numcraft.calculator import Operation, calculate
from numcraft.conversions import (
    Distance,
    celsius_to_fahrenheit,
    distance_from_feet,
    distance_from_km,
    distance_from_meters,
    fahrenheit_to_celsius,
)
from numcraft.finance import BatchReport, Status, analyze_batch
from numcraft.geometry import circle, rectangle

__all__ = [
    "run_calculator",
    "run_financial_analyst",
    "run_shape_calculator",
    "run_temperature_converter",
    "run_distance_converter",
]

_CALCULATOR_MENU = (
    "For Addition Press---------------- +\n"
    "For Subtraction Press------------- -\n"
    "For Multiplication Press---------- *\n"
    "For Qoutient Press---------------- /\n"
    "For Remaintder Value Press-------- %\n"
    "For Exit Press-------------------- x\n"
)
_SEPARATOR = "-" * 30 + "\n"


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


class _Session:
    """Prompts and answers over a pair of text streams."""

    def __init__(self, stream_in: TextIO | None, stream_out: TextIO | None) -> None:
        self._answers = _tokens(sys.stdin if stream_in is None else stream_in)
        self._out = sys.stdout if stream_out is None else stream_out

    def write(self, text: str) -> None:
        self._out.write(text)

    def prompt(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def token(self) -> str:
        try:
            return next(self._answers)
        except StopIteration:
            raise EOFError("input ended") from None

    def integer(self) -> int:
        token = self.token()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def number(self) -> float:
        token = self.token()
        try:
            return float(token)
        except ValueError:
            raise ValueError(f"expected a number, got {token!r}") from None

    def choice(self) -> int | None:
        """Read a menu choice; anything but an integer gives None."""
        token = self.token()
        try:
            return int(token)
        except ValueError:
            return None


def _calculation_line(symbol: str, a: int, b: int) -> str:
    try:
        operation = Operation(symbol)
    except ValueError:
        return "Press the correct Choice\n TRY Again\n"
    try:
        value = calculate(operation, a, b)
    except ZeroDivisionError:
        return "Error: Division by zero\n"
    return f"{operation.label} = {value}\n"


def _calculator_loop(session: _Session) -> None:
    while True:
        session.prompt("\nEnter Two Integer Values please (or press 0 0 to exit) : ")
        a = session.integer()
        b = session.integer()
        if a == 0 and b == 0:
            break
        session.write(_CALCULATOR_MENU)
        session.prompt("Enter your choice please ==> ")
        symbol = session.token()
        session.write("\n")
        if symbol in ("x", "X"):
            break
        session.write(_calculation_line(symbol, a, b))
        session.write(_SEPARATOR)
    session.write("\nProgram Exited. Goodbye!")


def run_calculator(stream_in: TextIO | None = None, stream_out: TextIO | None = None) -> None:
    """Run the two-operand calculator until ``0 0`` or ``x`` is entered."""
    with contextlib.suppress(EOFError):
        _calculator_loop(_Session(stream_in, stream_out))


def _as_sentence(error: Exception) -> str:
    message = str(error)
    return message[:1].upper() + message[1:] + "."


def _batch_text(report: BatchReport) -> str:
    if report.status is Status.PROFIT:
        text = (
            "\n--- STATUS: PROFIT ---"
            f"\nTotal Profit: {report.amount:.2f}"
            f"\nProfit Percentage: {report.percentage:.2f}%"
        )
    elif report.status is Status.LOSS:
        text = (
            "\n--- STATUS: LOSS ---"
            f"\nTotal Loss: {report.amount:.2f}"
            f"\nLoss Percentage: {report.percentage:.2f}%"
        )
    else:
        text = "\n--- STATUS: BREAK-EVEN ---"
    return (
        text
        + f"\nTotal Cost Price: {report.total_cost:.2f}"
        + f"\nCost Price per Item: {report.cost_per_item:.2f}\n"
    )


def _financial_loop(session: _Session) -> None:
    while True:
        session.prompt(
            "\n--- Financial Analysis Menu ---"
            "\n1. Analyze New Product/Batch"
            "\n2. Exit Program"
            "\nEnter your choice: "
        )
        choice = session.choice()
        if choice == 2:
            session.write("Exiting... Have a profitable day!\n")
            break
        if choice != 1:
            session.write("\nInvalid selection. Please try again.\n")
            continue
        session.prompt("\nEnter the total selling price: ")
        selling = session.number()
        session.prompt("Enter the profit gain (+) or loss (-): ")
        gain_loss = session.number()
        session.prompt("Enter the number of items: ")
        items = session.number()
        try:
            report = analyze_batch(selling, gain_loss, items)
        except ValueError as error:
            session.write(f"\nError: {_as_sentence(error)}\n")
            continue
        session.write(_batch_text(report))


def run_financial_analyst(
    stream_in: TextIO | None = None, stream_out: TextIO | None = None
) -> None:
    """Analyse batches of sales until the exit choice is made."""
    with contextlib.suppress(EOFError):
        _financial_loop(_Session(stream_in, stream_out))


def _shape_loop(session: _Session) -> None:
    while True:
        session.prompt(
            "\n\n--- Shape Calculator Menu ---"
            "\nPress 1 for Rectangle Calculations"
            "\nPress 2 for Circle Calculations"
            "\nPress 3 to Exit"
            "\nEnter your choice: "
        )
        choice = session.choice()
        if choice == 3:
            session.write("\nExiting program...")
            break
        if choice == 1:
            session.prompt("enter the length and breath of rectangle: ")
            length = session.number()
            width = session.number()
            metrics = rectangle(length, width)
            session.write(f"\nthe area of rectangle is={metrics.area:.2f}")
            session.write(f"\nthe perimeter of rectangle is={metrics.perimeter:.2f}")
        elif choice == 2:
            session.prompt("enter the radius of circle: ")
            metrics = circle(session.number())
            session.write(f"\nthe area of circle is={metrics.area:.2f}")
            session.write(
                f"\nthe circumference of circle is={metrics.circumference:.2f}"
            )
        else:
            session.write("\nInvalid Choice! Please try again.")


def run_shape_calculator(
    stream_in: TextIO | None = None, stream_out: TextIO | None = None
) -> None:
    """Measure rectangles and circles until the exit choice is made."""
    with contextlib.suppress(EOFError):
        _shape_loop(_Session(stream_in, stream_out))


def _temperature_loop(session: _Session) -> None:
    while True:
        session.prompt(
            "\n\n--- Temperature Converter Menu ---"
            "\n1. Fahrenheit to Celsius"
            "\n2. Celsius to Fahrenheit"
            "\n3. Exit Program"
            "\nEnter your choice: "
        )
        choice = session.choice()
        if choice == 3:
            session.write("\nExiting program...")
            break
        if choice == 1:
            session.prompt("Enter the temperature in Fahrenheit: ")
            celsius = fahrenheit_to_celsius(session.number())
            session.write(f"\nThe temperature in Celsius is {celsius:.2f}")
        elif choice == 2:
            session.prompt("Enter the temperature in Celsius: ")
            fahrenheit = celsius_to_fahrenheit(session.number())
            session.write(f"\nThe temperature in Fahrenheit is {fahrenheit:.2f}")
        else:
            session.write("\nInvalid Choice! Please try again.")


def run_temperature_converter(
    stream_in: TextIO | None = None, stream_out: TextIO | None = None
) -> None:
    """Convert temperatures either way until the exit choice is made."""
    with contextlib.suppress(EOFError):
        _temperature_loop(_Session(stream_in, stream_out))


_DISTANCE_INPUTS = {
    1: ("Kilometers", distance_from_km),
    2: ("Meters", distance_from_meters),
    3: ("Feet", distance_from_feet),
}


def _distance_text(distance: Distance) -> str:
    return (
        "\n--- Results ---"
        f"\nDistance in Kilometers  = {distance.km:.2f}"
        f"\nDistance in Meters      = {distance.meters:.2f}"
        f"\nDistance in Feet        = {distance.feet:.2f}"
        f"\nDistance in Inches      = {distance.inches:.2f}"
        f"\nDistance in Centimeters = {distance.centimeters:.2f}"
    )


def _distance_loop(session: _Session) -> None:
    while True:
        session.prompt(
            "\n\n--- Distance Converter Menu ---"
            "\n1. Enter distance in Kilometers"
            "\n2. Enter distance in Meters"
            "\n3. Enter distance in Feet"
            "\n4. Exit Program"
            "\nEnter your choice: "
        )
        choice = session.choice()
        if choice == 4:
            session.write("\nExiting program...")
            break
        if choice not in _DISTANCE_INPUTS:
            session.write("\nInvalid Choice! Please try again.")
            continue
        unit, convert = _DISTANCE_INPUTS[choice]
        session.prompt(f"Enter distance in {unit}: ")
        session.write(_distance_text(convert(session.number())))


def run_distance_converter(
    stream_in: TextIO | None = None, stream_out: TextIO | None = None
) -> None:
    """Express distances in every unit until the exit choice is made."""
    with contextlib.suppress(EOFError):
        _distance_loop(_Session(stream_in, stream_out))