"""Command line entry point for the number tools."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator

from numcraft.arith import factorial, gcd, is_odd, lcm
from numcraft.finance import margin_percentage
from numcraft.matrices import format_matrix
from numcraft.menus import (
    run_calculator,
    run_distance_converter,
    run_financial_analyst,
    run_shape_calculator,
    run_temperature_converter,
)

__all__ = ["main"]

ARRAY_SIZE = 4
MATRIX_ROWS = 3
MATRIX_COLUMNS = 4


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _ask_int(answers: Iterator[str], prompt: str) -> int:
    sys.stdout.write(prompt)
    sys.stdout.flush()
    try:
        token = next(answers)
    except StopIteration:
        raise EOFError("unexpected end of input") from None
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"expected an integer, got {token!r}") from None


def _vault() -> int:
    x, y = 24, 36
    print("--- Library Test ---")
    print(f"GCD of {x} and {y} is: {gcd(x, y)}")
    print(f"LCM of {x} and {y} is: {lcm(x, y)}")
    print(f"{x} is {'Odd' if is_odd(x) else 'Even'}")
    print(f"Factorial of 5 is: {factorial(5)}")
    print(f"Margin on $100 cost and $120 sell: {margin_percentage(100, 120):.2f}%")
    return 0


def _modmath() -> int:
    answers = _tokens(sys.stdin)
    a = _ask_int(answers, "Enter two numbers for GCD: ")
    b = _ask_int(answers, "")
    print(f"GCD is: {gcd(b, a)}")
    number = _ask_int(answers, "\nEnter a number for Factorial: ")
    print(f"Factorial is: {factorial(number)}")
    return 0


def _array() -> int:
    answers = _tokens(sys.stdin)
    numbers = [
        _ask_int(answers, f"enter the value for array index {index}: ")
        for index in range(ARRAY_SIZE)
    ]
    print("\n--- Array Elements ---")
    for index, value in enumerate(numbers):
        print(f"the element at index {index} is: {value} ")
    return 0


def _matrix() -> int:
    answers = _tokens(sys.stdin)
    matrix = [
        [
            _ask_int(answers, f"Enter the value for [{row}][{column}]: ")
            for column in range(MATRIX_COLUMNS)
        ]
        for row in range(MATRIX_ROWS)
    ]
    sys.stdout.write("\n--- Displaying the Matrix ---\n")
    sys.stdout.write(format_matrix(matrix))
    return 0


def _menu(run: Callable[..., None]) -> Callable[[], int]:
    def handler() -> int:
        run(sys.stdin, sys.stdout)
        return 0

    return handler


_COMMANDS: dict[str, tuple[str, Callable[[], int]]] = {
    "vault": ("run the library self-check", _vault),
    "modmath": ("GCD of two numbers and a factorial", _modmath),
    "array": ("read and list four integers", _array),
    "matrix": ("read and display a 3x4 matrix", _matrix),
    "calculator": ("interactive integer calculator", _menu(run_calculator)),
    "finance": ("interactive profit and loss analyst", _menu(run_financial_analyst)),
    "shapes": ("interactive rectangle and circle calculator", _menu(run_shape_calculator)),
    "temperature": ("interactive temperature converter", _menu(run_temperature_converter)),
    "distance": ("interactive distance converter", _menu(run_distance_converter)),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="numcraft", description="Small number tools.")
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (summary, handler) in _COMMANDS.items():
        command = commands.add_parser(name, help=summary)
        command.set_defaults(handler=handler)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the chosen tool and return its exit status."""
    args = _build_parser().parse_args(argv)
    try:
        return args.handler()
    except EOFError:
        print("\nerror: unexpected end of input", file=sys.stderr)
    except ValueError as error:
        print(f"\nerror: {error}", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())