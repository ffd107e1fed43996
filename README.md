# numcraft

Small helpers for everyday number work: greatest common divisors and least
common multiples, factorials, powers, prime checks and factorisation, digit
sums, number-base conversion, profit and loss analysis, marks and population
reports, rectangle and circle metrics, the weekday a year starts on,
temperature and distance conversion, string and character checks, small
matrix operations and text patterns. It also has menu-driven tools that read
answers from one text stream and write to another, and a command line front
end for them.

It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

The `numcraft` command takes the name of a tool:

```
numcraft vault         # run a fixed self-check of gcd, lcm, parity, factorial and margin
numcraft modmath       # GCD of two numbers, then a factorial
numcraft array         # read four integers and list them
numcraft matrix        # read a 3x4 matrix and display it
numcraft calculator    # interactive integer calculator
numcraft finance       # interactive profit and loss analyst
numcraft shapes        # interactive rectangle and circle calculator
numcraft temperature   # interactive temperature converter
numcraft distance      # interactive distance converter
```

Answers are read from standard input as whitespace-separated tokens. If the
input ends early or holds something that is not a number, the command prints
an error to standard error and exits with status 1.

## Library use

```python
from numcraft.arith import gcd, lcm, factorial, is_prime, prime_factors
from numcraft.numbase import to_decimal, from_decimal, InvalidDigitError
from numcraft.finance import analyze_batch, count_notes
from numcraft.geometry import rectangle, circle
from numcraft.conversions import fahrenheit_to_celsius, distance_from_km
from numcraft.textops import is_palindrome, classify_char
from numcraft.matrices import transpose, multiply, format_matrix
from numcraft.patterns import diamond

gcd(24, 36)              # 12
lcm(24, 36)              # 72
factorial(5)             # 120
is_prime(97)             # True
prime_factors(60)        # [2, 2, 3, 5]

to_decimal(1010, 2)      # 10
from_decimal(10, 8)      # 12 (octal digits written as a decimal integer)

report = analyze_batch(1200, 200, 10)
report.status            # Status.PROFIT
report.percentage        # 20.0
report.cost_per_item     # 100.0

print("\n".join(diamond()))
```

The modules:

- `numcraft.arith`: `gcd`, `lcm`, `factorial`, `power`, `is_prime`,
  `is_odd`, `prime_factors`.
- `numcraft.compare`: `largest_of_three`, `youngest` (names sharing the
  lowest age in a mapping), `swap`.
- `numcraft.digits`: `digit_sum`, `first_digit`, `last_digit`,
  `first_last_sum`.
- `numcraft.numbase`: `to_decimal(number, base, strict=False)`,
  `from_decimal(n, base)` for bases 2 to 10, `binary_digits(n)` and
  `InvalidDigitError`.
- `numcraft.finance`: `analyze_batch`, `compare_prices`,
  `margin_percentage`, `unit_cost`, `gross_salary`, `count_notes`, with the
  `Status` enum and the `BatchReport` and `TradeResult` records.
- `numcraft.school`: `grade`, `evaluate_marks`, `analyze_population`, with
  `MarksReport` and `PopulationReport`.
- `numcraft.geometry`: `rectangle`, `circle` (pi taken as 3.1415),
  `area_exceeds_perimeter`.
- `numcraft.dayfinder`: `first_weekday(year)`, counting every fourth year
  after 1900 as a leap year.
- `numcraft.conversions`: `fahrenheit_to_celsius`, `celsius_to_fahrenheit`,
  `distance_from_km`, `distance_from_meters`, `distance_from_feet`, which
  return a `Distance` in kilometres, metres, feet, inches and centimetres.
- `numcraft.textops`: `is_palindrome`, `reverse`, `greater_string`,
  `classify_char`, `classify_char_ctype`, with the `CharClass` enum.
- `numcraft.matrices`: `transpose`, `add`, `multiply`, `format_matrix`.
- `numcraft.patterns`: `diamond`, `hollow_diamond`, `inverted_triangle`,
  `pyramid`, `reverse_slanted_numbers`, `right_aligned_triangle`,
  `slanted_numbers`, `triangle_block(rows=5)`, `fixed_triangle`, `x_shape`;
  each returns a list of lines.
- `numcraft.calculator`: `calculate(operation, a, b)` with the `Operation`
  enum; division rounds toward zero.

Invalid input raises an exception rather than returning an error code: a
negative factorial raises `ValueError`, dividing by zero in `calculate`
raises `ZeroDivisionError`, and a digit too large for its base in strict
mode raises `InvalidDigitError`.

## Interactive menus

`numcraft.menus` has `run_calculator`, `run_financial_analyst`,
`run_shape_calculator`, `run_temperature_converter` and
`run_distance_converter`. Each takes an input stream and an output stream,
defaulting to standard input and output, and loops until the exit choice is
entered or the input runs out:

```python
import io
from numcraft.menus import run_temperature_converter

out = io.StringIO()
run_temperature_converter(io.StringIO("1 212 3"), out)
```

The calculator reads its operator as a whitespace-separated token, so it
expects a line of input rather than a single key press.