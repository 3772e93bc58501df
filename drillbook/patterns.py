"""Star pyramids, number triangles and simple numeric series."""

from __future__ import annotations

import math
from collections.abc import Iterator


def left_pyramid(rows: int) -> list[str]:
    """Rows of stars, widest first, aligned to the left edge."""
    return ["* " * width for width in range(rows, 0, -1)]


def right_pyramid(rows: int) -> list[str]:
    """Rows of stars, widest first, each row shifted one space further right."""
    return [" " * (rows - width) + "* " * width for width in range(rows, 0, -1)]


def parity_triangle(rows: int) -> list[str]:
    """Triangle whose odd rows are filled with 1 and even rows with 0."""
    return [("0 " if row % 2 == 0 else "1 ") * row for row in range(1, rows + 1)]


def countdown_rows(n: int) -> list[list[int]]:
    """For each row r in 1..n, the numbers counting down from n to r + 1."""
    return [list(range(n, row, -1)) for row in range(1, n + 1)]


def _factors(n: float) -> Iterator[float]:
    value = 1.0
    while value <= n:
        yield value
        value += 1.0


def square_product(n: float) -> float:
    """The product 1^2 * 2^2 * ... for every whole step from 1 up to n."""
    return math.prod((value * value for value in _factors(n)), start=1.0)


def square_product_expression(n: float) -> str:
    """The series 1^2*2^2*...=result written out with two decimals per number."""
    terms = []
    for value in _factors(n):
        operator = "=" if value == n and value != 1 else "*"
        terms.append(f"{value:.2f}^2{operator} ")
    return "".join(terms) + f"{square_product(n):.2f}"


def alternating_sum(n: int) -> int:
    """The sum 1 - 2 + 3 - 4 + ... up to n."""
    return sum(value if value % 2 else -value for value in range(1, n + 1))