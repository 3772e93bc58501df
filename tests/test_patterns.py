import pytest

from drillbook.patterns import (
    alternating_sum,
    countdown_rows,
    left_pyramid,
    parity_triangle,
    right_pyramid,
    square_product,
    square_product_expression,
)


@pytest.mark.parametrize("rows", [1, 3, 6])
def test_left_pyramid_shrinks_by_one_star(rows):
    lines = left_pyramid(rows)
    assert len(lines) == rows
    assert [line.count("*") for line in lines] == list(range(rows, 0, -1))
    assert all(line.endswith("* ") for line in lines)


def test_left_pyramid_empty():
    assert left_pyramid(0) == []


@pytest.mark.parametrize("rows", [1, 4, 7])
def test_right_pyramid_matches_left_when_stripped(rows):
    right = right_pyramid(rows)
    assert [line.lstrip() for line in right] == left_pyramid(rows)
    indents = [len(line) - len(line.lstrip()) for line in right]
    assert indents == list(range(rows))


@pytest.mark.parametrize("rows", [1, 2, 5])
def test_parity_triangle_rows(rows):
    lines = parity_triangle(rows)
    assert len(lines) == rows
    for number, line in enumerate(lines, start=1):
        tokens = line.split()
        assert len(tokens) == number
        assert set(tokens) == ({"1"} if number % 2 else {"0"})


@pytest.mark.parametrize("n", [1, 4, 9])
def test_countdown_rows_shape(n):
    rows = countdown_rows(n)
    assert len(rows) == n
    assert rows[-1] == []
    assert rows[0] == list(range(n, 1, -1))
    for number, row in enumerate(rows, start=1):
        assert len(row) == n - number
        assert all(a > b for a, b in zip(row, row[1:]))


def test_square_product_base_cases():
    assert square_product(0) == 1.0
    assert square_product(1) == 1.0


@pytest.mark.parametrize("n", [2, 3, 5, 8])
def test_square_product_step_ratio(n):
    assert square_product(n) / square_product(n - 1) == pytest.approx(n * n)


def test_square_product_ignores_fraction():
    assert square_product(2.5) == square_product(2)


def test_square_product_expression_single_term():
    assert square_product_expression(1) == "1.00^2* 1.00"


@pytest.mark.parametrize("n", [2, 4, 6])
def test_square_product_expression_structure(n):
    text = square_product_expression(n)
    assert text.startswith("1.00^2* ")
    assert f"{float(n):.2f}^2= " in text
    assert text.count("=") == 1
    assert text.count("^2") == n
    assert text.endswith(f"{square_product(n):.2f}")


def test_alternating_sum_base_cases():
    assert alternating_sum(0) == 0
    assert alternating_sum(1) == 1


@pytest.mark.parametrize("n", [2, 3, 10, 11])
def test_alternating_sum_step(n):
    step = alternating_sum(n) - alternating_sum(n - 1)
    assert step == (n if n % 2 else -n)