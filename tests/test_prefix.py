import io

import pytest

from drillbook.prefix import PrefixSums, main

VALUES = [3, -1, 4, 1, -5, 9, 2, 6]


def test_whole_range_is_total():
    assert PrefixSums(VALUES).range_sum(1, len(VALUES)) == sum(VALUES)


@pytest.mark.parametrize("position", range(1, len(VALUES) + 1))
def test_single_item_range(position):
    assert PrefixSums(VALUES).range_sum(position, position) == VALUES[position - 1]


@pytest.mark.parametrize("left, middle, right", [(1, 3, 8), (2, 2, 5), (4, 6, 7)])
def test_ranges_add_up(left, middle, right):
    sums = PrefixSums(VALUES)
    assert sums.range_sum(left, middle) + sums.range_sum(middle + 1, right) == sums.range_sum(
        left, right
    )


def test_length_is_number_of_values():
    assert len(PrefixSums(VALUES)) == len(VALUES)


@pytest.mark.parametrize("left, right", [(0, 2), (3, 2), (1, 9), (-1, 1)])
def test_out_of_range_raises(left, right):
    with pytest.raises(IndexError):
        PrefixSums(VALUES).range_sum(left, right)


def test_empty_list_has_no_ranges():
    with pytest.raises(IndexError):
        PrefixSums([]).range_sum(1, 1)


def test_main_answers_queries(monkeypatch, capsys):
    values = [1, 2, 3, 4, 5]
    monkeypatch.setattr("sys.stdin", io.StringIO("5 2\n1 2 3 4 5\n1 5\n2 2\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.split() == [str(sum(values)), str(values[1])]


def test_main_rejects_bad_range(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 1\n1 2\n1 3\n"))
    assert main([]) == 1
    assert capsys.readouterr().out == ""