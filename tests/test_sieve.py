import math

import pytest

from drillbook.sieve import every_nth, main, primes_up_to


def test_primes_up_to_thirty():
    assert primes_up_to(30) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


def test_twenty_five_primes_below_one_hundred():
    assert len(primes_up_to(100)) == 25


@pytest.mark.parametrize("limit", [-5, 0, 1])
def test_no_primes_below_two(limit):
    assert primes_up_to(limit) == []


def test_limit_is_inclusive():
    assert primes_up_to(2)[-1] == 2
    assert primes_up_to(97)[-1] == 97


def test_sieve_results_have_no_small_divisors():
    primes = primes_up_to(2000)
    assert primes == sorted(set(primes))
    for prime in primes:
        assert all(prime % d for d in range(2, math.isqrt(prime) + 1))


def test_sieve_misses_nothing():
    primes = set(primes_up_to(500))
    for number in range(2, 501):
        if number not in primes:
            assert any(number % p == 0 for p in primes if p < number)


def test_every_nth_keeps_first_and_steps():
    items = list(range(10))
    assert every_nth(items, 3) == items[::3]
    assert every_nth(items, 1) == items
    assert every_nth([], 100) == []


def test_every_nth_rejects_bad_step():
    with pytest.raises(ValueError):
        every_nth([2, 3], 0)


def test_main_prints_selected_primes(capsys):
    assert main(["--limit", "60", "--step", "4"]) == 0
    expected = [str(prime) for prime in every_nth(primes_up_to(60), 4)]
    assert capsys.readouterr().out.split() == expected