import io

import pytest

from algodrills.numbers import (
    MODULUS,
    big_factorial,
    factorial_iterative,
    factorial_recursive,
    fibonacci_iterative,
    fibonacci_mod,
    fibonacci_recursive,
    frequency_sort,
    main,
)


def test_fibonacci_mod_start():
    assert fibonacci_mod(0) == 0
    assert fibonacci_mod(1) == 1
    assert fibonacci_mod(2) == 1


@pytest.mark.parametrize("n", [0, 1, 5, 17, 100, 12345])
def test_fibonacci_mod_recurrence(n):
    assert fibonacci_mod(n + 2) == (fibonacci_mod(n + 1) + fibonacci_mod(n)) % MODULUS


def test_fibonacci_mod_large_in_range():
    value = fibonacci_mod(10**18)
    assert 0 <= value < MODULUS
    assert (fibonacci_mod(10**18 + 1) + value) % MODULUS == fibonacci_mod(10**18 + 2)


def test_fibonacci_mod_negative():
    with pytest.raises(ValueError):
        fibonacci_mod(-1)


def test_fibonacci_lists_agree_with_mod():
    sequence = fibonacci_recursive(100)
    assert sequence == [fibonacci_mod(i) for i in range(len(sequence))]


def test_fibonacci_recursive_bounds():
    sequence = fibonacci_recursive(100)
    assert sequence[-1] <= 100
    assert sequence[-1] + sequence[-2] > 100
    for a, b, c in zip(sequence, sequence[1:], sequence[2:]):
        assert c == a + b


def test_fibonacci_variants_same_when_limit_not_fibonacci():
    assert fibonacci_recursive(100) == fibonacci_iterative(100)


def test_fibonacci_limit_inclusive_vs_exclusive():
    inclusive = fibonacci_recursive(89)
    exclusive = fibonacci_iterative(89)
    assert inclusive[-1] == 89
    assert exclusive == inclusive[:-1]


def test_fibonacci_small_limits():
    assert fibonacci_recursive(0) == [0, 1]
    assert fibonacci_iterative(0) == [0]


@pytest.mark.parametrize("n", [0, 1, 2, 5, 12, 20])
def test_big_factorial_matches_int(n):
    assert int(big_factorial(n)) == factorial_iterative(n)


def test_big_factorial_hundred():
    text = big_factorial(100)
    assert len(text) == 158
    assert int(text) == int(big_factorial(99)) * 100
    assert text.endswith("0" * 24)
    assert not text.endswith("0" * 25)


def test_factorials_agree():
    assert factorial_recursive(5) == factorial_iterative(5) == 120
    for n in range(-2, 15):
        assert factorial_recursive(n) == factorial_iterative(n)


def test_frequency_sort_example():
    values = [1, 2, 4, 1, 3, 1, 4, 5, 6, 7, 1, 8, 8, 9, 4]
    assert frequency_sort(values) == [1, 1, 1, 1, 4, 4, 4, 8, 8, 9, 7, 6, 5, 3, 2]


def test_frequency_sort_is_permutation():
    values = [3, 3, 0, 99, 42, 42, 42, 3]
    result = frequency_sort(values)
    assert sorted(result) == sorted(values)
    assert result[:3] == [42, 42, 42] or result[:3] == [3, 3, 3]


def test_frequency_sort_out_of_range():
    with pytest.raises(ValueError):
        frequency_sort([1, 100])


def test_main_arguments(capsys):
    assert main(["10", "3"]) == 0
    assert capsys.readouterr().out == f"{fibonacci_mod(10)}\n{fibonacci_mod(3)}\n"


def test_main_stdin_stops_at_non_number(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("0 5\nx 7"))
    assert main([]) == 0
    assert capsys.readouterr().out == f"{fibonacci_mod(0)}\n{fibonacci_mod(5)}\n"