import itertools
import random

import pytest

from ftkit.pushswap import (
    PushSwapError,
    dispatch_sort,
    is_valid_number,
    main,
    parse_arguments,
    parse_int,
    radix_sort,
    solve,
    sort_five,
    sort_four,
    sort_three,
    sort_two,
    split_words,
)
from ftkit.stack import Stacks


def _replay(values, operations):
    stacks = Stacks(values)
    for operation in operations:
        getattr(stacks, operation)()
    return stacks


@pytest.mark.parametrize("text", ["0", "42", "-42", "+7", "-0", "2147483647", "-2147483648"])
def test_valid_numbers(text):
    assert is_valid_number(text) is True


@pytest.mark.parametrize(
    "text", ["", "+", "-", "12a", "a12", " 1", "1 2", "2147483648", "-2147483649", "--1", None]
)
def test_invalid_numbers(text):
    assert is_valid_number(text) is False


def test_parse_int_limits():
    assert parse_int("2147483647") == 2147483647
    assert parse_int("-2147483648") == -2147483648
    assert parse_int("+15") == 15


def test_parse_int_overflow_raises():
    with pytest.raises(PushSwapError):
        parse_int("2147483648")
    with pytest.raises(PushSwapError):
        parse_int("-2147483649")


def test_split_words_drops_empty_runs():
    assert split_words("  1 2\t3 \n", " \t\n") == ["1", "2", "3"]
    assert split_words("   ", " ") == []


def test_parse_arguments_single_string():
    assert parse_arguments(["3 -1\t2"]) == [3, -1, 2]


def test_parse_arguments_many():
    assert parse_arguments(["3", "-1", "2"]) == [3, -1, 2]


def test_parse_arguments_empty_cases():
    assert parse_arguments([]) == []
    assert parse_arguments(["   "]) == []


@pytest.mark.parametrize(
    "args", [["1", "1"], ["1 2 1"], ["1", "x"], ["1", ""], ["1 2", "3"], ["99999999999"]]
)
def test_parse_arguments_errors(args):
    with pytest.raises(PushSwapError):
        parse_arguments(args)


def test_sort_two():
    stacks = Stacks([2, 1])
    sort_two(stacks)
    assert stacks.operations == ["sa"]
    assert stacks.a == [1, 2]


@pytest.mark.parametrize("values", list(itertools.permutations([5, -3, 9])))
def test_sort_three_sorts_in_two_moves(values):
    stacks = Stacks(values)
    sort_three(stacks)
    assert stacks.a == sorted(values)
    assert len(stacks.operations) <= 2


def test_sort_three_pinned():
    stacks = Stacks([1, 3, 2])
    sort_three(stacks)
    assert stacks.operations == ["rra", "sa"]


@pytest.mark.parametrize("values", list(itertools.permutations([4, -2, 0, 11])))
def test_sort_four(values):
    stacks = Stacks(values)
    sort_four(stacks)
    assert stacks.a == sorted(values)
    assert stacks.b == []


@pytest.mark.parametrize("values", list(itertools.permutations([4, -2, 0, 11, 7])))
def test_sort_five(values):
    stacks = Stacks(values)
    sort_five(stacks)
    assert stacks.a == sorted(values)
    assert stacks.b == []
    assert len(stacks.operations) <= 12


@pytest.mark.parametrize("size", [6, 10, 37, 100])
def test_radix_sort(size):
    values = random.Random(size).sample(range(-1000, 1000), size)
    stacks = Stacks(values)
    radix_sort(stacks)
    assert stacks.a == sorted(values)
    assert stacks.b == []


@pytest.mark.parametrize("size", [2, 3, 4, 5, 8])
def test_dispatch_sort(size):
    values = list(range(size, 0, -1))
    stacks = Stacks(values)
    dispatch_sort(stacks)
    assert stacks.a == sorted(values)


def test_solve_sorted_input_gives_nothing():
    assert solve([1, 2, 3, 4, 5, 6]) == []
    assert solve([]) == []
    assert solve([7]) == []


@pytest.mark.parametrize("size", [2, 3, 4, 5, 6, 20, 64])
def test_solve_replays_to_sorted(size):
    values = random.Random(size * 7).sample(range(-500, 500), size)
    if values == sorted(values):
        values.reverse()
    operations = solve(values)
    stacks = _replay(values, operations)
    assert stacks.a == sorted(values)
    assert stacks.b == []


def test_solve_duplicates_raise():
    with pytest.raises(PushSwapError):
        solve([1, 2, 1])


def test_main_prints_operations(capsys):
    assert main(["3", "1", "2", "5", "4", "0"]) == 0
    out = capsys.readouterr().out
    stacks = _replay([3, 1, 2, 5, 4, 0], out.splitlines())
    assert stacks.a == [0, 1, 2, 3, 4, 5]
    assert out.endswith("\n")


def test_main_error(capsys):
    assert main(["1", "one"]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_no_arguments_and_sorted(capsys):
    assert main([]) == 0
    assert main(["1 2 3"]) == 0
    assert main(["  "]) == 0
    assert capsys.readouterr().out == ""