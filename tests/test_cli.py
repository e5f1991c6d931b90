import random

import pytest

from pushswap.cli import assign_indices, main, solve
from pushswap.stacks import Stacks


def _replay(numbers, operations):
    stacks = Stacks(numbers)
    for name in operations:
        assert getattr(stacks, name)()
    return stacks


def test_assign_indices_ranks():
    stacks = Stacks([30, -5, 12])
    assign_indices(stacks)
    assert [node.index for node in stacks.a] == [2, 0, 1]


def test_assign_indices_is_a_permutation():
    numbers = random.Random(9).sample(range(-500, 500), 40)
    stacks = Stacks(numbers)
    assign_indices(stacks)
    assert sorted(node.index for node in stacks.a) == list(range(40))


def test_solve_sorted_needs_nothing():
    assert solve([1, 2, 3]) == []
    assert solve([]) == []


def test_solve_two():
    assert solve([2, 1]) == ["sa"]


@pytest.mark.parametrize("size", [3, 4, 5, 6, 20, 100, 300])
def test_solve_sorts(size):
    numbers = random.Random(size).sample(range(-10_000, 10_000), size)
    operations = solve(numbers)
    stacks = _replay(numbers, operations)
    assert stacks.values_a() == sorted(numbers)
    assert stacks.values_b() == []


def test_main_without_arguments(capsys):
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_main_sorted_input(capsys):
    assert main(["1", "2", "3"]) == 0
    assert capsys.readouterr().out == ""


def test_main_error(capsys):
    assert main(["1", "x"]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_duplicate_error(capsys):
    assert main(["4 4"]) == 1
    assert capsys.readouterr().err == "Error\n"


def test_main_small_prints_moves(capsys):
    assert main(["3 2 1"]) == 1
    operations = capsys.readouterr().out.splitlines()
    assert _replay([3, 2, 1], operations).values_a() == [1, 2, 3]


def test_main_large_prints_moves(capsys):
    numbers = random.Random(11).sample(range(-100, 100), 12)
    assert main([str(n) for n in numbers]) == 0
    operations = capsys.readouterr().out.splitlines()
    assert _replay(numbers, operations).values_a() == sorted(numbers)