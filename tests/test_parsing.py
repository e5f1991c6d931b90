import pytest

from pushswap.parsing import (
    OVERFLOW,
    ParseError,
    all_in_range,
    all_integers,
    has_content,
    no_duplicates,
    parse_arguments,
    parse_long,
)


def test_parse_long_plain():
    assert parse_long("42") == 42
    assert parse_long("-42") == -42
    assert parse_long("+42") == 42


def test_parse_long_skips_whitespace_and_stops_at_non_digit():
    assert parse_long(" \t\n-17abc") == -17
    assert parse_long("12 34") == 12


def test_parse_long_without_digits_is_zero():
    assert parse_long("") == 0
    assert parse_long("-") == 0


def test_parse_long_overflow():
    assert parse_long("99999999999999999999") == OVERFLOW
    assert parse_long("-99999999999999999999") == OVERFLOW


def test_has_content():
    assert has_content(" 5")
    assert not has_content("")
    assert not has_content(None)
    assert not has_content("   ")
    assert not has_content("\t\n\v\f\r ")


def test_all_integers():
    assert all_integers(["1", "-2", "+3", "007"])
    assert not all_integers(["-"])
    assert not all_integers(["+"])
    assert not all_integers(["1a"])
    assert not all_integers(["1", "--2"])
    assert not all_integers(["1.5"])


def test_all_in_range_limits():
    assert all_in_range(["2147483647", "-2147483648"])
    assert not all_in_range(["2147483648"])
    assert not all_in_range(["-2147483649"])
    assert not all_in_range(["99999999999999999999"])


def test_no_duplicates():
    assert no_duplicates(["1", "2", "3"])
    assert not no_duplicates(["1", "01"])
    assert not no_duplicates(["+5", "5"])
    assert not no_duplicates(["-0", "0"])


def test_parse_arguments_single_string():
    assert parse_arguments(["3 2 1"]) == [3, 2, 1]


def test_parse_arguments_mixed_and_repeated_spaces():
    assert parse_arguments(["1", "2  3 ", " 4"]) == [1, 2, 3, 4]


def test_parse_arguments_keeps_signs():
    assert parse_arguments(["-5", "+6", "2147483647"]) == [-5, 6, 2147483647]


@pytest.mark.parametrize(
    "args",
    [
        [""],
        ["   "],
        ["1", ""],
        ["1 1"],
        ["1", "+1"],
        ["a"],
        ["1\t2"],
        ["2147483648"],
        ["-2147483649"],
        ["-"],
    ],
)
def test_parse_arguments_errors(args):
    with pytest.raises(ParseError):
        parse_arguments(args)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_arguments(["x"])