import pytest

from pushswap.parsing import (
    INT_MAX,
    INT_MIN,
    ParseError,
    allow_char,
    atoi,
    atol,
    check_limits,
    check_symbols,
    parse_arguments,
    split_arguments,
)


def test_split_arguments_drops_empty_words():
    assert split_arguments(["1 2", "  3  ", "4"]) == ["1", "2", "3", "4"]


def test_split_arguments_only_spaces_is_empty():
    assert split_arguments(["   ", ""]) == []


def test_split_arguments_does_not_split_on_tabs():
    assert split_arguments(["1\t2"]) == ["1\t2"]


@pytest.mark.parametrize("word", ["42", "-7", "+3", "0"])
def test_allow_char_accepts_digits_and_signs(word):
    assert allow_char(word) is True


@pytest.mark.parametrize("word", ["4a", "1.5", "abc", "1\t"])
def test_allow_char_rejects_other_characters(word):
    assert allow_char(word) is False


@pytest.mark.parametrize("word", ["42", "-42", "+42"])
def test_check_symbols_accepts_leading_sign(word):
    assert check_symbols(word) is True


@pytest.mark.parametrize("word", ["--5", "+-5", "-", "5-", "5-3", "-5+"])
def test_check_symbols_rejects_misplaced_signs(word):
    assert check_symbols(word) is False


@pytest.mark.parametrize("word", ["2147483647", "-2147483648", "0"])
def test_check_limits_accepts_int_range(word):
    assert check_limits(word) is True


@pytest.mark.parametrize("word", ["2147483648", "-2147483649"])
def test_check_limits_rejects_out_of_range(word):
    assert check_limits(word) is False


def test_atol_skips_whitespace_and_stops_at_non_digit():
    assert atol(" \t\n-42abc") == -42


def test_atol_reads_int_bounds_exactly():
    assert atol(str(INT_MAX + 1)) == INT_MAX + 1
    assert atol(str(INT_MIN)) == INT_MIN


def test_atoi_reads_plus_sign():
    assert atoi("+17") == 17


def test_atoi_double_sign_reads_nothing():
    assert atoi("+-3") == 0


def test_atoi_wraps_to_32_bits():
    assert atoi(str(INT_MAX + 1)) == INT_MIN


def test_parse_arguments_single_string():
    assert parse_arguments(["3 1 2"]) == [3, 1, 2]


def test_parse_arguments_mixed_arguments_keep_order():
    assert parse_arguments(["5", "-1 +8", "  0 "]) == [5, -1, 8, 0]


def test_parse_arguments_no_arguments():
    assert parse_arguments([]) == []


def test_parse_arguments_bounds():
    assert parse_arguments(["2147483647 -2147483648"]) == [INT_MAX, INT_MIN]


@pytest.mark.parametrize(
    "args",
    [
        ["   "],
        [""],
        ["1 2 1"],
        ["0 -0"],
        ["+5", "5"],
        ["1 two 3"],
        ["1 --2"],
        ["2147483648"],
        ["-2147483649"],
        ["3-4"],
    ],
)
def test_parse_arguments_rejects_invalid_input(args):
    with pytest.raises(ParseError):
        parse_arguments(args)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_arguments(["1 1"])


def test_parsed_values_are_distinct():
    values = parse_arguments(["9 -3 7", "12 0"])
    assert len(set(values)) == len(values)