import pytest

from stats_report.sources.parsing import parse_listing, parse_number, parse_numbers


@pytest.mark.parametrize(
    "token,expected",
    [
        ("42", 42.0),
        ("  -3.5 ", -3.5),
        ("1e3", 1000.0),
        ("abc", None),
        ("", None),
        ("   ", None),
        ("nan", None),
    ],
)
def test_parse_number(token, expected):
    assert parse_number(token) == expected


def test_parse_numbers_skips_non_numeric_lines():
    """Blank and non-numeric lines are dropped, order kept"""
    assert parse_numbers("7\nabc\n34\n\n2\nxyz\n") == [7, 34, 2]


def test_parse_numbers_handles_crlf():
    assert parse_numbers("1\r\n2\r\n3") == [1, 2, 3]


def test_parse_numbers_empty_text():
    assert parse_numbers("") == []


@pytest.mark.parametrize(
    "text,expected_numbers,expected_discarded",
    [
        ("7\nabc\n34\n\n2\nxyz\n", [7, 34, 2], 2),
        ("1\n2\n", [1, 2], 0),
        ("\n\n  \n", [], 0),
        ("nan\n1\n", [1], 1),
    ],
)
def test_parse_listing_counts_discarded_lines(text, expected_numbers, expected_discarded):
    """Blank lines are skipped without counting as discarded"""
    numbers, discarded = parse_listing(text)
    assert numbers == expected_numbers
    assert discarded == expected_discarded
