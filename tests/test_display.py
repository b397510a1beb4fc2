"""Tests for display rendering: trailing '.0', the Error sentinel, truncation."""

import math

import pytest

from pocketcalc.config import Settings
from pocketcalc.display import format_number, parse_display, render_result, truncate


# --- format_number (3 tests) ---

@pytest.mark.parametrize("value, expected", [(4.0, "4"), (2.5, "2.5"), (-7.0, "-7"), (0.0, "0")])
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_format_negative_zero():
    assert format_number(-0.0) == "-0"


def test_formatted_value_reads_back():
    for value in (0.1, 123.456, -42.0, 1e20):
        assert parse_display(format_number(value)) == value


# --- render_result (2 tests) ---

@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_non_finite_results_show_error(value):
    assert render_result(value) == "Error"


def test_finite_result():
    assert render_result(10.0) == "10"


# --- truncate (4 tests) ---

def test_long_decimal_is_cut():
    assert truncate("1.4142135623730951", Settings()) == "1.41421356"


def test_boundary_length_is_kept():
    # 11 characters is within the limit
    assert truncate("1.234567890", Settings()) == "1.234567890"


def test_integers_are_never_cut():
    assert truncate("123456789012345", Settings()) == "123456789012345"


def test_scientific_notation_loses_exponent():
    # 1/12345678; the cut keeps the first ten characters only
    assert truncate("8.100000664200055e-08", Settings()) == "8.10000066"


# --- parse_display (1 test) ---

def test_parse_display():
    assert parse_display("5.") == 5.0
    assert parse_display("-3") == -3.0
    assert parse_display("Error") is None
