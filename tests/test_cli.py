"""Tests for the typer CLI: eval, keys and repl."""

import json

import pytest
from typer.testing import CliRunner

from pocketcalc.__main__ import app


@pytest.fixture
def runner():
    return CliRunner()


# --- eval (5 tests) ---

def test_eval_parenthesized(runner):
    result = runner.invoke(app, ["eval", "2+(3x4)"])
    assert result.exit_code == 0
    assert "14" in result.stdout


def test_eval_flat(runner):
    result = runner.invoke(app, ["eval", "2+3x4"])
    assert result.exit_code == 0
    assert "20" in result.stdout


def test_eval_division_by_zero_exits_nonzero(runner):
    result = runner.invoke(app, ["eval", "5/0"])
    assert result.exit_code == 1


def test_eval_json(runner):
    result = runner.invoke(app, ["eval", "(4/2)", "--json"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {
        "expression": "(4/2)",
        "strategy": "precedence",
        "display": "2",
    }


def test_eval_verbose(runner):
    result = runner.invoke(app, ["eval", "1+1", "--verbose"])
    assert result.exit_code == 0
    assert "2" in result.output


# --- keys (2 tests) ---

def test_keys(runner):
    result = runner.invoke(app, ["keys", "6", "+", "3", "="])
    assert result.exit_code == 0
    assert result.stdout.strip().endswith("9")


def test_keys_unknown(runner):
    result = runner.invoke(app, ["keys", "6", "?"])
    assert result.exit_code == 1


# --- repl (3 tests) ---

def test_repl_evaluates_until_quit(runner):
    result = runner.invoke(app, ["repl", "--no-history"], input="2+3\n2+3x4\nq\n")
    assert result.exit_code == 0
    assert "Result: 5" in result.output
    assert "Result: 20" in result.output


def test_repl_reports_errors_and_continues(runner):
    result = runner.invoke(app, ["repl"], input="5/0\n(1+1)\nQ\n")
    assert result.exit_code == 0
    assert "Result: 2" in result.output


def test_repl_ends_on_eof(runner):
    result = runner.invoke(app, ["repl"], input="1+1\n")
    assert result.exit_code == 0
    assert "Result: 2" in result.output
