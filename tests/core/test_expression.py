"""Tests for the arithmetic evaluator."""

import pytest

from beacon.errors import ExpressionError
from beacon.expression import MAX_EXPRESSION_LENGTH, evaluate, format_number, tokenize


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("2 + 2", 4),
        ("2+3*4", 14),
        ("(2 + 3) * 4", 20),
        ("10 / 4", 2.5),
        ("-3 + 5", 2),
        ("--2", 2),
        ("1.5 * 2", 3.0),
        (".5 + .5", 1.0),
        ("1e3 / 10", 100.0),
        ("8 - 2 - 1", 5),
    ],
)
def test_evaluate_valid(expression, expected):
    assert evaluate(expression) == expected


@pytest.mark.parametrize(
    "expression",
    ["???", "2 +", "(1 + 2", "1 + 2)", "2 ** 3", "abs(1)", "__import__('os')", "1 2"],
)
def test_evaluate_rejects_malformed(expression):
    with pytest.raises(ExpressionError):
        evaluate(expression)


@pytest.mark.parametrize("expression", ["", "   "])
def test_evaluate_rejects_empty(expression):
    with pytest.raises(ExpressionError, match="Empty expression"):
        evaluate(expression)


def test_evaluate_rejects_long_input():
    with pytest.raises(ExpressionError, match="longer than"):
        evaluate("1+" * MAX_EXPRESSION_LENGTH + "1")


def test_division_by_zero():
    with pytest.raises(ExpressionError, match="Division by zero"):
        evaluate("1 / (2 - 2)")


def test_non_finite_result():
    with pytest.raises(ExpressionError):
        evaluate("1e308 * 10")


def test_tokenize_reports_position():
    with pytest.raises(ExpressionError, match="position 4"):
        tokenize("1 + $")


def test_tokenize_ends_with_end_token():
    tokens = tokenize("1 + 2")

    assert [token.kind for token in tokens] == ["number", "op", "number", "end"]


@pytest.mark.parametrize(
    "value, expected",
    [(4, "4"), (4.0, "4"), (2.5, "2.5"), (-3.0, "-3")],
)
def test_format_number(value, expected):
    assert format_number(value) == expected
