"""Tests de los predicados compartidos y de la taxonomía de errores."""

import pytest

from app.domain.errors import CLIENT_ERROR_KINDS, ErrorKind, ExpressionError
from app.domain.tokens import is_number, is_operator, priority


@pytest.mark.parametrize("token,expected", [
    ("0", True),
    ("123", True),
    ("45.67", True),
    (".5", True),
    ("4.", True),
    ("1e3", True),
    ("2E+2", True),
    ("abc", False),
    ("+", False),
    ("1.2.3", False),
    ("inf", False),
    ("nan", False),
    ("1_000", False),
    ("٣", False),
    ("1e400", False),
    ("9" * 400, False),
    ("1e308", True),
    (".", False),
    ("", False),
])
def test_is_number(token, expected):
    assert is_number(token) is expected


@pytest.mark.parametrize("token", ["+", "-", "*", "/"])
def test_is_operator(token):
    assert is_operator(token)


@pytest.mark.parametrize("token", ["(", ")", "^", "%", "1", "**", ""])
def test_is_not_operator(token):
    assert not is_operator(token)


def test_priority():
    assert priority("+") == priority("-") == 1
    assert priority("*") == priority("/") == 2
    assert priority("(") == 0
    assert priority("x") == 0


def test_client_error_kinds():
    assert CLIENT_ERROR_KINDS == {
        ErrorKind.INVALID_EXPRESSION,
        ErrorKind.INVALID_CHARACTER,
        ErrorKind.MISMATCHED_PARENTHESES,
    }
    assert ExpressionError(ErrorKind.INVALID_CHARACTER, "@").is_client_error
    assert not ExpressionError(ErrorKind.DIVISION_BY_ZERO).is_client_error
    assert not ExpressionError(ErrorKind.UNKNOWN_OPERATOR, "^").is_client_error
    assert not ExpressionError(ErrorKind.OVERFLOW, "*").is_client_error


def test_expression_error_message_and_token():
    err = ExpressionError(ErrorKind.UNKNOWN_OPERATOR, "^")
    assert isinstance(err, ValueError)
    assert err.kind is ErrorKind.UNKNOWN_OPERATOR
    assert err.token == "^"
    assert str(err) == "unknown operator: ^"
    assert str(ExpressionError(ErrorKind.DIVISION_BY_ZERO)) == "division by zero"


def test_error_kind_values():
    assert ErrorKind.MISMATCHED_PARENTHESES.value == "MismatchedParentheses"
    assert ErrorKind("DivisionByZero") is ErrorKind.DIVISION_BY_ZERO
