"""Taxonomía de errores de evaluación.

Cada fallo del pipeline se reporta como `ExpressionError` con un `ErrorKind`
enumerable. La capa HTTP clasifica por `kind`, nunca por el texto del mensaje.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Tipos de error que puede producir la evaluación."""

    MISMATCHED_PARENTHESES = "MismatchedParentheses"
    INVALID_CHARACTER = "InvalidCharacter"
    INVALID_EXPRESSION = "InvalidExpression"
    DIVISION_BY_ZERO = "DivisionByZero"
    UNKNOWN_OPERATOR = "UnknownOperator"
    INVALID_TOKEN = "InvalidToken"
    OVERFLOW = "Overflow"


# Errores atribuibles a una entrada mal formada (el resto son fallos internos).
CLIENT_ERROR_KINDS = frozenset({
    ErrorKind.INVALID_EXPRESSION,
    ErrorKind.INVALID_CHARACTER,
    ErrorKind.MISMATCHED_PARENTHESES,
})

_MESSAGES = {
    ErrorKind.MISMATCHED_PARENTHESES: "mismatched parentheses",
    ErrorKind.INVALID_CHARACTER: "invalid character",
    ErrorKind.INVALID_EXPRESSION: "invalid expression",
    ErrorKind.DIVISION_BY_ZERO: "division by zero",
    ErrorKind.UNKNOWN_OPERATOR: "unknown operator",
    ErrorKind.INVALID_TOKEN: "invalid token",
    ErrorKind.OVERFLOW: "result out of range",
}


class ExpressionError(ValueError):
    """
    Error de evaluación de una expresión.

    Atributos:
        kind (ErrorKind): clasificación estructurada del error.
        token (Optional[str]): token que lo provocó, si aplica.
    """

    def __init__(self, kind: ErrorKind, token: Optional[str] = None):
        self.kind = kind
        self.token = token
        message = _MESSAGES[kind]
        if token is not None:
            message = f"{message}: {token}"
        super().__init__(message)

    @property
    def is_client_error(self) -> bool:
        """True si el error se debe a una expresión mal formada."""
        return self.kind in CLIENT_ERROR_KINDS

    def __repr__(self) -> str:
        return f"ExpressionError(kind={self.kind.value!r}, token={self.token!r})"
