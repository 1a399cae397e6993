"""Domain layer - Tokens y errores del evaluador."""

from .errors import CLIENT_ERROR_KINDS, ErrorKind, ExpressionError
from .tokens import (
    LEFT_PAREN,
    PRECEDENCE,
    RIGHT_PAREN,
    is_number,
    is_operator,
    priority,
)

__all__ = [
    "CLIENT_ERROR_KINDS",
    "ErrorKind",
    "ExpressionError",
    "LEFT_PAREN",
    "PRECEDENCE",
    "RIGHT_PAREN",
    "is_number",
    "is_operator",
    "priority",
]
