"""
postfix_evaluator.py — Evaluación de expresiones en notación postfija
=====================================================================

Recorre la secuencia de izquierda a derecha con una pila de valores:
los números se apilan y cada operador consume los dos últimos valores.
"""

import logging
import math
import operator
from typing import Callable, Dict, List, Sequence

from ..domain.errors import ErrorKind, ExpressionError
from ..domain.tokens import is_number, is_operator

logger = logging.getLogger(__name__)


BinaryOp = Callable[[float, float], float]

# Tabla de operaciones binarias; la división se resuelve aparte.
_OPERATIONS: Dict[str, BinaryOp] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
}


def _divide(a: float, b: float) -> float:
    if b == 0:
        raise ExpressionError(ErrorKind.DIVISION_BY_ZERO)
    return a / b


_OPERATIONS["/"] = _divide


def apply_operator(op: str, a: float, b: float) -> float:
    """
    Aplica el operador binario `op` a `a` y `b` (en ese orden).

    Raises:
        ExpressionError: `DivisionByZero` si `b == 0` en una división,
            `UnknownOperator` si `op` no está en la tabla.
    """
    func = _OPERATIONS.get(op)
    if func is None:
        raise ExpressionError(ErrorKind.UNKNOWN_OPERATOR, op)
    return func(a, b)


def evaluate_postfix(tokens: Sequence[str]) -> float:
    """
    Evalúa una secuencia postfija y devuelve su valor.

    Args:
        tokens: Secuencia producida por `convert`.

    Returns:
        El único valor que queda en la pila.

    Raises:
        ExpressionError: `InvalidExpression` si faltan operandos o sobran
            valores al final, `Overflow` si un resultado intermedio sale del
            rango de `float`, `DivisionByZero`, `UnknownOperator` o
            `InvalidToken`.
    """
    stack: List[float] = []

    for token in tokens:
        if is_number(token):
            try:
                stack.append(float(token))
            except ValueError as e:
                raise ExpressionError(ErrorKind.INVALID_TOKEN, token) from e

        elif is_operator(token):
            if len(stack) < 2:
                raise ExpressionError(ErrorKind.INVALID_EXPRESSION)
            b = stack.pop()
            a = stack.pop()
            value = apply_operator(token, a, b)
            if not math.isfinite(value):
                raise ExpressionError(ErrorKind.OVERFLOW, token)
            stack.append(value)

        else:
            raise ExpressionError(ErrorKind.INVALID_TOKEN, token)

    if len(stack) != 1:
        raise ExpressionError(ErrorKind.INVALID_EXPRESSION)

    return stack[0]
