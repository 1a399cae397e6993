"""
converter.py — Conversión de notación infija a postfija
=======================================================

Implementa el algoritmo *shunting-yard* con una lista de salida y una pila
explícita de operadores.

Reglas por token, en orden:

- número → se añade a la salida.
- `(` → se apila.
- `)` → se desapilan operadores a la salida hasta encontrar `(`, que se
  descarta. Si la pila se vacía antes: paréntesis desbalanceados.
- operador → mientras la cima tenga precedencia mayor o igual se desapila a
  la salida; después se apila. Así los cuatro operadores asocian por la
  izquierda (`8 - 3 - 2` = `(8 - 3) - 2`).
- cualquier otro token → carácter inválido.

Al final se vacía la pila en la salida; un `(` pendiente es un paréntesis
sin cerrar.
"""

import logging
from typing import List, Sequence

from ..domain.errors import ErrorKind, ExpressionError
from ..domain.tokens import (
    LEFT_PAREN,
    RIGHT_PAREN,
    is_number,
    is_operator,
    priority,
)

logger = logging.getLogger(__name__)


def convert(tokens: Sequence[str]) -> List[str]:
    """
    Convierte una secuencia de tokens infija a notación postfija (RPN).

    Args:
        tokens: Tokens producidos por `tokenize`.

    Returns:
        Secuencia postfija con números y operadores únicamente.

    Raises:
        ExpressionError: `MismatchedParentheses` o `InvalidCharacter`.
    """
    output: List[str] = []
    operators: List[str] = []

    for token in tokens:
        if is_number(token):
            output.append(token)

        elif token == LEFT_PAREN:
            operators.append(token)

        elif token == RIGHT_PAREN:
            while operators and operators[-1] != LEFT_PAREN:
                output.append(operators.pop())
            if not operators:
                raise ExpressionError(ErrorKind.MISMATCHED_PARENTHESES)
            operators.pop()

        elif is_operator(token):
            while operators and priority(operators[-1]) >= priority(token):
                output.append(operators.pop())
            operators.append(token)

        else:
            raise ExpressionError(ErrorKind.INVALID_CHARACTER, token)

    while operators:
        top = operators.pop()
        if top == LEFT_PAREN:
            raise ExpressionError(ErrorKind.MISMATCHED_PARENTHESES)
        output.append(top)

    logger.debug("convert(%s) -> %s", list(tokens), output)
    return output
