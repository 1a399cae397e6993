"""
tokenizer.py — Separación de la expresión en tokens
===================================================

Los caracteres `+ - * / ( )` forman tokens de un carácter; cualquier otra
secuencia de caracteres sin espacios se acumula en un mismo literal. Los
espacios cortan el literal en curso y nunca se emiten.

No se valida nada aquí: un literal como `@` o `1a` se entrega tal cual y es
la conversión a postfija la que lo rechaza.
"""

import logging
from typing import List

from ..infrastructure.lark_lexer import get_lexer

logger = logging.getLogger(__name__)


def tokenize(expression: str) -> List[str]:
    """
    Divide la expresión en tokens léxicos.

    Args:
        expression: Expresión aritmética en notación infija.

    Returns:
        Lista de tokens no vacíos, en orden de aparición.

    Ejemplo:
        >>> tokenize("12 + (3*4)")
        ['12', '+', '(', '3', '*', '4', ')']
    """
    tokens = [str(tok) for tok in get_lexer().lex(expression)]
    logger.debug("tokenize(%r) -> %s", expression, tokens)
    return tokens
