"""Predicados compartidos sobre tokens.

Un token es un fragmento de texto; su clase (número, operador, paréntesis)
se deriva al consultarlo, no se guarda.
"""

import math
import re
from typing import Dict

LEFT_PAREN = "("
RIGHT_PAREN = ")"

# Precedencia de los operadores binarios soportados.
PRECEDENCE: Dict[str, int] = {
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
}

# Literal decimal ASCII: 12, 3.5, .5, 4., 1e3
_NUMBER_RE = re.compile(r"(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def is_number(token: str) -> bool:
    """Indica si el token es un literal numérico válido y representable.

    Un literal fuera del rango de `float` (p. ej. `1e400`) no es un número.
    """
    if _NUMBER_RE.fullmatch(token) is None:
        return False
    return math.isfinite(float(token))


def is_operator(token: str) -> bool:
    """Indica si el token es uno de los operadores `+ - * /`."""
    return token in PRECEDENCE


def priority(op: str) -> int:
    """Precedencia del operador; 0 para cualquier otro token (incluido `(`)."""
    return PRECEDENCE.get(op, 0)
