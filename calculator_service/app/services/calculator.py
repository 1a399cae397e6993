"""
calculator.py — Servicio principal de evaluación
================================================

Responsabilidad: orquestar el flujo completo de evaluación.
"""

import logging

from ..config import settings
from .converter import convert
from .postfix_evaluator import evaluate_postfix
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


def evaluate(expression: str) -> float:
    """
    Evalúa una expresión aritmética infija.

    Función pura: cada llamada crea sus propias estructuras intermedias, por
    lo que puede invocarse desde varios hilos a la vez.

    Args:
        expression: Expresión con números, `+ - * /` y paréntesis.

    Returns:
        float: Resultado de la expresión

    Raises:
        ExpressionError: Primer error encontrado en cualquier etapa
    """
    tokens = tokenize(expression)
    postfix = convert(tokens)
    return evaluate_postfix(postfix)


class CalculatorService:
    """
    Servicio de evaluación que orquesta todo el flujo.

    Flujo:
    1. Lexer (Lark) → tokens
    2. Shunting-yard → secuencia postfija
    3. Pila de valores → resultado
    """

    def __init__(self, decimals: int = 2):
        self.decimals = decimals

    def evaluate(self, expression: str) -> float:
        """Evalúa la expresión; propaga `ExpressionError` sin modificarlo."""
        return evaluate(expression)

    def format_result(self, value: float) -> str:
        """Formatea el resultado con un número fijo de decimales."""
        return f"{value:.{self.decimals}f}"

    def calculate(self, expression: str) -> str:
        """Evalúa y devuelve el resultado ya formateado."""
        result = self.format_result(self.evaluate(expression))
        logger.debug("calculate(%r) -> %s", expression, result)
        return result


# Instancia singleton para uso en routes
_calculator_service = None


def get_calculator_service() -> CalculatorService:
    """Factory para obtener instancia singleton del servicio."""
    global _calculator_service
    if _calculator_service is None:
        _calculator_service = CalculatorService(decimals=settings.RESULT_DECIMALS)
    return _calculator_service
