"""Services layer - Business logic orchestration."""

from .calculator import CalculatorService, evaluate, get_calculator_service
from .converter import convert
from .postfix_evaluator import apply_operator, evaluate_postfix
from .tokenizer import tokenize

__all__ = [
    "CalculatorService",
    "apply_operator",
    "convert",
    "evaluate",
    "evaluate_postfix",
    "get_calculator_service",
    "tokenize",
]
