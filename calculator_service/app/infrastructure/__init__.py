# ============================================================================
# calculator_service/app/infrastructure/__init__.py
# ============================================================================
"""
Infrastructure layer - External dependencies (Lark lexer, grammar file I/O)
"""

from .lark_lexer import ExpressionLexer, get_lexer, load_grammar

__all__ = ["ExpressionLexer", "get_lexer", "load_grammar"]
