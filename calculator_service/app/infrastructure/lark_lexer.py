"""Configuración y gestión del lexer de expresiones.

Responsabilidad: cargar la gramática léxica, configurar Lark y partir texto
en tokens.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Iterator

from lark import Lark, Token
from lark.exceptions import LarkError

from ..domain.errors import ErrorKind, ExpressionError

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parents[1] / "grammar" / "expression.lark"


@lru_cache(maxsize=1)
def load_grammar(path: Path = GRAMMAR_PATH) -> str:
    """
    Lee la gramática `.lark` (una sola vez por ruta).

    Raises:
        FileNotFoundError: Si no se encuentra el archivo
    """
    if not path.exists():
        raise FileNotFoundError(f"Archivo de gramática no encontrado: {path}")
    return path.read_text(encoding="utf-8")


class LarkLexerConfig:
    """Configuración de Lark.

    Solo se usa `Lark.lex`, que exige el lexer básico (sin contexto). Sin
    motor de parsing no se construye ninguna tabla LALR.
    """

    START = "start"
    PARSER = None
    LEXER = "basic"


class ExpressionLexer:
    """Lexer de expresiones basado en Lark.

    Singleton: la gramática se compila una vez. La instancia compilada no
    cambia después; el estado del escaneo vive en cada llamada a `lex`.
    """

    _instance = None
    _lark = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialize_lexer()
        return cls._instance

    def _initialize_lexer(self) -> None:
        self._lark = Lark(
            load_grammar(),
            start=LarkLexerConfig.START,
            parser=LarkLexerConfig.PARSER,
            lexer=LarkLexerConfig.LEXER,
        )
        logger.debug("Lexer de expresiones compilado desde %s", GRAMMAR_PATH)

    def lex(self, text: str) -> Iterator[Token]:
        """Parte el texto en tokens, descartando espacios.

        Args:
            text: Expresión a escanear

        Returns:
            Iterador de tokens de Lark (subclase de `str`)

        Raises:
            ExpressionError: `InvalidCharacter` si el texto contiene algo que
                la gramática no reconoce
        """
        try:
            yield from self._lark.lex(text)
        except LarkError as e:
            logger.debug("Error léxico en %r: %s", text, e)
            raise ExpressionError(ErrorKind.INVALID_CHARACTER, getattr(e, "char", None)) from e


@lru_cache(maxsize=1)
def get_lexer() -> ExpressionLexer:
    """Factory function para obtener instancia singleton del lexer."""
    return ExpressionLexer()
