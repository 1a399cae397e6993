"""Calculator Service Application.

Microservicio de evaluación de expresiones aritméticas.

Arquitectura:
    - api/: FastAPI endpoints (HTTP layer)
    - domain/: Tokens, precedencias y errores
    - infrastructure/: Dependencias externas (Lark lexer, file I/O)
    - services/: Tokenizer, conversión a postfija, evaluación
    - schemas.py: Request/Response models (Pydantic)

Usage:
    from app.main import app
    # uvicorn app.main:app --reload
"""

__version__ = "1.0.0"
