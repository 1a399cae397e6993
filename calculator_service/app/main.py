"""
Punto de entrada principal del microservicio de cálculo.

Expone una función `create_app` para facilitar el testeo y la integración
con servidores ASGI (Uvicorn, Gunicorn, etc.), y una instancia global
`app` usada por defecto cuando se ejecuta directamente con Uvicorn.

Usage:
    uvicorn app.main:app
"""

import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from . import __version__
from .api import request_validation_handler, router
from .config import settings
from .logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """
    Crea y configura la aplicación FastAPI.

    - Configura el logging según `LOG_LEVEL`.
    - Configura CORS con los orígenes de `CORS_ORIGINS`.
    - Registra las rutas de cálculo y salud.
    - Trata un cuerpo de petición inválido como error interno (500).

    Returns:
        Instancia configurada de `FastAPI`.
    """
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="Calculator Service",
        description="Microservicio de evaluación de expresiones aritméticas.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # --- CORS Configuration ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    logger.info("Calculator Service %s iniciado (env=%s)", __version__, settings.ENV)

    return app


# Instancia por defecto utilizada por Uvicorn
app = create_app()

if __name__ == "__main__":
    logger.info("Server is running on port %d", settings.PORT)
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
