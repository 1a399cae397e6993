"""
Módulo de configuración del microservicio de cálculo.

Utiliza `pydantic-settings` para cargar la configuración desde variables
de entorno y/o archivos `.env`. Todos los atributos definidos en `Settings`
pueden sobreescribirse mediante variables de entorno con el mismo nombre.

Ejemplo de `.env`:
    APP_NAME=calculator_service
    ENV=prod
    HOST=0.0.0.0
    PORT=8080
    LOG_LEVEL=INFO
    RESULT_DECIMALS=2
    CORS_ORIGINS=http://localhost:3000,http://localhost:5173
"""

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Configuración central del microservicio de cálculo.

    Atributos principales:
        APP_NAME:
            Nombre de la aplicación (aparece en la documentación de FastAPI).
        ENV:
            Entorno de ejecución: "dev", "prod", "test", etc.
        HOST / PORT:
            Dirección de escucha de Uvicorn.
        LOG_LEVEL:
            Nivel del logger raíz ("DEBUG", "INFO", ...).
        RESULT_DECIMALS:
            Decimales con los que se formatea el resultado.
        CORS_ORIGINS:
            Orígenes permitidos separados por coma ("*" para todos).
    """

    APP_NAME: str = "calculator_service"
    ENV: str = "dev"

    HOST: str = "0.0.0.0"
    PORT: int = 8080

    LOG_LEVEL: str = "INFO"

    RESULT_DECIMALS: int = Field(default=2, ge=0, le=15)

    CORS_ORIGINS: str = "*"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="",
        extra="ignore",
    )

    @property
    def cors_origins(self) -> List[str]:
        """Lista de orígenes CORS a partir de la cadena separada por comas."""
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Factory de la configuración (cacheada)."""
    return Settings()


# Instancia única de configuración usada en el resto de la app
settings = get_settings()
