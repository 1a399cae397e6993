"""Esquemas de entrada/salida para el microservicio de cálculo.

Define los modelos de petición y respuesta del endpoint
`/api/v1/calculate`.

Utiliza Pydantic para validación automática y serialización JSON.
"""

from typing import Optional
from pydantic import BaseModel


# MODELOS DE PETICIÓN

class CalculateReq(BaseModel):
    """
    Modelo de solicitud para `/api/v1/calculate`.

    Atributos:
        expression (str): expresión aritmética en notación infija.
    """
    expression: str


# MODELOS DE RESPUESTA

class CalculateResp(BaseModel):
    """
    Respuesta de `/api/v1/calculate`.

    Solo uno de los dos campos está presente; el ausente se omite al
    serializar (`exclude_none=True`).

    Atributos:
        result (Optional[str]): resultado con dos decimales, p. ej. "14.00".
        error (Optional[str]): mensaje público del error.
    """
    result: Optional[str] = None
    error: Optional[str] = None


class HealthResp(BaseModel):
    """Respuesta del endpoint de salud."""
    status: str
    service: str
    version: str
