"""Endpoints del microservicio de cálculo.

Responsabilidad única: manejar HTTP requests/responses. La evaluación se
delega por completo en `services.calculator`; aquí solo se decide el código
de estado a partir del `ErrorKind` y se registra cada petición atendida.
"""

import logging
from typing import Dict

from fastapi import APIRouter, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import settings
from ..domain.errors import ExpressionError
from ..schemas import CalculateReq, CalculateResp, HealthResp
from ..services.calculator import get_calculator_service

logger = logging.getLogger(__name__)

# Mensajes públicos: el texto interno del error nunca sale al cliente.
INVALID_EXPRESSION_MSG = "Expression is not valid"
INTERNAL_ERROR_MSG = "Internal server error"


router = APIRouter(
    prefix="",
    tags=["calculator"],
    responses={
        422: {"model": CalculateResp, "description": "Expression is not valid"},
        500: {"model": CalculateResp, "description": "Internal server error"},
    },
)


def _error_response(status_code: int, message: str) -> JSONResponse:
    body = CalculateResp(error=message).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body)


@router.post(
    "/api/v1/calculate",
    response_model=CalculateResp,
    response_model_exclude_none=True,
)
def calculate(req: CalculateReq):
    """Evalúa la expresión recibida.

    Args:
        req: Solicitud con la expresión a evaluar

    Returns:
        200 con `result` formateado, 422 si la expresión está mal formada,
        500 para cualquier otro fallo.
    """
    try:
        result = get_calculator_service().calculate(req.expression)

    except ExpressionError as e:
        if e.is_client_error:
            logger.warning("expression=%r rejected: %s", req.expression, e)
            return _error_response(422, INVALID_EXPRESSION_MSG)
        logger.error("expression=%r failed: %s", req.expression, e)
        return _error_response(500, INTERNAL_ERROR_MSG)

    except Exception:
        logger.exception("expression=%r unexpected error", req.expression)
        return _error_response(500, INTERNAL_ERROR_MSG)

    resp = CalculateResp(result=result)
    logger.info("expression=%r %s", req.expression, resp.model_dump_json(exclude_none=True))
    return resp


@router.get("/health", response_model=HealthResp)
def health() -> Dict[str, str]:
    """Endpoint de salud del servicio."""
    return {
        "status": "ok",
        "service": settings.APP_NAME,
        "version": __version__,
    }


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Cuerpo ilegible o sin el campo `expression`: se trata como fallo interno."""
    logger.warning("%s %s invalid body: %s", request.method, request.url.path, exc.errors())
    return _error_response(500, INTERNAL_ERROR_MSG)
