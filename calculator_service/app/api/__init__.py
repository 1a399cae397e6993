"""
api
===

FastAPI router and HTTP endpoint definitions for the calculator service.

Modules
-------
routes
    Router for the calculate endpoint (/api/v1/calculate) and /health.

Design
------
Thin controllers: endpoints receive requests, delegate evaluation to the
services layer and map `ErrorKind` values to HTTP status codes.

Usage
-----
    from app.api.routes import router
    app.include_router(router)
"""

from .routes import request_validation_handler, router

__all__ = ["router", "request_validation_handler"]
