"""Error handlers for the REST API."""

import math
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from maxrects.application.config import ConfigError
from maxrects.domain import InvalidDimensionError, NoBinsError


def _json_number(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return repr(value)
    return value


class UnknownHeuristicError(Exception):
    """Raised when a request names a heuristic that does not exist."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(
            f"Unknown heuristic: {name}. Available: {', '.join(available)}"
        )


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details,
            },
        )

    @app.exception_handler(NoBinsError)
    async def no_bins_handler(request: Request, exc: NoBinsError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "no_bins",
                "details": None,
            },
        )

    @app.exception_handler(InvalidDimensionError)
    async def invalid_dimension_handler(
        request: Request, exc: InvalidDimensionError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "invalid_dimension",
                "details": {
                    "subject": exc.subject,
                    "width": _json_number(exc.width),
                    "height": _json_number(exc.height),
                },
            },
        )

    @app.exception_handler(UnknownHeuristicError)
    async def unknown_heuristic_handler(
        request: Request, exc: UnknownHeuristicError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "error": str(exc),
                "error_type": "unknown_heuristic",
                "details": {"heuristic": exc.name, "available": exc.available},
            },
        )
