"""
HTTP middleware: request timing logs, bad-request mapping and a last-resort
exception handler.
"""

import sys
import time

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

# Malformed bodies get the same 400 message as missing fields
BAD_REQUEST_MESSAGES = {
    "/api/v1/chat": "Mensaje requerido",
    "/api/v1/generate-report": "Datos de reporte incompletos",
}
DEFAULT_BAD_REQUEST_MESSAGE = "Solicitud inválida"


def configure_logging(level: str = "INFO") -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


async def logging_middleware(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    elapsed = round((time.perf_counter() - start) * 1000, 2)
    logger.info(f"{request.method} {request.url.path} [{response.status_code}] {elapsed}ms")
    return response


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Invalid body on {request.method} {request.url.path}: {exc.errors()}")
    message = BAD_REQUEST_MESSAGES.get(request.url.path, DEFAULT_BAD_REQUEST_MESSAGE)
    return JSONResponse(status_code=400, content={"error": message})


async def exception_middleware(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception as exc:
        # Core failures are return values; anything reaching here is a bug
        logger.exception(f"Unhandled exception on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error", "type": type(exc).__name__},
        )
