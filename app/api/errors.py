"""Error response rendering."""
import logging
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.services.ordering.errors import OrderIntakeError

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    """Render an error as {"success": false, "error": message}."""
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


async def order_intake_exception_handler(request: Request, exc: OrderIntakeError) -> JSONResponse:
    """Render order intake errors with their status code."""
    logger.error(
        f"[ERROR] {request.method} {request.url.path} failed - "
        f"{type(exc).__name__}: {exc.message}"
    )
    return error_response(exc.status_code, exc.message)


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render unreadable request bodies as 400 errors."""
    logger.error(f"[ERROR] {request.method} {request.url.path} invalid request - {exc.errors()}")
    if any(error.get("type") == "json_invalid" for error in exc.errors()):
        return error_response(400, "Request body is not valid JSON")
    return error_response(400, "Invalid order message")
