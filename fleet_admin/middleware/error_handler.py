import logging
import traceback

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from fleet_admin.middleware.security_headers import SECURITY_HEADERS
from fleet_admin.utils.exceptions import AppException

logger = logging.getLogger(__name__)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle all AppException subclasses (our custom exceptions)."""
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code} {exc.error_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Handle Pydantic validation errors.
    Malformed input is a plain 400 with the first problem as the message.
    """
    errors = exc.errors()
    message = "Bad request"
    if errors and errors[0].get("type") == "json_invalid":
        message = "Invalid JSON body"
    elif errors:
        first = errors[0]
        loc = [str(part) for part in first.get("loc", []) if part != "body"]
        msg = first.get("msg", "Invalid value")
        message = f"{'.'.join(loc)}: {msg}" if loc else msg
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Routing and static-file errors (404, 405) in the same JSON shape."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Catch-all handler for unexpected exceptions (e.g. a failed data file write).
    Logs the full traceback, returns a safe 500 response.
    """
    logger.error(
        f"Unhandled exception on {request.method} {request.url}\n"
        f"{traceback.format_exc()}"
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Server error"},
        # rendered outside the http middleware stack, so add the headers here
        headers=SECURITY_HEADERS,
    )
