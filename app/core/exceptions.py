from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from app.core.error_codes import INVALID_REQUEST, INTERNAL_ERROR, DATABASE_INTEGRITY_ERROR

logger = logging.getLogger("uvicorn.error")

class CustomHTTPException(Exception):
    """A custom HTTPException that we can use for additional context."""
    def __init__(self, status_code: int, detail: str, error_code: str = None, headers: dict = None):
        self.status_code = status_code
        self.detail = detail
        self.error_code = error_code
        self.headers = headers
        super().__init__(detail)  # Initialize the base Exception with the detail message

async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle validation errors and return a structured 400 response."""
    logger.error(f"Validation error on {request.url}: {exc.errors()}")

    errors = exc.errors()
    # Sanitize un-serializable objects in ctx
    for error in errors:
        ctx = error.get("ctx")
        if ctx and isinstance(ctx.get("error"), Exception):
            ctx["error"] = str(ctx["error"])

    return JSONResponse(
        status_code=400,
        content={
            "detail": "Validation failed. Please check your request data.",
            "error_code": INVALID_REQUEST,
            "errors": errors,
        },
    )

async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Custom HTTP exception handler for better error responses."""
    if isinstance(exc, CustomHTTPException):
        logger.error(f"Custom HTTP error on {request.url}: {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "detail": exc.detail,
                "error_code": exc.error_code
            },
            headers=exc.headers or {},
        )
    elif isinstance(exc, StarletteHTTPException):
        logger.error(f"HTTP error on {request.url}: {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail, "error_code": None},
            headers=exc.headers or {},
        )

    logger.error(f"Unexpected error on {request.url}: {str(exc)}")
    return JSONResponse(
        status_code=500,
        content={"detail": "An unexpected error occurred", "error_code": INTERNAL_ERROR},
    )

async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """Constraint violations that no data-access function translated itself."""
    logger.error(f"Integrity error on {request.url}: {exc.orig}")
    return JSONResponse(
        status_code=409,
        content={
            "detail": "The request conflicts with existing data",
            "error_code": DATABASE_INTEGRITY_ERROR,
        },
    )

async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.url}: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred. Please try again later.",
            "error_code": INTERNAL_ERROR,
        },
    )
