"""Custom exceptions and error handlers"""
from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from sqlalchemy.exc import IntegrityError
import traceback
from app.utils.logger import logger


class UserNotFoundError(Exception):
    """Raised when an operation targets a user id with no matching record"""

    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(f"User with ID {user_id} not found")


def error_body(error: str, detail, request: Request) -> dict:
    return {
        "error": error,
        "detail": detail,
        "path": str(request.url.path)
    }


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle validation errors"""
    logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=jsonable_encoder(error_body("Validation Error", exc.errors(), request))
    )


async def not_found_exception_handler(request: Request, exc: UserNotFoundError):
    """Handle lookups of missing users"""
    logger.info(f"Not found on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=error_body("Not Found", str(exc), request)
    )


async def integrity_exception_handler(request: Request, exc: IntegrityError):
    """Handle storage constraint violations (duplicate firstname/lastname)"""
    logger.warning(f"Integrity error on {request.method} {request.url.path}: {exc.orig}")
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content=error_body(
            "Conflict",
            "The request violates a storage constraint (firstname and lastname must be unique).",
            request
        )
    )


async def generic_exception_handler(request: Request, exc: Exception):
    """Handle generic exceptions"""
    logger.error(f"Unhandled exception on {request.url.path}: {str(exc)}\n{traceback.format_exc()}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(
            "Internal Server Error",
            "An unexpected error occurred. Please try again later.",
            request
        )
    )
