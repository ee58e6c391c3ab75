"""Centralized exception handlers for the FastAPI applications.

Domain exceptions are mapped to HTTP responses with a consistent
error format.

Error Response Format:
    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }

Usage:
    from payid.presentation.api.exception_handlers import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from payid.domain.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Error Code to HTTP Status Mapping
# =============================================================================

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # 400 Bad Request - malformed requests
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PAY_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MISSING_ACCEPT_HEADER: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_ACCEPT_HEADER: status.HTTP_400_BAD_REQUEST,
    # 404 Not Found
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PAYMENT_INFORMATION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    # 503 Service Unavailable - address store errors
    ErrorCode.ADDRESS_LOOKUP_FAILED: status.HTTP_503_SERVICE_UNAVAILABLE,
    # 500 Internal Server Error
    ErrorCode.UNKNOWN_ADDRESS_DETAILS_TYPE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.INVALID_ADDRESS_DETAILS: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _get_status_for_exception(exc: DomainException) -> int:
    """Determine HTTP status code for a domain exception.

    Uses the error code mapping, with fallback based on exception type.
    """
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]

    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST

    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": message,
            "code": code,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle all domain exceptions with structured response.

        Client errors are logged at warning level, server-side failures
        at error level with the full details.
        """
        status_code = _get_status_for_exception(exc)

        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                "Domain error on %s %s: %s (code=%s, details=%s)",
                request.method,
                request.url.path,
                exc.message,
                exc.code.value,
                exc.details,
            )
        else:
            logger.warning(
                "Domain exception on %s %s: %s (code=%s, details=%s)",
                request.method,
                request.url.path,
                exc.message,
                exc.code.value,
                exc.details,
            )

        return _create_error_response(
            status_code=status_code,
            message=exc.message,
            code=exc.code.value,
        )
