"""
common.exceptions
~~~~~~~~~~~~~~~~~
Centralised DRF exception handler and custom exception classes.

Every error leaves the API in one envelope::

    {"data": null, "error": {"status": 400, "name": "ValidationError",
                             "message": "...", "details": {}}}

Admin clients read ``error.message`` to show the failure to the user.
"""
import structlog
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = structlog.get_logger(__name__)


class AppError(Exception):
    """Base application error.  Subclass to define domain-specific errors."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    name: str = "ApplicationError"
    default_detail: str = "An error occurred."

    def __init__(self, detail: str | None = None, details: dict | None = None) -> None:
        self.detail = detail or self.default_detail
        self.details = details or {}
        super().__init__(self.detail)

    def __str__(self) -> str:
        return self.detail


class ServiceUnavailableError(AppError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    name = "ServiceUnavailableError"
    default_detail = "The service is not available."


class BadGatewayError(AppError):
    status_code = status.HTTP_502_BAD_GATEWAY
    name = "BadGatewayError"
    default_detail = "An upstream service failed."


#: Error names for responses produced by DRF itself, keyed by HTTP status.
STATUS_ERROR_NAMES: dict[int, str] = {
    status.HTTP_400_BAD_REQUEST: "ValidationError",
    status.HTTP_401_UNAUTHORIZED: "UnauthorizedError",
    status.HTTP_403_FORBIDDEN: "ForbiddenError",
    status.HTTP_404_NOT_FOUND: "NotFoundError",
    status.HTTP_405_METHOD_NOT_ALLOWED: "MethodNotAllowedError",
    status.HTTP_415_UNSUPPORTED_MEDIA_TYPE: "UnsupportedMediaTypeError",
    status.HTTP_429_TOO_MANY_REQUESTS: "RateLimitError",
}


def error_envelope(status_code: int, name: str, message: str, details=None) -> dict:
    """Build the JSON body shared by every error response."""
    return {
        "data": None,
        "error": {
            "status": status_code,
            "name": name,
            "message": message,
            "details": details if details is not None else {},
        },
    }


def _first_message(detail) -> str:
    """Flatten a DRF ``detail`` payload down to its first human-readable message."""
    if isinstance(detail, dict):
        if "detail" in detail:
            return _first_message(detail["detail"])
        for value in detail.values():
            return _first_message(value)
        return ""
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else ""
    return str(detail)


def custom_exception_handler(exc: Exception, context: dict) -> Response | None:
    """
    Global DRF exception handler.
    Converts AppError subclasses and standard DRF exceptions to the shared
    error envelope.  Anything DRF does not recognise is logged and left to
    Django's 500 handling.
    """
    if isinstance(exc, AppError):
        logger.warning(
            "app_error",
            error_name=exc.name,
            detail=exc.detail,
            status_code=exc.status_code,
        )
        return Response(
            error_envelope(exc.status_code, exc.name, exc.detail, exc.details),
            status=exc.status_code,
        )

    response = drf_exception_handler(exc, context)
    if response is None:
        logger.exception("unhandled_exception", exc_info=exc)
        return None

    logger.warning(
        "drf_error",
        detail=response.data,
        status_code=response.status_code,
    )
    details = response.data if isinstance(response.data, dict) and "detail" not in response.data else {}
    response.data = error_envelope(
        response.status_code,
        STATUS_ERROR_NAMES.get(response.status_code, "ApplicationError"),
        _first_message(response.data),
        details,
    )
    return response
