"""
Exception to HTTP response mapping

Errors are returned as ``{"error": message}`` bodies.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from findclo.core.exceptions import FindCloException, NotFoundError, ValidationError
from findclo.core.logging import get_logger
from ..exceptions import BillingRunInProgressError, DirtyStagingStateError

logger = get_logger(__name__)

_STATUS_BY_EXCEPTION = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (BillingRunInProgressError, status.HTTP_409_CONFLICT),
    (DirtyStagingStateError, status.HTTP_409_CONFLICT),
)


def status_code_for(exc: FindCloException) -> int:
    for exception_type, status_code in _STATUS_BY_EXCEPTION:
        if isinstance(exc, exception_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def findclo_exception_handler(request: Request, exc: FindCloException):
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error(
            f"Unhandled service error on {request.method} {request.url.path}",
            error=exc.to_dict(),
        )
    else:
        logger.info(
            f"Request rejected on {request.method} {request.url.path}",
            status_code=status_code,
            error_code=exc.error_code,
        )
    return JSONResponse(status_code=status_code, content={"error": exc.message})


def describe_validation_errors(exc: RequestValidationError) -> str:
    """One entry per rejected field, e.g. ``path.bill_id: Input should be a valid integer``"""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts) or "Invalid request"


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
):
    message = describe_validation_errors(exc)
    logger.info(
        f"Request rejected on {request.method} {request.url.path}",
        status_code=status.HTTP_400_BAD_REQUEST,
        error=message,
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"error": message}
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(FindCloException, findclo_exception_handler)
    app.add_exception_handler(
        RequestValidationError, request_validation_exception_handler
    )
