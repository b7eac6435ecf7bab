"""
Error Handlers
Custom exception handlers for FastAPI.
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from ..services.errors import MutationError, StagingError, SubmissionError, UploadError

logger = logging.getLogger(__name__)

# HTTP status for each add-product failure class
SUBMISSION_ERROR_STATUS = {
    StagingError: status.HTTP_400_BAD_REQUEST,
    UploadError: status.HTTP_502_BAD_GATEWAY,
    MutationError: status.HTTP_400_BAD_REQUEST,
}


def submission_error_status(exc: SubmissionError) -> int:
    """HTTP status code for an add-product failure."""
    for error_type, status_code in SUBMISSION_ERROR_STATUS.items():
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _error_body(message: str, error_type: str, details=None) -> dict:
    body = {"message": message, "type": error_type}
    if details is not None:
        body["details"] = details
    return {"error": body}


def setup_error_handlers(app: FastAPI) -> None:
    """
    Set up custom error handlers for the FastAPI app.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(SubmissionError)
    async def submission_error_handler(request: Request, exc: SubmissionError):
        """Handle add-product failures raised outside the workflow."""
        status_code = submission_error_status(exc)
        logger.warning(
            f"Submission error: {exc.message}",
            extra={"status_code": status_code, "path": request.url.path},
        )

        return JSONResponse(
            status_code=status_code,
            content=_error_body(exc.message, exc.__class__.__name__, exc.details),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Handle request validation errors."""
        logger.warning(f"Validation error: {exc}", extra={"path": request.url.path})

        # Convert error details to JSON-serializable format
        errors = []
        for error in exc.errors():
            errors.append(
                {
                    "loc": error.get("loc", []),
                    "msg": str(error.get("msg", "")),
                    "type": error.get("type", ""),
                }
            )

        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=_error_body("Request validation failed", "ValidationError", errors),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.error(f"Unexpected error: {exc}", exc_info=True, extra={"path": request.url.path})

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body("An unexpected error occurred", "InternalServerError"),
        )
