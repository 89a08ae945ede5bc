import logging
from fastapi import Request, responses, exceptions
from pydantic import ValidationError
from typing import Union
from error import ServerError
from util.validation import collect_violations

logger = logging.getLogger(__name__)


def validation_error_handler(
    request: Request, exec: Union[ValidationError, exceptions.RequestValidationError]
) -> responses.JSONResponse:
    """Validation Error Handler

    Reports every field that failed pydantic validation, not just the first,
    as ``{"errors": [{"field", "message"}, ...]}``
    """
    violations = collect_violations(exec.errors())
    return responses.JSONResponse(
        status_code=422,
        content={"errors": [v.model_dump() for v in violations]},
    )


def validation_http_exceptions_handler(
    request: Request, exec: exceptions.HTTPException
) -> responses.JSONResponse:
    """Handler for http exceptions"""
    return responses.JSONResponse(
        status_code=exec.status_code,
        content={"error": exec.detail},
        headers=getattr(exec, "headers", None),
    )


def server_error_handler(request: Request, exec: ServerError) -> responses.JSONResponse:
    """Server error handler"""
    if exec.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exec.msg}")
    return responses.JSONResponse(
        status_code=exec.status_code,
        content={"error": str(exec.msg)}
    )
