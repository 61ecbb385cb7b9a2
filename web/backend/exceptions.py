#!/usr/bin/env python3
"""
Custom exceptions and error handlers for the web application.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.matcher.errors import MatchingError, ProfileValidationError

logger = logging.getLogger(__name__)


class ServiceException(Exception):
    """Base exception for service layer errors."""
    pass


class ResidenceNotFoundException(ServiceException):
    """Raised when a residence is unknown or inactive."""
    pass


class InvalidRequestException(ServiceException):
    """Raised when a request body fails business validation."""
    pass


class ContactSubmissionException(ServiceException):
    """Raised when contact records could not be created."""
    pass


async def service_exception_handler(
    request: Request,
    exc: ServiceException
) -> JSONResponse:
    """
    Handle service layer exceptions.

    Args:
        request: The FastAPI request.
        exc: The service exception.

    Returns:
        JSONResponse with error details.
    """
    status_code = 500
    if isinstance(exc, ResidenceNotFoundException):
        status_code = 404
    elif isinstance(exc, InvalidRequestException):
        status_code = 400

    if status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.info(f"Rejected request to {request.url.path}: {exc}")

    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": str(exc),
            "type": exc.__class__.__name__
        }
    )


async def matching_exception_handler(
    request: Request,
    exc: MatchingError
) -> JSONResponse:
    """
    Map matching failures to HTTP status at the boundary.

    Invalid profiles are the caller's fault (400); repository failures are
    ours (500) and never come with partial results.
    """
    if isinstance(exc, ProfileValidationError):
        status_code = 400
        logger.info(f"Invalid profile on {request.url.path}: {exc}")
    else:
        status_code = 500
        logger.error(f"Matching failed on {request.url.path}: {exc}")

    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": str(exc),
            "type": exc.__class__.__name__,
            "code": exc.code.value
        }
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Malformed request bodies are reported as 400 with the field errors."""
    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "error": [
                {"loc": list(err.get("loc", [])), "msg": err.get("msg")}
                for err in exc.errors()
            ],
            "type": "ValidationError"
        }
    )


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """
    Handle FastAPI HTTP exceptions with consistent format.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": exc.detail,
            "type": "HTTPException"
        }
    )


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions.
    """
    logger.exception(f"Unexpected error in {request.url.path}")

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
            "type": "InternalError"
        }
    )
