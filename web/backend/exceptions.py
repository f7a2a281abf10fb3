#!/usr/bin/env python3
"""
Custom exceptions and error handlers for the web application.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse

from core.scorer.exceptions import (
    ScoringError,
    InvalidProfileError,
    InvalidWeightsError,
    RankingCancelledError,
)

logger = logging.getLogger(__name__)


class ServiceException(Exception):
    """Base exception for service layer errors."""
    pass


class InvalidWeightsException(ServiceException):
    """Raised when a weight update breaks the weight invariants."""
    pass


class PresetNotFoundException(ServiceException):
    """Raised when a weight preset does not exist."""
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
    logger.error(f"Service error in {request.url.path}: {exc}")

    status_code = 500
    if isinstance(exc, PresetNotFoundException):
        status_code = 404
    elif isinstance(exc, InvalidWeightsException):
        status_code = 400

    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": str(exc),
            "type": exc.__class__.__name__
        }
    )


async def scoring_exception_handler(
    request: Request,
    exc: ScoringError
) -> JSONResponse:
    """
    Handle errors raised by the compatibility engine.

    Args:
        request: The FastAPI request.
        exc: The engine error.

    Returns:
        JSONResponse with error details.
    """
    logger.warning(f"Scoring error in {request.url.path}: {exc}")

    status_code = 500
    if isinstance(exc, InvalidWeightsError):
        status_code = 400
    elif isinstance(exc, InvalidProfileError):
        status_code = 422
    elif isinstance(exc, RankingCancelledError):
        status_code = 409

    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": exc.message,
            "type": exc.__class__.__name__,
            "details": exc.details
        }
    )


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """
    Handle FastAPI HTTP exceptions with consistent format.

    Args:
        request: The FastAPI request.
        exc: The HTTP exception.

    Returns:
        JSONResponse with error details.
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

    Args:
        request: The FastAPI request.
        exc: The exception.

    Returns:
        JSONResponse with error details.
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
