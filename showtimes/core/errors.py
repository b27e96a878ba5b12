"""Exception types and handlers."""

from __future__ import annotations

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger("showtimes.errors")


class SkillRequestError(Exception):
    """A request the skill refuses to handle."""


class InvalidApplicationIdError(SkillRequestError):
    """The request was issued for a different application."""


class UnsupportedRequestError(SkillRequestError):
    """Unknown request type or intent name."""


class MalformedRequestError(SkillRequestError):
    """The request envelope failed validation."""


async def skill_request_error_handler(request: Request, exc: SkillRequestError) -> JSONResponse:
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=400,
        content={
            "error": "invalid_request",
            "message": str(exc),
        },
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:  # noqa: D401
    """Return a generic JSON error response while logging the exception."""

    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_error",
            "message": "Something unexpected happened. Please try again later.",
        },
    )
