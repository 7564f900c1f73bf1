"""Rendering of application errors as API responses."""

from __future__ import annotations

from litestar import Request, Response

from photofeed.api.schemas.auth import ErrorResponse
from photofeed.core.exceptions import PhotofeedError


def error_response(exc: PhotofeedError) -> Response[ErrorResponse]:
    """Build the response for an application error."""
    return Response(
        content=ErrorResponse(error=exc.kind.value, error_description=exc.message),
        status_code=exc.status_code,
    )


def photofeed_error_handler(_: Request, exc: PhotofeedError) -> Response[ErrorResponse]:
    """Exception handler for errors escaping guards and handlers."""
    return error_response(exc)
