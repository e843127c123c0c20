"""Shared response helpers for the API and web routers."""

import logging

from fastapi import status
from fastapi.responses import JSONResponse, PlainTextResponse, RedirectResponse, Response

from shortlinks.errors import StorageError

from .api.schemas import ApiResponse


logger = logging.getLogger("shortlinks.web")


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build a ``{success: false, message}`` JSON error."""
    return JSONResponse(
        status_code=status_code,
        content=ApiResponse(success=False, message=message).model_dump(),
    )


async def redirect_to_long_url(service, short_code: str) -> Response:
    """302 to the live long URL, 404 when absent or expired, 500 on storage failure."""
    try:
        long_url = await service.get_long_url(short_code)
    except StorageError as e:
        logger.error(f"Redirect lookup failed for {short_code}: {e}")
        return PlainTextResponse(
            "Internal server error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    
    if long_url is None:
        return PlainTextResponse(
            "Short URL not found or expired",
            status_code=status.HTTP_404_NOT_FOUND,
        )
    
    return RedirectResponse(url=long_url, status_code=status.HTTP_302_FOUND)
