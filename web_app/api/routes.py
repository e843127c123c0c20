"""API routes implementation."""

import re

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from datetime import datetime, timezone

from .schemas import (
    ApiResponse,
    HealthResponse,
    ShortenRequest,
    ShortenResponse,
    ShortUrlResponse,
    UserUrlsResponse,
)
from ..responses import error_response, redirect_to_long_url
from shortlinks.common.headers import build_base_url
from shortlinks.errors import StorageError

router = APIRouter()

LINK_ID_PATTERN = re.compile(r"-?[0-9]+")


def _base_url(request: Request) -> str:
    config = request.app.state.config
    return build_base_url(headers=dict(request.headers), fallback_base_url=config.base_url)


@router.post(
    "/shorten",
    response_model=ShortenResponse,
    responses={
        400: {"model": ApiResponse, "description": "Invalid URL or short code already exists"},
        500: {"model": ApiResponse, "description": "Internal server error"},
    },
    summary="Create short URL",
    description="Create a shortened URL. Optionally provide a custom short code and a timeout in seconds.",
)
async def shorten_url(request: Request, body: ShortenRequest):
    """Create a shortened URL."""
    service = request.app.state.service
    config = request.app.state.config
    
    try:
        link = await service.create_short_url(
            long_url=body.long_url,
            user_id=body.user_id,
            custom_code=body.custom_code,
            timeout=body.timeout,
        )
    except ValueError as e:
        return error_response(status.HTTP_400_BAD_REQUEST, str(e))
    except StorageError as e:
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))
    
    return ShortenResponse(
        success=True,
        message="Short URL created successfully",
        data=ShortUrlResponse.from_link(link, _base_url(request), config.path_prefix),
    )


@router.get(
    "/urls/{user_id}",
    response_model=UserUrlsResponse,
    responses={
        500: {"model": ApiResponse, "description": "Internal server error"},
    },
    summary="List a user's URLs",
    description="List every short URL owned by the user, newest first. Expired links are included.",
)
async def get_user_urls(request: Request, user_id: str):
    """List the short URLs owned by a user."""
    service = request.app.state.service
    config = request.app.state.config
    
    try:
        links = await service.list_user_urls(user_id)
    except StorageError as e:
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))
    
    base_url = _base_url(request)
    return UserUrlsResponse(
        success=True,
        message="URLs retrieved successfully",
        data=[ShortUrlResponse.from_link(link, base_url, config.path_prefix) for link in links],
    )


@router.delete(
    "/urls/{link_id}/{user_id}",
    response_model=ApiResponse,
    responses={
        404: {"model": ApiResponse, "description": "URL not found or not owned by user"},
        500: {"model": ApiResponse, "description": "Internal server error"},
    },
    summary="Delete short URL",
    description="Delete a short URL. Only the owning user can delete it.",
)
async def delete_short_url(request: Request, link_id: str, user_id: str):
    """Delete a short URL owned by the user.

    An id that is not an integer cannot match any row, so it gets the same
    404 as an unknown id.
    """
    service = request.app.state.service
    
    if not LINK_ID_PATTERN.fullmatch(link_id):
        return error_response(status.HTTP_404_NOT_FOUND, "URL not found or not owned by user")
    
    try:
        deleted = await service.delete_short_url(int(link_id), user_id)
    except StorageError as e:
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))
    
    if not deleted:
        return error_response(status.HTTP_404_NOT_FOUND, "URL not found or not owned by user")
    
    return ApiResponse(success=True, message="URL deleted successfully")


@router.get(
    "/qrcode/{short_code}",
    responses={
        302: {"description": "Redirect to the long URL"},
        404: {"description": "Short code not found or expired"},
    },
    summary="QR code redirect",
    description="Target for QR codes; redirects exactly like /{short_code}.",
)
async def qrcode_redirect(request: Request, short_code: str):
    """Redirect a scanned QR code to the long URL."""
    return await redirect_to_long_url(request.app.state.service, short_code)


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={
        503: {"model": HealthResponse, "description": "Service unhealthy"},
    },
    summary="Health check",
    description="Check if the service and its database are healthy.",
)
async def health_check(request: Request):
    """Health check endpoint for load balancers and monitoring."""
    service = request.app.state.service
    
    health = await service.health_check()
    
    body = HealthResponse(
        status="healthy" if health["overall"] else "unhealthy",
        database="healthy" if health["database"] else "unhealthy",
        timestamp=datetime.now(timezone.utc),
    )
    if not health["overall"]:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=body.model_dump(mode="json"),
        )
    return body
