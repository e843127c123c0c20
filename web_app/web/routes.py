"""Root-level routes: liveness text and short code redirects."""

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from ..responses import redirect_to_long_url

router = APIRouter()

LIVENESS_MESSAGE = "Short URL Service is running!"


@router.get("/", response_class=PlainTextResponse, include_in_schema=False)
async def liveness():
    return LIVENESS_MESSAGE


@router.get("/{short_code}", include_in_schema=False)
async def redirect_to_url(request: Request, short_code: str):
    """Redirect to the long URL (302), or 404 if absent or expired."""
    return await redirect_to_long_url(request.app.state.service, short_code)
