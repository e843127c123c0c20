"""JSON API under /api."""

from .routes import router as api_router

__all__ = ["api_router"]
