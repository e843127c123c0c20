"""Core business logic for the short link service."""

from .codes import ShortCodeGenerator, generate_short_code, generate_custom_code
from .service import ShortLinkService

__all__ = ["ShortCodeGenerator", "generate_short_code", "generate_custom_code", "ShortLinkService"]
