"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field
from typing import Any, List, Optional
from datetime import datetime

from shortlinks.common.url_builder import build_short_url
from shortlinks.database.models import ShortLink


class ShortenRequest(BaseModel):
    """Request to shorten a URL."""
    
    long_url: str = Field(..., description="The URL to shorten; http:// is assumed when no scheme is given")
    custom_code: Optional[str] = Field(None, description="Optional custom short code")
    timeout: Optional[int] = Field(None, description="Optional lifetime in seconds")
    user_id: str = Field(..., description="Owner of the link (not authenticated)")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "long_url": "https://example.com/very/long/path/to/resource",
                    "user_id": "u1",
                },
                {
                    "long_url": "github.com/user/repo",
                    "custom_code": "myrepo",
                    "timeout": 3600,
                    "user_id": "u1",
                },
            ]
        }
    }


class ShortUrlResponse(BaseModel):
    """A stored short link as returned to clients."""
    
    id: int
    long_url: str
    short_code: str
    short_url: str = Field(..., description="The complete short URL")
    created_at: str = Field(..., description="RFC3339 creation timestamp")
    expires_at: Optional[str] = Field(None, description="RFC3339 expiration timestamp, null if it never expires")
    
    @classmethod
    def from_link(cls, link: ShortLink, base_url: str, path_prefix: str = "") -> "ShortUrlResponse":
        return cls(
            id=link.id,
            long_url=link.long_url,
            short_code=link.short_code,
            short_url=build_short_url(link.short_code, base_url, path_prefix),
            created_at=link.created_at,
            expires_at=link.expires_at,
        )


class ApiResponse(BaseModel):
    """Envelope shared by every JSON endpoint."""
    
    success: bool
    message: str
    data: Optional[Any] = None


class ShortenResponse(ApiResponse):
    data: Optional[ShortUrlResponse] = None


class UserUrlsResponse(ApiResponse):
    data: List[ShortUrlResponse] = Field(default_factory=list)


class HealthResponse(BaseModel):
    """Health check response."""
    
    status: str = Field(..., description="Overall status")
    database: str = Field(..., description="Database status")
    timestamp: datetime = Field(..., description="Check timestamp")
