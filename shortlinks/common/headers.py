"""Header parsing utilities."""

from typing import Dict, Optional


def extract_forwarded_headers(headers: Dict[str, str]) -> Dict[str, Optional[str]]:
    """Extract X-Forwarded-* headers from request.
    
    Args:
        headers: Request headers dictionary
        
    Returns:
        Dictionary with forwarded_proto, forwarded_host, forwarded_for
    """
    headers_lower = {k.lower(): v for k, v in headers.items()}
    
    return {
        "forwarded_proto": headers_lower.get("x-forwarded-proto"),
        "forwarded_host": headers_lower.get("x-forwarded-host"),
        "forwarded_for": headers_lower.get("x-forwarded-for"),
    }


def build_base_url(headers: Dict[str, str], fallback_base_url: str) -> str:
    """Pick the public base URL for short links.
    
    X-Forwarded-Proto together with X-Forwarded-Host (set by a reverse proxy)
    win over the configured base URL.
    
    Args:
        headers: Request headers
        fallback_base_url: Base URL from configuration
        
    Returns:
        Base URL without trailing slash (e.g., https://example.com)
    """
    forwarded = extract_forwarded_headers(headers)
    
    if forwarded["forwarded_proto"] and forwarded["forwarded_host"]:
        return f"{forwarded['forwarded_proto']}://{forwarded['forwarded_host']}"
    
    return fallback_base_url.rstrip("/")
