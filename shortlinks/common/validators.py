"""Validation and normalization utilities for short links."""

import ipaddress
import re
from urllib.parse import urlparse
from typing import Tuple


SCHEME_SEPARATOR = "://"
DEFAULT_SCHEME = "http"
MAX_SHORT_CODE_LENGTH = 64

_SHORT_CODE_RE = re.compile(r'^[A-Za-z0-9_-]+$')


def normalize_url(url: str) -> str:
    """Prefix scheme-less input with ``http://``.
    
    Input that already carries a scheme separator is returned unchanged,
    whatever the scheme.
    
    Args:
        url: Raw URL as supplied by the caller
        
    Returns:
        Normalized URL
    """
    if SCHEME_SEPARATOR in url:
        return url
    return f"{DEFAULT_SCHEME}{SCHEME_SEPARATOR}{url}"


def _is_resolvable_host(host: str) -> bool:
    """Accept localhost, IP literals and dotted domain names."""
    if host == "localhost":
        return True
    
    try:
        ipaddress.ip_address(host)
        return True
    except ValueError:
        pass
    
    labels = host.rstrip(".").split(".")
    if len(labels) < 2:
        return False
    return all(label and not any(c.isspace() for c in label) for label in labels)


def is_valid_url(url: str) -> bool:
    """Validate an absolute URL.
    
    The string must contain ``://``, parse with a non-empty scheme and carry a
    resolvable host. Strings without the separator are rejected before
    parsing, since ``urlparse`` happily treats them as relative paths.
    
    Args:
        url: The URL to validate
        
    Returns:
        True if valid
    """
    if not url or not isinstance(url, str):
        return False
    
    if SCHEME_SEPARATOR not in url:
        return False
    
    try:
        result = urlparse(url)
        hostname = result.hostname
    except ValueError:
        return False
    
    if not result.scheme or not hostname:
        return False
    
    return _is_resolvable_host(hostname)


def is_valid_long_url(url: str) -> bool:
    """Validate a long URL in its raw or normalized form."""
    return is_valid_url(url) or is_valid_url(normalize_url(url))


def is_valid_short_code(short_code: str, max_length: int = MAX_SHORT_CODE_LENGTH) -> Tuple[bool, str]:
    """Validate a custom short code.
    
    Args:
        short_code: The short code to validate
        max_length: Maximum length for short code
        
    Returns:
        Tuple of (is_valid, error_message)
    """
    if not short_code or not isinstance(short_code, str):
        return False, "Short code is required"
    
    if len(short_code) > max_length:
        return False, f"Short code must be at most {max_length} characters"
    
    # Codes end up as a single path segment
    if not _SHORT_CODE_RE.match(short_code):
        return False, "Short code can only contain letters, numbers, hyphens, and underscores"
    
    return True, ""
