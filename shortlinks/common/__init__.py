"""Common utilities for the short link service."""

from .validators import normalize_url, is_valid_url, is_valid_long_url, is_valid_short_code
from .headers import extract_forwarded_headers, build_base_url
from .url_builder import build_short_url
from .logging_config import setup_logging, get_logger
from .timestamps import format_timestamp, utc_now

__all__ = [
    "normalize_url",
    "is_valid_url",
    "is_valid_long_url",
    "is_valid_short_code",
    "extract_forwarded_headers",
    "build_base_url",
    "build_short_url",
    "setup_logging",
    "get_logger",
    "format_timestamp",
    "utc_now",
]
