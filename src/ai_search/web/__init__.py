"""
Web content package

Page fetch strategies and excerpt normalization.
"""

from .content_fetcher import ContentFetcher, LightweightFetcher, RenderedFetcher
from .normalize import FETCH_ERROR, NO_CONTENT, fetch_error, normalize_excerpt

__all__ = [
    "ContentFetcher",
    "LightweightFetcher",
    "RenderedFetcher",
    "FETCH_ERROR",
    "NO_CONTENT",
    "fetch_error",
    "normalize_excerpt",
]
