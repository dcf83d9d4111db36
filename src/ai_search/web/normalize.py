"""
Excerpt normalization.

Bounds extracted page text so every excerpt handed to synthesis fits the
same size envelope, and substitutes sentinels for missing or failed content.
"""

from ..types import Excerpt

MIN_CONTENT_LENGTH = 100
MAX_EXCERPT_LENGTH = 2000

NO_CONTENT = "No meaningful content found."
FETCH_ERROR = "Error fetching content."


def normalize_excerpt(url: str, text: str | None) -> Excerpt:
    """
    Turn raw paragraph text into a bounded excerpt.

    Args:
        url: The page the text came from
        text: Concatenated paragraph text, possibly empty

    Returns:
        The first MAX_EXCERPT_LENGTH characters when the stripped text is longer
        than MIN_CONTENT_LENGTH, otherwise the NO_CONTENT sentinel
    """
    if text and len(text.strip()) > MIN_CONTENT_LENGTH:
        return {"url": url, "content": text[:MAX_EXCERPT_LENGTH], "status": "ok"}
    return {"url": url, "content": NO_CONTENT, "status": "empty"}


def fetch_error(url: str) -> Excerpt:
    return {"url": url, "content": FETCH_ERROR, "status": "error"}
