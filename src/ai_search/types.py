"""
Common type definitions for the search pipeline.

TypedDict definitions for the values passed between pipeline stages.
"""

from typing import Literal, TypedDict

ExcerptStatus = Literal["ok", "empty", "error"]
RunStatus = Literal["done", "no_results"]


class ResultLocator(TypedDict):
    """Single search result, before its page content is retrieved."""

    title: str
    link: str


class Excerpt(TypedDict):
    """Bounded page text, or a sentinel standing in for it.

    ``content`` is always a non-empty string; ``status`` tells which of the
    three terminal states it holds.
    """

    url: str
    content: str
    status: ExcerptStatus


class SearchRunResult(TypedDict):
    """Outcome of one pipeline run."""

    query: str
    status: RunStatus
    results: list[ResultLocator]
    excerpts: list[Excerpt]
    summary: str
    fetch_library: str
    model: str
