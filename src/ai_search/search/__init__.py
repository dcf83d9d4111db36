"""
Search Package

Provides web search result lookup for the pipeline.
"""

from .web_search import GoogleSearchProvider, SearchProvider

__all__ = ["GoogleSearchProvider", "SearchProvider"]
