"""
AI Search Package

Searches the web for a query, extracts text from each result page and
synthesizes a new answer from it with a language-model provider.
"""

from ai_search.logger import setup_logging
from ai_search.orchestrator import PipelineState, SearchOrchestrator

__version__ = "1.0.0"
__all__ = ["PipelineState", "SearchOrchestrator", "setup_logging"]
