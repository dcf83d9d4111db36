"""
Synthesis Package

Generative text backends that turn a query and its excerpts into one answer.
"""

from .base import SYNTHESIS_ERROR, SynthesisError, SynthesisProvider
from .gemini_provider import GeminiProvider
from .openai_provider import OpenAIProvider

__all__ = [
    "SYNTHESIS_ERROR",
    "SynthesisError",
    "SynthesisProvider",
    "GeminiProvider",
    "OpenAIProvider",
]
