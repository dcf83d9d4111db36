"""
Provider Factory

Binds the configured fetch strategy and synthesis provider once at startup.
"""

from enum import Enum

from .search import GoogleSearchProvider, SearchProvider
from .settings import Settings
from .synthesis import GeminiProvider, OpenAIProvider, SynthesisProvider
from .web import ContentFetcher, LightweightFetcher, RenderedFetcher


class FetchStrategy(str, Enum):
    LIGHTWEIGHT = "lightweight"
    RENDERED = "rendered"


class SynthesisBackend(str, Enum):
    OPENAI = "openai"
    GEMINI = "gemini"


class ProviderFactory:
    """Factory for creating pipeline components based on configuration."""

    @staticmethod
    def create_search_provider(settings: Settings) -> SearchProvider:
        return GoogleSearchProvider(
            api_key=settings.google_api_key,
            cx=settings.google_cx,
            timeout=settings.search_timeout,
        )

    @staticmethod
    def create_fetcher(settings: Settings) -> ContentFetcher:
        """
        Create the content fetcher for the configured strategy.

        Raises:
            ValueError: If the strategy name is not supported
        """
        strategy = FetchStrategy(settings.fetch_library)
        if strategy is FetchStrategy.RENDERED:
            return RenderedFetcher(timeout=settings.rendered_timeout)
        return LightweightFetcher(timeout=settings.lightweight_timeout)

    @staticmethod
    def create_synthesizer(settings: Settings) -> SynthesisProvider:
        """
        Create the synthesis provider for the configured backend.

        Raises:
            ValueError: If the backend name is not supported
        """
        backend = SynthesisBackend(settings.summary_model)
        if backend is SynthesisBackend.GEMINI:
            return GeminiProvider(
                settings.gemini_api_key,
                settings.gemini_model,
                max_output_tokens=settings.max_output_tokens,
            )
        return OpenAIProvider(
            settings.openai_api_key,
            settings.openai_model,
            max_output_tokens=settings.max_output_tokens,
        )

    @staticmethod
    def get_supported_providers() -> dict[str, list[str]]:
        return {
            "fetch_library": [s.value for s in FetchStrategy],
            "model": [b.value for b in SynthesisBackend],
        }
