import logging
from abc import ABC, abstractmethod

import httpx

logger = logging.getLogger(__name__)

SYNTHESIS_ERROR = "Error generating summary."


class SynthesisError(Exception):
    """Provider answered, but not with a usable completion."""


class SynthesisProvider(ABC):
    """
    Base class for generative text backends.

    Subclasses send one request and return the raw completion text; this class
    owns prompt input, trimming and the failure sentinel, so ``synthesize``
    always returns a non-empty string.
    """

    name: str = ""

    def __init__(
        self,
        api_key: str,
        model_name: str,
        max_output_tokens: int = 250,
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.model_name = model_name
        self.max_output_tokens = max_output_tokens
        self.timeout = timeout
        self.transport = transport

    async def synthesize(self, query: str, excerpts: list[str]) -> str:
        """
        Generate an answer to the query from the excerpts.

        Args:
            query: The user's query
            excerpts: Excerpt strings in search result order

        Returns:
            The trimmed completion, or SYNTHESIS_ERROR if the request failed
            or the response had no text
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                text = await self._generate(client, query, excerpts)
        except httpx.HTTPStatusError as e:
            logger.error(
                f"❌ {self.name} API Error: status {e.response.status_code}: {e.response.text}"
            )
            return SYNTHESIS_ERROR
        except Exception as e:
            logger.error(f"❌ {self.name} API Error: {e}")
            return SYNTHESIS_ERROR

        text = text.strip()
        if not text:
            logger.error(f"❌ {self.name} API Error: empty completion")
            return SYNTHESIS_ERROR
        return text

    @abstractmethod
    async def _generate(
        self, client: httpx.AsyncClient, query: str, excerpts: list[str]
    ) -> str:
        """Send one request and return the completion text.

        Raises SynthesisError when the response body lacks the expected fields.
        """
