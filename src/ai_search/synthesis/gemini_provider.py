import httpx

from .base import SynthesisError, SynthesisProvider
from .prompts import build_single_prompt


class GeminiProvider(SynthesisProvider):
    """Gemini generateContent endpoint; a single user turn, no system message."""

    name = "Google Gemini"
    base_url = "https://generativelanguage.googleapis.com/v1beta/models"

    def __init__(self, api_key: str, model_name: str = "gemini-2.0-flash", **kwargs):
        super().__init__(api_key, model_name, **kwargs)

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/{self.model_name}:generateContent"

    async def _generate(
        self, client: httpx.AsyncClient, query: str, excerpts: list[str]
    ) -> str:
        response = await client.post(
            self.endpoint,
            params={"key": self.api_key},
            json={
                "contents": [
                    {
                        "role": "user",
                        "parts": [{"text": build_single_prompt(query, excerpts)}],
                    }
                ],
                "generationConfig": {"maxOutputTokens": self.max_output_tokens},
            },
            headers={"Content-Type": "application/json"},
        )
        response.raise_for_status()
        data = response.json()

        try:
            text = data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError) as e:
            raise SynthesisError(f"unexpected response shape: {e!r}") from e
        if not isinstance(text, str):
            raise SynthesisError("candidate text is not text")
        return text
