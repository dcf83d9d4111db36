import httpx

from .base import SynthesisError, SynthesisProvider
from .prompts import SYSTEM_PROMPT, build_chat_prompt


class OpenAIProvider(SynthesisProvider):
    """Chat completions endpoint; one request with a capped response length."""

    name = "OpenAI"
    endpoint = "https://api.openai.com/v1/chat/completions"

    def __init__(self, api_key: str, model_name: str = "gpt-4-turbo", **kwargs):
        super().__init__(api_key, model_name, **kwargs)

    async def _generate(
        self, client: httpx.AsyncClient, query: str, excerpts: list[str]
    ) -> str:
        messages = [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": build_chat_prompt(query, excerpts)},
        ]
        response = await client.post(
            self.endpoint,
            json={
                "model": self.model_name,
                "messages": messages,
                "max_tokens": self.max_output_tokens,
            },
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Content-Type": "application/json",
            },
        )
        response.raise_for_status()
        data = response.json()

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise SynthesisError(f"unexpected response shape: {e!r}") from e
        if not isinstance(content, str):
            raise SynthesisError("completion content is not text")
        return content
