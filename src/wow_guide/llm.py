import logging
from dataclasses import dataclass

import httpx

from wow_guide.config import Settings
from wow_guide.exceptions import ConfigurationError, GenerationError
from wow_guide.types import ChatCompletion, ChatCompletionRequest

log = logging.getLogger(__name__)


def _extract_content(data: ChatCompletion) -> str:
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return ""
    if not isinstance(content, str):
        return ""
    return content.strip()


@dataclass(frozen=True)
class GuideGenerator:
    """Single-shot client for an OpenAI-compatible chat-completions endpoint.

    Built once at startup and shared read-only between requests. Each call is
    one POST with a bounded timeout; failures are not retried.
    """

    api_key: str
    api_url: str
    model: str
    timeout: float = 30.0
    temperature: float = 0.3
    top_p: float = 0.9
    max_tokens: int = 1024

    @classmethod
    def from_settings(cls, settings: Settings) -> "GuideGenerator":
        if not settings.api_key:
            raise ConfigurationError(
                "API key not configured. Set the WOW_GUIDE_API_KEY environment variable."
            )
        return cls(
            api_key=settings.api_key,
            api_url=settings.api_url,
            model=settings.model,
            timeout=settings.api_timeout,
            temperature=settings.temperature,
            top_p=settings.top_p,
            max_tokens=settings.max_tokens,
        )

    def _payload(self, prompt: str) -> ChatCompletionRequest:
        return {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self.temperature,
            "top_p": self.top_p,
            "max_tokens": self.max_tokens,
        }

    def generate(self, prompt: str) -> str:
        log.info("Requesting guide from %s (model=%s)", self.api_url, self.model)
        try:
            response = httpx.post(
                self.api_url,
                json=self._payload(prompt),
                headers={"Authorization": f"Bearer {self.api_key}"},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise GenerationError(
                f"AI API error: HTTP {e.response.status_code} - {e.response.text}"
            ) from e
        except httpx.RequestError as e:
            raise GenerationError(f"Network error calling AI API: {e}") from e

        try:
            data: ChatCompletion = response.json()
        except (ValueError, TypeError) as e:
            raise GenerationError("Invalid JSON response from AI API") from e

        guide = _extract_content(data)
        if not guide:
            raise GenerationError("Empty response from AI model")
        return guide
