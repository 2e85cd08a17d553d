"""
Langdock Translation Engine
General-purpose AI translation through Langdock's OpenAI-compatible chat API.
"""

import logging
from typing import Optional

import httpx

from .base import TranslationEngine, TranslationResult

logger = logging.getLogger(__name__)


PROMPT_TEMPLATE = 'Translate the following English text to {target_language}: "{text}"'


class LangdockEngine(TranslationEngine):
    """
    Fallback translator used when the glossary has no confident match.

    Returns the model output as-is; cleanup of quotes and whitespace is
    left to the caller.
    """

    def __init__(
        self,
        api_key: str,
        api_url: str = "https://api.langdock.com/v1/chat/completions",
        model: str = "gpt-4",
        max_tokens: int = 150,
        temperature: float = 0.3,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.api_url = api_url
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.timeout = httpx.Timeout(timeout)
        self._transport = transport

    @property
    def name(self) -> str:
        return f"Langdock ({self.model})"

    @property
    def engine_id(self) -> str:
        return f"langdock_{self.model}"

    def is_available(self) -> bool:
        return bool(self.api_key)

    def build_payload(self, text: str, target_language: str) -> dict:
        return {
            "model": self.model,
            "messages": [
                {
                    "role": "user",
                    "content": PROMPT_TEMPLATE.format(target_language=target_language, text=text),
                }
            ],
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
        }

    def _failure(self, target_language: str, error: str, status_code: Optional[int] = None) -> TranslationResult:
        return TranslationResult(
            translated_text="",
            target_language=target_language,
            engine=self.engine_id,
            success=False,
            status_code=status_code,
            error=error,
        )

    async def translate(self, text: str, target_language: str) -> TranslationResult:
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(
                    self.api_url,
                    json=self.build_payload(text, target_language),
                    headers=headers,
                )
        except httpx.HTTPError as e:
            logger.error("Langdock request failed: %s", e)
            return self._failure(target_language, f"Langdock request failed: {e}")

        if response.status_code != 200:
            return self._failure(
                target_language,
                f"Langdock API error: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError):
            content = None

        if not isinstance(content, str) or not content.strip():
            return self._failure(
                target_language,
                "Langdock returned no translation",
                status_code=response.status_code,
            )

        return TranslationResult(
            translated_text=content,
            target_language=target_language,
            engine=self.engine_id,
            status_code=response.status_code,
            metadata={"model": data.get("model", self.model), "usage": data.get("usage")},
        )

    def get_info(self) -> dict:
        """Get engine information"""
        info = super().get_info()
        info.update({
            "model": self.model,
            "offline": False,
        })
        return info
