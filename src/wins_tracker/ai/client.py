"""Chat completion client for generating review artifacts.

Talks to OpenRouter through the OpenAI-compatible API and collects the
streamed response into a single string.
"""

from __future__ import annotations

from typing import Any

from openai import AsyncOpenAI

from wins_tracker.config import AIConfig, get_settings
from wins_tracker.errors import ConfigurationError
from wins_tracker.logging import get_logger

logger = get_logger(__name__)


class CompletionClient:
    """Async streaming chat completion client.

    Usage:
        async with CompletionClient(config.openrouter_api_key) as client:
            text = await client.generate(SUMMARY_PROMPT, context)
    """

    def __init__(self, api_key: str | None, ai_config: AIConfig | None = None) -> None:
        """Initialize the completion client.

        Args:
            api_key: OpenRouter API key
            ai_config: Model and endpoint settings. Defaults to Settings.ai.

        Raises:
            ConfigurationError: If no API key is available.
        """
        if not api_key:
            raise ConfigurationError(
                "OpenRouter API key not configured. "
                "Run: wins config set openrouter_api_key <key>"
            )
        self._api_key = api_key
        self._config = ai_config or get_settings().ai
        self._client: AsyncOpenAI | None = None

    @property
    def _openai(self) -> AsyncOpenAI:
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self._api_key, base_url=self._config.base_url)
        return self._client

    @property
    def model(self) -> str:
        return self._config.model

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            await self._client.close()
            self._client = None

    async def __aenter__(self) -> CompletionClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        await self.close()

    async def generate(self, system_prompt: str, user_content: str) -> str:
        """Run one chat completion and return the concatenated streamed text."""
        logger.debug(
            "Requesting completion from {} ({} chars context)", self.model, len(user_content)
        )
        stream = await self._openai.chat.completions.create(
            model=self.model,
            max_tokens=self._config.max_tokens,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_content},
            ],
            stream=True,
        )

        parts: list[str] = []
        chunk: Any
        async for chunk in stream:
            if chunk.choices and chunk.choices[0].delta.content:
                parts.append(chunk.choices[0].delta.content)
        return "".join(parts)
