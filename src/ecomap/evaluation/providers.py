"""Multi-provider LLM support for scoring and analysis.

Supports Gemini (Google), Claude (Anthropic), and GPT (OpenAI).
Each provider implements a common interface: submit a prompt, get text back.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from ..config import get_settings
from .errors import CollaboratorUnavailable

settings = get_settings()
logger = logging.getLogger(__name__)


class LLMProvider(ABC):
    """Abstract base class for LLM providers."""

    provider_name: str

    def __init__(self, model: str, api_key: Optional[str] = None):
        self.model = model
        self.api_key = api_key if api_key is not None else self._configured_key()
        self._client = None

    @abstractmethod
    def _configured_key(self) -> str:
        """API key from settings."""
        pass

    @abstractmethod
    async def _generate(self, system_prompt: str, user_prompt: str) -> str:
        """Make the SDK call and return the raw response text."""
        pass

    async def generate(self, system_prompt: str, user_prompt: str) -> str:
        """
        Make a single generation call.

        Raises:
            CollaboratorUnavailable: no API key, or the SDK call failed
        """
        if not self.api_key:
            raise CollaboratorUnavailable(
                f"API key not configured for provider: {self.provider_name}",
                provider=self.provider_name,
            )

        try:
            text = await self._generate(system_prompt, user_prompt)
        except Exception as e:
            logger.error("%s call failed (model=%s): %s", self.provider_name, self.model, e)
            raise CollaboratorUnavailable(
                f"{self.provider_name} request failed: {e}",
                provider=self.provider_name,
            ) from e

        if not text:
            raise CollaboratorUnavailable(
                f"{self.provider_name} returned an empty response",
                provider=self.provider_name,
            )
        return text


class GeminiProvider(LLMProvider):
    """Google Gemini provider."""

    provider_name = "gemini"

    def _configured_key(self) -> str:
        return settings.effective_gemini_key

    @property
    def client(self):
        if self._client is None:
            import google.generativeai as genai
            genai.configure(api_key=self.api_key)
            self._client = genai.GenerativeModel(self.model)
        return self._client

    async def _generate(self, system_prompt: str, user_prompt: str) -> str:
        # Gemini takes a single prompt
        full_prompt = f"{system_prompt}\n\n---\n\n{user_prompt}"

        response = await self.client.generate_content_async(
            full_prompt,
            generation_config={"max_output_tokens": settings.max_output_tokens},
        )
        return response.text


class ClaudeProvider(LLMProvider):
    """Anthropic Claude provider."""

    provider_name = "claude"

    def _configured_key(self) -> str:
        return settings.effective_anthropic_key

    @property
    def client(self):
        if self._client is None:
            from anthropic import AsyncAnthropic
            self._client = AsyncAnthropic(api_key=self.api_key)
        return self._client

    async def _generate(self, system_prompt: str, user_prompt: str) -> str:
        response = await self.client.messages.create(
            model=self.model,
            system=system_prompt,
            messages=[{"role": "user", "content": user_prompt}],
            max_tokens=settings.max_output_tokens,
        )
        return response.content[0].text


class OpenAIProvider(LLMProvider):
    """OpenAI GPT provider."""

    provider_name = "openai"

    def _configured_key(self) -> str:
        return settings.effective_openai_key

    @property
    def client(self):
        if self._client is None:
            from openai import AsyncOpenAI
            self._client = AsyncOpenAI(api_key=self.api_key)
        return self._client

    async def _generate(self, system_prompt: str, user_prompt: str) -> str:
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            max_tokens=settings.max_output_tokens,
        )
        return response.choices[0].message.content


# Provider registry
PROVIDERS = {
    "gemini": GeminiProvider,
    "claude": ClaudeProvider,
    "openai": OpenAIProvider,
}

# Default models for each provider
DEFAULT_MODELS = {
    "gemini": "gemini-2.0-flash-exp",
    "claude": "claude-sonnet-4-20250514",
    "openai": "gpt-4o",
}


def get_provider(
    provider_name: str,
    model: Optional[str] = None,
    api_key: Optional[str] = None,
) -> LLMProvider:
    """Get an LLM provider instance."""
    if provider_name not in PROVIDERS:
        raise ValueError(f"Unknown provider: {provider_name}. Available: {list(PROVIDERS.keys())}")

    model = model or DEFAULT_MODELS.get(provider_name)
    return PROVIDERS[provider_name](model=model, api_key=api_key)


def get_available_providers() -> list[str]:
    """Get list of provider names that have an API key configured."""
    available = []

    if settings.effective_gemini_key:
        available.append("gemini")
    if settings.effective_anthropic_key:
        available.append("claude")
    if settings.effective_openai_key:
        available.append("openai")

    return available
