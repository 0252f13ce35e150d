"""Provider selection for the idea generator's LLM call."""

import logging
from typing import Optional, Protocol

from src.core.config import settings

logger = logging.getLogger(__name__)

SUPPORTED_PROVIDERS = ("gemini", "openai")


class EmptyLLMResponseError(Exception):
    """Raised when a provider answers without any text."""


class LLMClient(Protocol):
    """Anything that turns one prompt into one block of text."""

    async def generate_content(
        self,
        prompt: str,
        temperature: float = 0.9,
        max_output_tokens: int = 1000,
    ) -> str:
        ...


def _selected_provider() -> str:
    return settings.llm_provider.strip().lower()


def _api_key_for(provider: str) -> str:
    """Return the configured key for a provider, empty if unknown or unset."""
    keys = {
        "gemini": settings.gemini_api_key,
        "openai": settings.openai_api_key,
    }
    return keys.get(provider, "")


def is_llm_configured() -> bool:
    """Check whether the selected provider has an API key."""
    return bool(_api_key_for(_selected_provider()))


def get_llm_client() -> LLMClient:
    """
    Build the client for the provider named by LLM_PROVIDER.

    Raises:
        ValueError: If the provider is unknown or its key is missing
    """
    provider = _selected_provider()
    if provider not in SUPPORTED_PROVIDERS:
        raise ValueError(
            f"Unsupported LLM_PROVIDER: {provider}. "
            f"Supported: {', '.join(SUPPORTED_PROVIDERS)}"
        )
    if not _api_key_for(provider):
        raise ValueError(f"{provider.upper()}_API_KEY is required when LLM_PROVIDER={provider}")

    if provider == "gemini":
        from src.llm.gemini import gemini_client as client
    else:
        from src.llm.openai import openai_client as client

    logger.info(f"Using {provider} for idea generation (model: {client.model})")
    return client


_llm_client: Optional[LLMClient] = None


def get_configured_llm() -> LLMClient:
    """Get the process-wide LLM client, creating it on first use."""
    global _llm_client
    if _llm_client is None:
        _llm_client = get_llm_client()
    return _llm_client
