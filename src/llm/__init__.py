"""LLM integrations for InspireAI."""

from src.llm.base import (
    EmptyLLMResponseError,
    LLMClient,
    get_configured_llm,
    get_llm_client,
    is_llm_configured,
)
from src.llm.gemini import GeminiClient, gemini_client
from src.llm.openai import OpenAIClient, openai_client

__all__ = [
    "EmptyLLMResponseError",
    "LLMClient",
    "get_configured_llm",
    "get_llm_client",
    "is_llm_configured",
    "GeminiClient",
    "gemini_client",
    "OpenAIClient",
    "openai_client",
]
