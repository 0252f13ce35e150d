"""OpenAI client for idea generation."""

import logging
from typing import Optional

from openai import AsyncOpenAI

from src.core.config import settings
from src.llm.base import EmptyLLMResponseError

logger = logging.getLogger(__name__)


class OpenAIClient:
    """Sends idea prompts to an OpenAI chat model without SDK retries."""

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        self.api_key = api_key or settings.openai_api_key
        self.model = model or settings.openai_model
        self._client: Optional[AsyncOpenAI] = None

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            if not self.api_key:
                raise ValueError("OPENAI_API_KEY is not configured")
            self._client = AsyncOpenAI(
                api_key=self.api_key,
                max_retries=0,
                timeout=settings.llm_timeout_seconds,
            )
        return self._client

    async def generate_content(
        self,
        prompt: str,
        temperature: float = 0.9,
        max_output_tokens: int = 1000,
    ) -> str:
        """
        Ask the chat model for a reply to the prompt.

        Raises:
            EmptyLLMResponseError: If the completion has no choices or no text
        """
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            temperature=temperature,
            max_tokens=max_output_tokens,
        )

        if not response.choices:
            raise EmptyLLMResponseError(f"OpenAI model {self.model} returned no choices")

        text = (response.choices[0].message.content or "").strip()
        if not text:
            raise EmptyLLMResponseError(f"OpenAI model {self.model} returned no text")

        logger.debug(f"OpenAI reply: {len(text)} characters")
        return text


openai_client = OpenAIClient()
