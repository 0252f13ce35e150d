"""Google Gemini client for idea generation."""

import logging
from typing import Optional

from google import genai
from google.genai import types

from src.core.config import settings
from src.llm.base import EmptyLLMResponseError

logger = logging.getLogger(__name__)


class GeminiClient:
    """Sends idea prompts to Gemini, one request per call."""

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        self.api_key = api_key or settings.gemini_api_key
        self.model = model or settings.gemini_model
        self._client: Optional[genai.Client] = None

    @property
    def client(self) -> genai.Client:
        if self._client is None:
            if not self.api_key:
                raise ValueError("GEMINI_API_KEY is not configured")
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def generate_content(
        self,
        prompt: str,
        temperature: float = 0.9,
        max_output_tokens: int = 1000,
    ) -> str:
        """
        Ask Gemini for a reply to the prompt.

        Raises:
            EmptyLLMResponseError: If the reply carries no text
        """
        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=temperature,
                max_output_tokens=max_output_tokens,
            ),
        )

        text = (response.text or "").strip()
        if not text:
            raise EmptyLLMResponseError(f"Gemini model {self.model} returned no text")

        logger.debug(f"Gemini reply: {len(text)} characters")
        return text


gemini_client = GeminiClient()
