"""Idea generation service."""

import asyncio
import logging
from typing import Any, Optional

from src.core.config import settings
from src.llm import LLMClient, get_configured_llm
from src.services.idea_generator.fallback import fallback_ideas
from src.services.idea_generator.models import Mode
from src.services.idea_generator.parser import parse_ideas
from src.services.idea_generator.prompt import build_prompt

logger = logging.getLogger(__name__)


class IdeaGeneratorService:
    """Service for generating content ideas with a templated fallback."""

    def __init__(
        self,
        llm_client: Optional[LLMClient] = None,
        timeout_seconds: Optional[float] = None,
    ):
        self._llm_client = llm_client
        if timeout_seconds is None:
            timeout_seconds = settings.llm_timeout_seconds
        self.timeout_seconds = timeout_seconds

    def _get_llm(self) -> LLMClient:
        if self._llm_client is not None:
            return self._llm_client
        return get_configured_llm()

    async def _call_llm(self, prompt: str) -> str:
        """Make a single, time-bounded call to the LLM."""
        llm_client = self._get_llm()
        return await asyncio.wait_for(
            llm_client.generate_content(
                prompt=prompt,
                temperature=settings.llm_temperature,
                max_output_tokens=settings.llm_max_output_tokens,
            ),
            timeout=self.timeout_seconds,
        )

    async def generate_ideas(self, topic: str, mode: Any = Mode.BLOG) -> list[str]:
        """
        Generate content ideas for a topic.

        Any LLM failure, timeout or unusable reply is absorbed and replaced
        by the templated fallback ideas.

        Args:
            topic: Topic to generate ideas for
            mode: Content mode; unknown values are treated as blog

        Returns:
            Ordered list of ideas
        """
        resolved = Mode.resolve(mode)
        prompt = build_prompt(topic, resolved)

        try:
            raw_text = await self._call_llm(prompt)
        except asyncio.TimeoutError:
            logger.warning(
                f"LLM call timed out after {self.timeout_seconds}s, using fallback"
            )
            return fallback_ideas(topic, resolved)
        except Exception as e:
            logger.error(f"LLM call failed ({type(e).__name__}: {e}), using fallback")
            return fallback_ideas(topic, resolved)

        ideas = parse_ideas(raw_text)
        if not ideas:
            logger.info("LLM response had no usable ideas, using fallback")
            return fallback_ideas(topic, resolved)

        logger.info(
            f"Generated {len(ideas)} {resolved.value} ideas for topic '{topic}'"
        )
        return ideas


# Singleton instance
idea_generator = IdeaGeneratorService()


def get_idea_generator() -> IdeaGeneratorService:
    """FastAPI dependency returning the shared service instance."""
    return idea_generator
