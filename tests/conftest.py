"""Shared fixtures for InspireAI tests."""

import asyncio
from typing import Optional

import pytest
from fastapi.testclient import TestClient

from src.main import app
from src.services.idea_generator.service import IdeaGeneratorService, get_idea_generator


class FakeLLM:
    """LLM client returning a canned reply and recording prompts."""

    def __init__(self, reply: str = "", error: Optional[Exception] = None, delay: float = 0.0):
        self.reply = reply
        self.error = error
        self.delay = delay
        self.prompts: list[str] = []

    async def generate_content(
        self,
        prompt: str,
        temperature: float = 0.9,
        max_output_tokens: int = 1000,
    ) -> str:
        self.prompts.append(prompt)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.reply


GOOD_REPLY = """Here are your ideas:
1. How to Start a Fitness Routine You Will Actually Keep
2. 10 Fitness Myths That Are Holding You Back
3. The Beginner's Guide to Strength Training at Home
"""


@pytest.fixture
def make_client():
    """Build a TestClient whose idea generator uses the given LLM."""

    def _make(llm) -> TestClient:
        service = IdeaGeneratorService(llm_client=llm, timeout_seconds=0.2)
        app.dependency_overrides[get_idea_generator] = lambda: service
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def fake_llm() -> FakeLLM:
    return FakeLLM(reply=GOOD_REPLY)
