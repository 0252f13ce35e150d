import asyncio

from src.services.idea_generator.fallback import fallback_ideas
from src.services.idea_generator.service import IdeaGeneratorService
from tests.conftest import GOOD_REPLY, FakeLLM


def generate(llm, topic="Fitness", mode="blog", timeout=0.2) -> list[str]:
    service = IdeaGeneratorService(llm_client=llm, timeout_seconds=timeout)
    return asyncio.run(service.generate_ideas(topic, mode))


def test_returns_parsed_ideas() -> None:
    llm = FakeLLM(reply=GOOD_REPLY)

    ideas = generate(llm)

    assert ideas == [
        "Here are your ideas:",
        "How to Start a Fitness Routine You Will Actually Keep",
        "10 Fitness Myths That Are Holding You Back",
        "The Beginner's Guide to Strength Training at Home",
    ]
    assert len(llm.prompts) == 1
    assert '"Fitness"' in llm.prompts[0]


def test_provider_error_uses_fallback() -> None:
    llm = FakeLLM(error=RuntimeError("429 quota exceeded"))

    assert generate(llm, "Fitness", "youtube") == fallback_ideas("Fitness", "youtube")


def test_timeout_uses_fallback() -> None:
    llm = FakeLLM(reply=GOOD_REPLY, delay=1.0)

    assert generate(llm, "Fitness", "tweet", timeout=0.05) == fallback_ideas("Fitness", "tweet")


def test_unusable_reply_uses_fallback() -> None:
    llm = FakeLLM(reply="Sure!\n\n1. Ok\n- No")

    assert generate(llm) == fallback_ideas("Fitness", "blog")


def test_empty_reply_uses_fallback() -> None:
    assert generate(FakeLLM(reply="")) == fallback_ideas("Fitness", "blog")


def test_unknown_mode_prompts_as_blog() -> None:
    llm = FakeLLM(error=ValueError("GEMINI_API_KEY is not configured"))

    ideas = generate(llm, "Fitness", "poem")

    assert ideas == fallback_ideas("Fitness", "blog")
    assert "blog post titles" in llm.prompts[0]


def test_ideas_respect_bounds() -> None:
    reply = "\n".join(f"{i}. Idea {'x' * (i * 20)}" for i in range(1, 15))

    ideas = generate(FakeLLM(reply=reply))

    assert 0 < len(ideas) <= 8
    assert all(10 < len(idea) < 200 for idea in ideas)


def test_zero_timeout_is_kept() -> None:
    llm = FakeLLM(reply=GOOD_REPLY, delay=0.5)
    service = IdeaGeneratorService(llm_client=llm, timeout_seconds=0)

    assert service.timeout_seconds == 0
    assert asyncio.run(service.generate_ideas("Fitness", "blog")) == fallback_ideas("Fitness", "blog")
