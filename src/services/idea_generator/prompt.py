"""Instruction templates for idea generation."""

from typing import Any

from src.services.idea_generator.models import Mode

IDEA_COUNT = 8

BASE_INSTRUCTIONS = (
    "You are a professional content creator and marketing expert. "
    "Generate {count} creative, engaging, and high-converting content ideas "
    'for the topic: "{topic}".'
)

MODE_INSTRUCTIONS: dict[Mode, str] = {
    Mode.BLOG: """Create compelling blog post titles that are:
- SEO-optimized and click-worthy
- Include power words and emotional triggers
- Address specific pain points or benefits
- Use numbers, questions, or "how-to" formats
- Keep between 50-70 characters for optimal sharing""",
    Mode.YOUTUBE: """Create viral YouTube video titles that are:
- Attention-grabbing and curiosity-driven
- Include trending keywords and phrases
- Use emotional hooks and cliffhangers
- Optimized for YouTube's algorithm
- Include emojis strategically
- Keep under 60 characters for mobile viewing""",
    Mode.TWEET: """Create engaging Twitter/X post ideas that are:
- Concise and punchy (under 280 characters)
- Include relevant hashtags
- Use storytelling or controversial angles
- Include calls-to-action
- Tap into current trends and conversations
- Use emojis to increase engagement""",
}

FORMAT_INSTRUCTIONS = (
    "Format your response as a numbered list (1-{count}) with each idea on a new line. "
    "Make each idea unique, creative, and tailored to the specific mode."
)


def build_prompt(topic: str, mode: Any = Mode.BLOG) -> str:
    """
    Build the instruction sent to the LLM.

    Unknown modes get the blog instructions.
    """
    resolved = Mode.resolve(mode)
    return "\n\n".join(
        [
            BASE_INSTRUCTIONS.format(count=IDEA_COUNT, topic=topic),
            MODE_INSTRUCTIONS[resolved],
            FORMAT_INSTRUCTIONS.format(count=IDEA_COUNT),
        ]
    )
