"""Parsing of free-text LLM replies into idea lists."""

import logging
import re
from typing import Any

from src.services.idea_generator.prompt import IDEA_COUNT

logger = logging.getLogger(__name__)

MIN_IDEA_LENGTH = 10
MAX_IDEA_LENGTH = 200

NUMBERING_PATTERN = re.compile(r"^[0-9]+\.\s*")
BULLET_PATTERN = re.compile(r"^[-*]\s*")


def clean_line(line: str) -> str:
    """Strip list numbering or bullet markers from a single line."""
    line = NUMBERING_PATTERN.sub("", line.strip(), count=1)
    line = BULLET_PATTERN.sub("", line, count=1)
    return line.strip()


def parse_ideas(text: Any) -> list[str]:
    """
    Extract ideas from an LLM reply.

    Lines are stripped of "1." numbering and "-"/"*" bullets, then kept only
    if their length is strictly between MIN_IDEA_LENGTH and MAX_IDEA_LENGTH.
    At most IDEA_COUNT ideas are returned, in reply order.

    Args:
        text: Raw reply text

    Returns:
        List of ideas, empty if nothing usable was found
    """
    if not isinstance(text, str):
        return []

    try:
        ideas = []
        for line in text.split("\n"):
            if not line.strip():
                continue
            idea = clean_line(line)
            if MIN_IDEA_LENGTH < len(idea) < MAX_IDEA_LENGTH:
                ideas.append(idea)
            if len(ideas) == IDEA_COUNT:
                break
        return ideas
    except Exception as e:
        logger.error(f"Error parsing LLM response: {e}")
        return []
