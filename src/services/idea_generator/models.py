"""Pydantic models for Idea Generator service."""

from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, Field, StrictStr, field_validator


class Mode(str, Enum):
    """Content style an idea list is generated for."""

    BLOG = "blog"
    YOUTUBE = "youtube"
    TWEET = "tweet"

    @classmethod
    def resolve(cls, value: Any) -> "Mode":
        """Map any value onto a mode, defaulting to blog."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.BLOG

    @property
    def label(self) -> str:
        """Human-readable label used in fallback ideas."""
        return MODE_LABELS[self]


MODE_LABELS: dict[Mode, str] = {
    Mode.BLOG: "Blog Titles",
    Mode.YOUTUBE: "YouTube Titles",
    Mode.TWEET: "Tweet Ideas",
}


# Longest fallback template adds 74 characters, ideas must stay under 200
MAX_TOPIC_LENGTH = 120


class GenerateIdeasRequest(BaseModel):
    """Request model for idea generation."""

    # Older clients send the topic as "prompt"
    topic: StrictStr = Field(validation_alias=AliasChoices("topic", "prompt"))
    mode: Mode = Mode.BLOG

    @field_validator("topic")
    @classmethod
    def topic_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("topic must not be blank")
        if len(value) > MAX_TOPIC_LENGTH:
            raise ValueError(f"topic must be at most {MAX_TOPIC_LENGTH} characters")
        return value

    @field_validator("mode", mode="before")
    @classmethod
    def coerce_mode(cls, value: Any) -> Mode:
        return Mode.resolve(value)


class GenerateIdeasResponse(BaseModel):
    """Response model for idea generation."""

    ideas: list[str]


class ModeInfo(BaseModel):
    """A selectable mode and its display label."""

    mode: Mode
    label: str
