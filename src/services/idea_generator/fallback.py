"""Templated ideas used when the LLM is unavailable."""

from typing import Any

from src.services.idea_generator.models import Mode

FALLBACK_TEMPLATES = [
    "10x Your {topic} Growth: 8 Irresistible {label} You Must Try 🚀",
    "The Ultimate {topic} Playbook: High-Conversion {label} That Hook Instantly",
    "Stop Scrolling! Killer {label} for {topic} That Demand Attention ⚡",
    "{topic} in 2025: Trends, Myths, and Proven {label} That Win",
    "From Zero to Pro: Beginner-Friendly {label} for {topic} That Work",
    "Steal These {label}: Viral {topic} Angles Backed by Psychology 🧠",
    "No-Fluff {label}: Clear, Clickable {topic} Ideas People Love ✅",
    "7-Second Hooks: Short, Punchy {label} for {topic} That Convert",
]


def mode_label(mode: Any) -> str:
    """Resolve a mode value to its label, defaulting to "Blog Titles"."""
    return Mode.resolve(mode).label


def fallback_ideas(topic: str, mode: Any = Mode.BLOG) -> list[str]:
    """Fill the fallback templates with the topic and mode label."""
    normalized = topic.strip()
    label = mode_label(mode)
    return [
        template.format(topic=normalized, label=label)
        for template in FALLBACK_TEMPLATES
    ]
