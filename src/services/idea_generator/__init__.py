"""Idea Generator Service - AI content ideas with templated fallback."""

from src.services.idea_generator.router import router
from src.services.idea_generator.service import idea_generator

__all__ = ["idea_generator", "router"]
