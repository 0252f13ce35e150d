"""FastAPI router for Idea Generator service."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from src.core.config import settings
from src.llm import is_llm_configured
from src.services.idea_generator.models import (
    GenerateIdeasRequest,
    GenerateIdeasResponse,
    Mode,
    ModeInfo,
)
from src.services.idea_generator.service import (
    IdeaGeneratorService,
    get_idea_generator,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["ideas"])


@router.get("/health")
async def health_check() -> dict:
    """Liveness check with the configured LLM provider."""
    return {
        "status": "ok",
        "llm_provider": settings.llm_provider,
        "llm_configured": is_llm_configured(),
    }


@router.get("/modes", response_model=list[ModeInfo])
async def list_modes() -> list[ModeInfo]:
    """List the available content modes and their labels."""
    return [ModeInfo(mode=mode, label=mode.label) for mode in Mode]


@router.post("/generate", response_model=GenerateIdeasResponse)
async def generate_ideas(
    request: GenerateIdeasRequest,
    generator: IdeaGeneratorService = Depends(get_idea_generator),
) -> GenerateIdeasResponse:
    """
    Generate content ideas for a topic.

    - Uses the configured LLM provider (Gemini or OpenAI)
    - Falls back to templated ideas if the provider fails or times out
    - Rejects a missing or blank topic before any generation
    """
    try:
        ideas = await generator.generate_ideas(request.topic, request.mode)
    except Exception as e:
        logger.exception(f"Idea generation error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate ideas",
        )

    return GenerateIdeasResponse(ideas=ideas)
