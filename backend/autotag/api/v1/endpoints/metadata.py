from __future__ import annotations

from fastapi import APIRouter

from autotag.core.models.catalog import OPENAI_API_MODELS, ModelInfo

router = APIRouter()


@router.get("/models", response_model=list[ModelInfo])
async def list_models() -> list[ModelInfo]:
    """Return the OpenAI models selectable on the settings screen."""
    return list(OPENAI_API_MODELS)
