from __future__ import annotations

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from autotag.config import settings

router = APIRouter()


@router.get("/")
async def health_check():
    """Health check endpoint."""
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "status": "healthy",
            "service": "autotag-api",
            "version": "0.1.0",
            "openai_base_url": settings.openai_base_url,
        }
    )
