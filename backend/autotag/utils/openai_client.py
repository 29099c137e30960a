from __future__ import annotations

from typing import TYPE_CHECKING

from openai import AsyncOpenAI

from autotag.config import settings
from autotag.utils.logging import get_logger

if TYPE_CHECKING:
    import httpx


logger = get_logger(__name__)


def create_openai_client(api_key: str, *, http_client: httpx.AsyncClient | None = None) -> AsyncOpenAI:
    """Return an OpenAI client bound to the caller's API key.

    The key belongs to the end user, so a fresh client is built per call rather
    than cached. SDK-level retries are disabled: one call issues one request.
    """
    logger.debug("Initializing OpenAI client for %s", settings.openai_base_url)
    return AsyncOpenAI(
        api_key=api_key,
        base_url=settings.openai_base_url,
        timeout=settings.openai_timeout,
        max_retries=0,
        http_client=http_client,
    )
