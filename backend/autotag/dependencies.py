from __future__ import annotations

from collections.abc import Callable

from fastapi import Depends, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from openai import AsyncOpenAI

from autotag.core.notifications import CollectingNotifier
from autotag.core.services.tag_suggestion_service import TagSuggestionClient
from autotag.utils.logging import get_logger
from autotag.utils.openai_client import create_openai_client

logger = get_logger(__name__)

# A missing key is a soft failure handled by the client, not a 401
http_bearer = HTTPBearer(auto_error=False)


def get_openai_credential(
    credentials: HTTPAuthorizationCredentials | None = Security(http_bearer),
) -> str | None:
    """Return the caller's OpenAI API key from `Authorization: Bearer <key>`."""
    if not credentials:
        return None
    return credentials.credentials.strip() or None


def get_notifier() -> CollectingNotifier:
    """Get a request-scoped notifier collecting user-facing notices."""
    return CollectingNotifier()


def get_openai_client_factory() -> Callable[[str], AsyncOpenAI]:
    return create_openai_client


def get_tag_suggestion_client(
    notifier: CollectingNotifier = Depends(get_notifier),
    client_factory: Callable[[str], AsyncOpenAI] = Depends(get_openai_client_factory),
) -> TagSuggestionClient:
    """Construct a request-scoped TagSuggestionClient reporting to the request's notifier."""
    return TagSuggestionClient(notifier=notifier, logger=logger, client_factory=client_factory)
