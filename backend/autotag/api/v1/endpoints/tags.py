from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, HTTPException, status

from autotag.api.v1.schemas.tags import TagSuggestErrorDetail, TagSuggestRequest, TagSuggestResponse
from autotag.core.errors import InvalidInput, TagSuggestionError
from autotag.core.services.taxonomy_service import merge_tags
from autotag.dependencies import get_notifier, get_openai_credential, get_tag_suggestion_client

if TYPE_CHECKING:
    from autotag.core.notifications import CollectingNotifier
    from autotag.core.services.tag_suggestion_service import TagSuggestionClient

router = APIRouter()


@router.post("/suggest", response_model=TagSuggestResponse)
async def suggest_tags(
    payload: TagSuggestRequest,
    credential: str | None = Depends(get_openai_credential),
    notifier: CollectingNotifier = Depends(get_notifier),
    client: TagSuggestionClient = Depends(get_tag_suggestion_client),
) -> TagSuggestResponse:
    """Suggest tags for a note using the caller's OpenAI API key.

    A missing key is not an error: the response carries no tags and a notice
    asking the user to configure one.
    """
    try:
        tags = await client.request_tags(credential, payload.text)
    except TagSuggestionError as err:
        status_code = (
            status.HTTP_400_BAD_REQUEST
            if isinstance(err, InvalidInput)
            else status.HTTP_502_BAD_GATEWAY
        )
        detail = TagSuggestErrorDetail(kind=err.kind, message=err.message, notices=notifier.messages)
        raise HTTPException(status_code=status_code, detail=detail.model_dump(mode="json")) from err

    return TagSuggestResponse(
        tags=tags,
        merged_tags=merge_tags(tags, payload.existing_tags),
        notices=notifier.messages,
    )
