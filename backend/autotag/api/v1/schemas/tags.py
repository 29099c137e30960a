from __future__ import annotations

from pydantic import Field

from autotag.core.errors import ErrorKind  # noqa: TCH001
from autotag.core.models.base import AppBaseModel


class TagSuggestRequest(AppBaseModel):
    text: str = Field(max_length=100_000, description="Note text to tag")
    existing_tags: list[str] = Field(default_factory=list, description="Tags already on the note")


class TagSuggestResponse(AppBaseModel):
    tags: list[str] = Field(default_factory=list, description="Tags suggested by the model")
    merged_tags: list[str] = Field(default_factory=list, description="Suggested tags merged with existing ones")
    notices: list[str] = Field(default_factory=list, description="User-facing messages raised during the call")


class TagSuggestErrorDetail(AppBaseModel):
    kind: ErrorKind
    message: str
    notices: list[str] = Field(default_factory=list)
