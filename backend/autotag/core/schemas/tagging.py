from __future__ import annotations

from typing import Any

from pydantic import Field

from autotag.core.errors import ErrorKind  # noqa: TCH001
from autotag.core.models.base import AppBaseModel, RemotePayloadModel


class FunctionSchema(AppBaseModel):
    """A callable advertised to the model through legacy function calling."""

    name: str
    description: str
    parameters: dict[str, Any]

    model_config = {"frozen": True}


class TagSuggestions(RemotePayloadModel):
    """Decoded `getTagSuggestions` call arguments."""

    tags: list[str] | None = None


class RemoteError(RemotePayloadModel):
    """Error object returned by the OpenAI API under the `error` key."""

    type: str | None = None
    message: str | None = None
    param: Any = None
    code: Any = None


class TagSuggestionOutcome(AppBaseModel):
    """Result of a suggestion attempt: tags on success, a failure kind otherwise."""

    tags: list[str] = Field(default_factory=list)
    error_kind: ErrorKind | None = None
    error_message: str | None = None
    remote_error: RemoteError | None = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None
