from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from autotag.core.schemas.tagging import RemoteError


class ErrorKind(StrEnum):
    """Discriminator for every way a tag suggestion can fail."""

    MISSING_CREDENTIAL = "missing_credential"
    INVALID_INPUT = "invalid_input"
    DECODING_FAILURE = "decoding_failure"
    RESPONSE_MISSING_TAGS = "response_missing_tags"
    COMPLETION_REQUEST_FAILED = "completion_request_failed"


class TagSuggestionError(Exception):
    """Base class for tag suggestion failures."""

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInput(TagSuggestionError, ValueError):
    kind = ErrorKind.INVALID_INPUT


class DecodingFailure(TagSuggestionError):
    """The remote answered successfully but its payload was not valid JSON."""

    kind = ErrorKind.DECODING_FAILURE


class CompletionRequestFailed(TagSuggestionError):
    """Transport failure, unexpected status or unrecognised response shape."""

    kind = ErrorKind.COMPLETION_REQUEST_FAILED

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RemoteAPIError(CompletionRequestFailed):
    """The remote API reported a structured error payload."""

    def __init__(self, remote_error: RemoteError, *, status_code: int | None = None) -> None:
        super().__init__(remote_error.message or "unknown error", status_code=status_code)
        self.remote_error = remote_error


class ResponseMissingTags(TagSuggestionError):
    kind = ErrorKind.RESPONSE_MISSING_TAGS

    def __init__(self, message: str, *, remote_error: RemoteError | None = None) -> None:
        super().__init__(message)
        self.remote_error = remote_error
