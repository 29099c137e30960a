from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from openai import APIConnectionError, APIStatusError
from pydantic import ValidationError

from autotag.core.errors import (
    CompletionRequestFailed,
    DecodingFailure,
    ErrorKind,
    InvalidInput,
    RemoteAPIError,
    ResponseMissingTags,
    TagSuggestionError,
)
from autotag.core.models.catalog import DEFAULT_MODEL_ID
from autotag.core.notifications import LoggingNotifier
from autotag.core.schemas.tagging import (
    FunctionSchema,
    RemoteError,
    TagSuggestionOutcome,
    TagSuggestions,
)
from autotag.utils.logging import get_logger
from autotag.utils.openai_client import create_openai_client

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable

    from openai import AsyncOpenAI

    from autotag.core.notifications import Notifier


OPENAI_CHAT_MODEL = DEFAULT_MODEL_ID
MAX_TOKENS = 2048

SYSTEM_PROMPT = (
    "You are ChatGPT, a helpful code assistant and text analysis tool. You help with semantic "
    "understanding of input text and providing suggestions for tags that best allow to categorize "
    "and identify the text, for use in search engines or content link grouping. You will receive "
    "the input text from the user."
)

# TODO: relax the lowercase/underscore rule so non-latin scripts (CJK, Arabic) can be tagged.
TAG_SUGGESTIONS_FUNCTION = FunctionSchema(
    name="getTagSuggestions",
    description="Suggest the best matching tags that describe the provided input text. At least 1 tag returned.",
    parameters={
        "type": "object",
        "properties": {
            "tags": {
                "type": "array",
                "description": (
                    "An array of tags. Come up with 2 to 10 tags. These can be used to tag the input "
                    "text to help with search engines or grouping with related tag content. Tags can "
                    "only contain lowercase letters and underscores."
                ),
                "items": {"type": "string"},
            },
        },
    },
)

MISSING_KEY_NOTICE = "OpenAI API key is missing. Please add it in the plugin settings."
GENERIC_FAILURE = "Failed to get tags from OpenAI API."


class TagSuggestionClient:
    """Asks an OpenAI chat model for tags describing a piece of text.

    The model is forced to answer through a single `getTagSuggestions` function
    call, so the reply is machine-readable JSON rather than prose. Every call
    owns its own OpenAI client; instances hold no per-request state and can be
    shared between concurrent callers.
    """

    def __init__(
        self,
        notifier: Notifier | None = None,
        logger: logging.Logger | None = None,
        client_factory: Callable[[str], AsyncOpenAI] = create_openai_client,
    ) -> None:
        self._notifier = notifier or LoggingNotifier()
        self._logger = logger or get_logger(__name__)
        self._client_factory = client_factory

    async def request_tags(self, credential: str | None, input_text: str) -> list[str]:
        """Return tags suggested for `input_text`.

        A missing credential is reported to the user and yields an empty list.
        A remote error is reported to the user and raised as ResponseMissingTags.
        """
        if not credential:
            self._report_missing_credential()
            return []

        try:
            payload = await self.complete_with_function_call(credential, input_text, TAG_SUGGESTIONS_FUNCTION)
        except RemoteAPIError as err:
            self._logger.error(
                'OpenAI API response is missing a "tags" property. %s',
                err.remote_error.model_dump_json(),
            )
            self._notifier.notify(f"OpenAI API error: {err.message}")
            raise ResponseMissingTags(
                'OpenAI API response is missing a "tags" property.',
                remote_error=err.remote_error,
            ) from err

        try:
            suggestions = TagSuggestions.model_validate(payload)
        except ValidationError as err:
            self._logger.warning("Function call arguments have an unexpected shape: %s", err)
            return []

        if suggestions.tags is None:
            self._logger.warning("Function call arguments carry no tags: %s", json.dumps(payload))
            return []

        self._logger.debug("OpenAI API suggested tags: %s", json.dumps(payload))
        return suggestions.tags

    async def suggest_tags(self, credential: str | None, input_text: str) -> TagSuggestionOutcome:
        """Like request_tags, but every failure is folded into the returned outcome."""
        if not credential:
            self._report_missing_credential()
            return TagSuggestionOutcome(
                error_kind=ErrorKind.MISSING_CREDENTIAL,
                error_message=MISSING_KEY_NOTICE,
            )

        try:
            tags = await self.request_tags(credential, input_text)
        except TagSuggestionError as err:
            return TagSuggestionOutcome(
                error_kind=err.kind,
                error_message=err.message,
                remote_error=getattr(err, "remote_error", None),
            )
        return TagSuggestionOutcome(tags=tags)

    async def complete_with_function_call(
        self,
        credential: str | None,
        input_text: str,
        schema: FunctionSchema,
    ) -> dict[str, Any]:
        """Run one forced function-call completion and return the decoded arguments.

        Raises InvalidInput before any request for a missing key or blank text,
        RemoteAPIError when the API reports an error object (even alongside a
        function call), DecodingFailure when the model returns malformed JSON
        and CompletionRequestFailed otherwise.
        """
        if not credential:
            self._logger.warning("complete_with_function_call: OpenAI API key is missing")
            raise InvalidInput("complete_with_function_call: OpenAI API key is missing.")

        if not input_text.strip():
            self._logger.warning("complete_with_function_call: invalid input text %s", json.dumps(input_text))
            raise InvalidInput("complete_with_function_call: invalid input text.")

        request_body = build_request_body(input_text, schema)

        try:
            async with self._client_factory(credential) as client:
                raw = await client.chat.completions.with_raw_response.create(
                    model=request_body["model"],
                    max_tokens=request_body["max_tokens"],
                    messages=request_body["messages"],
                    # Legacy function-calling fields, sent as-is
                    extra_body={
                        "functions": request_body["functions"],
                        "function_call": request_body["function_call"],
                    },
                )
                status_code = raw.status_code
                body_text = raw.text
        except APIStatusError as err:
            remote_error = _remote_error_from_body(err.body)
            if remote_error is not None:
                self._logger.error(
                    "complete_with_function_call: OpenAI API returned %s: %s",
                    err.status_code,
                    remote_error.model_dump_json(),
                )
                raise RemoteAPIError(remote_error, status_code=err.status_code) from err
            self._logger.warning("complete_with_function_call: OpenAI API returned %s", err.status_code)
            raise CompletionRequestFailed(
                f"complete_with_function_call: Error: {GENERIC_FAILURE}",
                status_code=err.status_code,
            ) from err
        except APIConnectionError as err:
            self._logger.warning("complete_with_function_call: transport failure: %s", err)
            raise CompletionRequestFailed(f"complete_with_function_call: Error: {err}") from err

        try:
            data = json.loads(body_text)
        except json.JSONDecodeError as err:
            self._logger.warning("complete_with_function_call: response body is not JSON")
            raise DecodingFailure("complete_with_function_call: response body is not valid JSON.") from err

        if isinstance(data, dict) and data.get("error"):
            remote_error = self._decode_error(data["error"])
            self._logger.error("complete_with_function_call Error: %s", remote_error.model_dump_json())
            raise RemoteAPIError(remote_error, status_code=status_code)

        function_call = _first_function_call(data)
        if status_code == 200 and function_call is not None:
            return self._decode_arguments(function_call.get("arguments"))

        self._logger.warning("complete_with_function_call: unexpected response shape (status %s)", status_code)
        raise CompletionRequestFailed(
            f"complete_with_function_call: Error: {GENERIC_FAILURE}",
            status_code=status_code,
        )

    def _report_missing_credential(self) -> None:
        self._logger.warning("Tag suggestion skipped: OpenAI API key is missing")
        self._notifier.notify(MISSING_KEY_NOTICE)

    def _decode_arguments(self, arguments: Any) -> dict[str, Any]:
        if not isinstance(arguments, str):
            self._logger.warning("Function call arguments are missing: %r", arguments)
            raise DecodingFailure("Function call arguments are missing.")
        try:
            decoded = json.loads(arguments)
        except json.JSONDecodeError as err:
            self._logger.warning("Function call arguments are not valid JSON: %s", arguments)
            raise DecodingFailure("Function call arguments are not valid JSON.") from err
        if not isinstance(decoded, dict):
            self._logger.warning("Function call arguments are not a JSON object: %s", arguments)
            return {}
        return decoded

    def _decode_error(self, error: Any) -> RemoteError:
        if isinstance(error, str):
            try:
                error = json.loads(error)
            except json.JSONDecodeError as err:
                self._logger.warning("Remote error body is not valid JSON: %s", error)
                raise DecodingFailure("Remote error body is not valid JSON.") from err
        remote_error = _remote_error_from_body(error)
        if remote_error is None:
            return RemoteError(message=str(error))
        return remote_error


def build_request_body(input_text: str, schema: FunctionSchema) -> dict[str, Any]:
    """Return the chat-completions JSON body for one forced function call."""
    return {
        "model": OPENAI_CHAT_MODEL,
        "max_tokens": MAX_TOKENS,
        "messages": [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": input_text},
        ],
        "functions": [schema.model_dump()],
        "function_call": {"name": schema.name},
    }


def _first_function_call(data: Any) -> dict[str, Any] | None:
    if not isinstance(data, dict):
        return None
    choices = data.get("choices") or []
    if not choices or not isinstance(choices[0], dict):
        return None
    message = choices[0].get("message") or {}
    function_call = message.get("function_call") if isinstance(message, dict) else None
    return function_call if isinstance(function_call, dict) else None


def _remote_error_from_body(body: Any) -> RemoteError | None:
    """Return a RemoteError if `body` looks like an OpenAI error object."""
    if not isinstance(body, dict):
        return None
    if isinstance(body.get("error"), dict):
        body = body["error"]
    if not ({"message", "type", "code"} & body.keys()):
        return None
    try:
        return RemoteError.model_validate(body)
    except ValidationError:
        return None
