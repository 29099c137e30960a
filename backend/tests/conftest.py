"""Shared pytest fixtures: a recording OpenAI transport and client builders."""

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from autotag.core.notifications import CollectingNotifier
from autotag.core.services.tag_suggestion_service import TagSuggestionClient
from autotag.utils.openai_client import create_openai_client


# =============================================================================
# Canned OpenAI responses
# =============================================================================

def function_call_body(arguments: str) -> dict[str, Any]:
    """Chat completion body whose first choice calls getTagSuggestions."""
    return {
        "id": "chatcmpl-123",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "gpt-3.5-turbo-0613",
        "choices": [
            {
                "index": 0,
                "message": {
                    "role": "assistant",
                    "content": None,
                    "function_call": {"name": "getTagSuggestions", "arguments": arguments},
                },
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 15},
    }


def error_body(message: str = "bad key") -> dict[str, Any]:
    return {
        "error": {
            "type": "invalid_request_error",
            "message": message,
            "param": None,
            "code": None,
        }
    }


class RecordingTransport:
    """httpx handler that records every request and replies with a fixed response."""

    def __init__(self, respond: Callable[[httpx.Request], httpx.Response]) -> None:
        self._respond = respond
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._respond(request)

    @property
    def calls(self) -> int:
        return len(self.requests)

    def sent_json(self, index: int = -1) -> dict[str, Any]:
        return json.loads(self.requests[index].content)

    def client_factory(self) -> Callable[[str], Any]:
        def factory(api_key: str):
            http_client = httpx.AsyncClient(transport=httpx.MockTransport(self))
            return create_openai_client(api_key, http_client=http_client)

        return factory


def reply(status_code: int = 200, *, json_body: Any = None, text: str | None = None):
    """Build a transport responder returning the given status and body."""
    def respond(request: httpx.Request) -> httpx.Response:
        if json_body is not None:
            return httpx.Response(status_code, json=json_body)
        return httpx.Response(status_code, text=text or "")

    return respond


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def notifier() -> CollectingNotifier:
    return CollectingNotifier()


@pytest.fixture
def make_client(notifier):
    """Return a builder: responder -> (TagSuggestionClient, RecordingTransport)."""
    def build(respond: Callable[[httpx.Request], httpx.Response]):
        transport = RecordingTransport(respond)
        client = TagSuggestionClient(notifier=notifier, client_factory=transport.client_factory())
        return client, transport

    return build
