"""Tests for HTTP-based adapters."""

import asyncio
import json
from types import SimpleNamespace

import httpx
import pytest
from openai import APIConnectionError, APIStatusError

from parking_signs.adapters.openai_completion_client import OpenAICompletionClient
from parking_signs.capture.gateway_client import HttpxGatewayClient
from parking_signs.services.analysis import UpstreamError
from tests.conftest import VERDICT_JSON

_OPENAI_REQUEST = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")


class _FakeCompletions:
    def __init__(self, content: str | None = None, error: Exception | None = None):
        self.content = content
        self.error = error
        self.last_payload: dict[str, object] | None = None

    async def create(self, **kwargs):  # type: ignore[no-untyped-def]
        self.last_payload = kwargs
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class _FakeOpenAI:
    def __init__(self, completions: _FakeCompletions) -> None:
        self.chat = SimpleNamespace(completions=completions)


def _complete(client: OpenAICompletionClient) -> str:
    return asyncio.run(
        client.complete(
            model="gpt-4o",
            messages=[{"role": "user", "content": "hi"}],
            temperature=0.2,
            max_tokens=500,
        )
    )


def test_openai_completion_client_returns_text() -> None:
    completions = _FakeCompletions(content=VERDICT_JSON)
    client = OpenAICompletionClient(client=_FakeOpenAI(completions))

    result = _complete(client)

    assert result == VERDICT_JSON
    assert completions.last_payload is not None
    assert completions.last_payload["temperature"] == 0.2
    assert completions.last_payload["max_tokens"] == 500


def test_openai_completion_client_maps_status_errors() -> None:
    error = APIStatusError(
        "Service unavailable",
        response=httpx.Response(503, request=_OPENAI_REQUEST),
        body=None,
    )
    client = OpenAICompletionClient(client=_FakeOpenAI(_FakeCompletions(error=error)))

    with pytest.raises(UpstreamError, match="OpenAI API responded with 503"):
        _complete(client)


def test_openai_completion_client_maps_connection_errors() -> None:
    error = APIConnectionError(request=_OPENAI_REQUEST)
    client = OpenAICompletionClient(client=_FakeOpenAI(_FakeCompletions(error=error)))

    with pytest.raises(UpstreamError, match="unreachable"):
        _complete(client)


def test_openai_completion_client_rejects_empty_reply() -> None:
    client = OpenAICompletionClient(
        client=_FakeOpenAI(_FakeCompletions(content=""))
    )

    with pytest.raises(UpstreamError, match="empty"):
        _complete(client)


def test_gateway_client_posts_images_and_parses_verdict() -> None:
    seen: list[dict[str, object]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/analyze"
        seen.append(json.loads(request.content.decode()))
        return httpx.Response(200, json=json.loads(VERDICT_JSON))

    async_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = HttpxGatewayClient(base_url="http://gateway", http_client=async_client)

    verdict = asyncio.run(client.analyze(["a", "b"]))

    assert seen == [{"images": ["a", "b"]}]
    assert verdict.can_park is True
    assert verdict.time_limit == 30


def test_gateway_client_raises_on_failure_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            500, json={"error": "Failed to analyze parking signs", "details": "x"}
        )

    async_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = HttpxGatewayClient(base_url="http://gateway", http_client=async_client)

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(client.analyze(["a"]))
