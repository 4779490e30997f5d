"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from parking_signs.config import Settings
from parking_signs.containers import AppContainer
from parking_signs.domain.verdict import AnalysisVerdict
from parking_signs.services.analysis import AnalysisService, CompletionClient

VERDICT_JSON = (
    '{"canPark":true,"explanation":"ok","restrictions":[],"timeLimit":30}'
)
PROSE_WRAPPED_REPLY = f"Here is the result:\n{VERDICT_JSON}\nThanks"

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16
JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"\x00" * 16


@dataclass
class StubCompletionClient(CompletionClient):
    """Completion client returning a fixed reply and recording calls."""

    reply: str = VERDICT_JSON
    error: Exception | None = None
    calls: list[dict[str, object]] = field(default_factory=list)

    async def complete(
        self,
        *,
        model: str,
        messages: list[dict[str, object]],
        temperature: float,
        max_tokens: int,
    ) -> str:
        self.calls.append(
            {
                "model": model,
                "messages": messages,
                "temperature": temperature,
                "max_tokens": max_tokens,
            }
        )
        if self.error is not None:
            raise self.error
        return self.reply


@dataclass
class FakeGatewayClient:
    """Gateway client returning a fixed verdict or raising an error."""

    verdict: AnalysisVerdict = field(
        default_factory=lambda: AnalysisVerdict.model_validate_json(VERDICT_JSON)
    )
    error: Exception | None = None
    submitted: list[list[str]] = field(default_factory=list)

    async def analyze(self, images: list[str]) -> AnalysisVerdict:
        self.submitted.append(images)
        if self.error is not None:
            raise self.error
        return self.verdict


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key="openai-key")


@pytest.fixture
def completion_client() -> StubCompletionClient:
    return StubCompletionClient()


@pytest.fixture
def container(
    settings: Settings, completion_client: StubCompletionClient
) -> AppContainer:
    analysis_service = AnalysisService(
        client=completion_client,
        model=settings.openai_model,
        temperature=settings.temperature,
        max_tokens=settings.max_tokens,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        analysis_service=analysis_service,
        close_resources=close_resources,
    )
