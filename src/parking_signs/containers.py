"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from parking_signs.adapters.openai_completion_client import OpenAICompletionClient
from parking_signs.config import Settings
from parking_signs.services.analysis import AnalysisService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    analysis_service: AnalysisService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    completion_client = OpenAICompletionClient.create(
        resolved_settings.openai_api_key,
        base_url=resolved_settings.openai_base_url,
    )
    analysis_service = AnalysisService(
        client=completion_client,
        model=resolved_settings.openai_model,
        temperature=resolved_settings.temperature,
        max_tokens=resolved_settings.max_tokens,
    )

    async def close_resources() -> None:
        await completion_client.close()

    return AppContainer(
        settings=resolved_settings,
        analysis_service=analysis_service,
        close_resources=close_resources,
    )
