"""Parking sign analysis service backed by a vision-capable chat model."""

import json
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol

SYSTEM_PROMPT = """You are a parking sign analysis system. Analyze the provided \
parking sign images and determine:
1. Whether parking is currently allowed (considering current time and day)
2. Any time restrictions or limits
3. Special conditions or exceptions
4. Payment requirements if any

Provide your response in JSON format with the following structure:
{
    "canPark": boolean,
    "explanation": "clear explanation of the decision",
    "restrictions": ["list", "of", "restrictions"],
    "timeLimit": optional_integer_minutes
}"""

USER_PROMPT = "Can I park here right now? Analyze these parking signs."


class AnalysisError(Exception):
    """Base error for failed parking sign analyses."""


class UpstreamError(AnalysisError):
    """Raised when the model provider call does not succeed."""


class VerdictParseError(AnalysisError):
    """Raised when no JSON verdict can be extracted from the model reply."""


class CompletionClient(Protocol):
    """Interface for chat completion calls that return raw reply text."""

    async def complete(
        self,
        *,
        model: str,
        messages: list[dict[str, object]],
        temperature: float,
        max_tokens: int,
    ) -> str:
        """Return the text of the first completion choice."""


@dataclass
class AnalysisService:
    """Service that shapes the analysis prompt and extracts the verdict."""

    client: CompletionClient
    model: str
    temperature: float = 0.2
    max_tokens: int = 500
    clock: Callable[[], datetime] = field(default=datetime.now)

    async def analyze(self, images: list[str]) -> dict[str, object]:
        """Analyze the images and return the model's verdict object as-is."""
        messages = build_messages(images, now=self.clock())
        reply = await self.client.complete(
            model=self.model,
            messages=messages,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )
        return extract_json_object(reply)


def build_messages(
    images: list[str], now: datetime | None = None
) -> list[dict[str, object]]:
    """Build the system and user messages for a set of sign images."""
    system_prompt = SYSTEM_PROMPT
    if now is not None:
        system_prompt = (
            f"{SYSTEM_PROMPT}\n\nThe current local time is "
            f"{now.strftime('%A, %Y-%m-%d %H:%M')}."
        )
    content: list[dict[str, object]] = [{"type": "text", "text": USER_PROMPT}]
    content.extend(
        {"type": "image_url", "image_url": {"url": image}} for image in images
    )
    return [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": content},
    ]


def extract_json_object(text: str) -> dict[str, object]:
    """Parse the span from the first '{' to the last '}' in the reply.

    Prose before and after the object is ignored, so replies such as
    ``"Here is the result:\\n{...}\\nThanks"`` still parse.
    """
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        raise VerdictParseError("Could not parse JSON from response")
    try:
        parsed = json.loads(text[start : end + 1])
    except json.JSONDecodeError as exc:
        raise VerdictParseError(str(exc)) from exc
    if not isinstance(parsed, dict):
        raise VerdictParseError("Model reply JSON is not an object")
    return parsed
