"""OpenAI chat completions client for parking sign analysis."""

from dataclasses import dataclass

from openai import APIConnectionError, APIStatusError, AsyncOpenAI

from parking_signs.services.analysis import CompletionClient, UpstreamError


@dataclass
class OpenAICompletionClient(CompletionClient):
    """Completion client backed by the OpenAI chat completions API."""

    client: AsyncOpenAI

    @classmethod
    def create(
        cls, api_key: str, base_url: str | None = None
    ) -> "OpenAICompletionClient":
        """Create a client that performs a single attempt per call."""
        return cls(
            client=AsyncOpenAI(api_key=api_key, base_url=base_url, max_retries=0)
        )

    async def complete(
        self,
        *,
        model: str,
        messages: list[dict[str, object]],
        temperature: float,
        max_tokens: int,
    ) -> str:
        """Call chat completions and return the first choice's text."""
        try:
            response = await self.client.chat.completions.create(
                model=model,
                messages=messages,
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except APIStatusError as exc:
            raise UpstreamError(
                f"OpenAI API responded with {exc.status_code}"
            ) from exc
        except APIConnectionError as exc:
            raise UpstreamError(f"OpenAI API unreachable: {exc}") from exc
        if not response.choices:
            raise UpstreamError("OpenAI returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise UpstreamError("OpenAI returned an empty response")
        return content

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.close()
