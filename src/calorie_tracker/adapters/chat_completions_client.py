"""HTTP client for OpenAI-compatible chat completion APIs."""

from dataclasses import dataclass, field
from typing import Protocol

import httpx


class ChatCompletionsClient(Protocol):
    """Interface for chat completion requests."""

    async def create(self, payload: dict[str, object]) -> dict[str, object]:
        """Send a chat completion request and return the decoded response."""


@dataclass
class HttpxChatCompletionsClient(ChatCompletionsClient):
    """HTTPX-backed chat completion client with bearer auth."""

    api_key: str
    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 30
    extra_headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def create_client(
        cls,
        api_key: str,
        base_url: str,
        timeout_seconds: float = 30,
        extra_headers: dict[str, str] | None = None,
    ) -> "HttpxChatCompletionsClient":
        """Create a chat completion client with a managed httpx session."""
        return cls(
            api_key=api_key,
            base_url=base_url,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
            extra_headers=extra_headers or {},
        )

    async def create(self, payload: dict[str, object]) -> dict[str, object]:
        """POST to ``/chat/completions`` and return the JSON body."""
        url = f"{self.base_url}/chat/completions"
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            **self.extra_headers,
        }
        response = await self.http_client.post(
            url,
            json=payload,
            headers=headers,
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
