"""n8n onboarding webhook client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class OnboardingWebhookClient(Protocol):
    """Interface for posting onboarding events to the automation webhook."""

    async def post_event(self, url: str, payload: dict[str, object]) -> httpx.Response:
        """POST the event as JSON and return the raw response."""


@dataclass
class HttpxOnboardingWebhookClient(OnboardingWebhookClient):
    """HTTPX-backed webhook client."""

    http_client: httpx.AsyncClient
    timeout_seconds: float = 10.0

    @classmethod
    def create(cls, timeout_seconds: float = 10.0) -> "HttpxOnboardingWebhookClient":
        """Create a webhook client with a managed httpx session."""
        return cls(http_client=httpx.AsyncClient(), timeout_seconds=timeout_seconds)

    async def post_event(self, url: str, payload: dict[str, object]) -> httpx.Response:
        """POST the event; status handling is left to the caller."""
        return await self.http_client.post(
            url,
            json=payload,
            headers={"Content-Type": "application/json"},
            timeout=self.timeout_seconds,
        )

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
