"""Stateless relay from onboarding events to the automation webhook."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime

import httpx

from nutrition_dashboard.adapters.onboarding_webhook_client import (
    OnboardingWebhookClient,
)
from nutrition_dashboard.domain.webhooks import WebhookEvent, default_context
from nutrition_dashboard.errors import (
    ConfigurationError,
    UpstreamError,
    ValidationError,
)

_logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


def _isoformat(value: datetime) -> str:
    """Format as ISO-8601 with millisecond precision and a Z suffix."""
    return value.astimezone(UTC).isoformat(timespec="milliseconds").replace(
        "+00:00", "Z"
    )


@dataclass
class WebhookRelay:
    """Forwards one onboarding event per call; holds no per-request state."""

    client: OnboardingWebhookClient
    webhook_url: str | None
    clock: Callable[[], datetime] = field(default=_utc_now)

    def build_event(self, payload: dict[str, object]) -> WebhookEvent:
        """Validate the inbound body and apply defaults."""
        user_id = payload.get("user_id")
        if not user_id:
            raise ValidationError("User ID is required")
        created_at = payload.get("created_at") or _isoformat(self.clock())
        context = payload.get("context") or default_context()
        return WebhookEvent(
            user_id=user_id,
            created_at=created_at,
            context=context,
        )

    async def forward(self, payload: dict[str, object]) -> object:
        """Forward the event and return the upstream JSON body verbatim."""
        event = self.build_event(payload)
        if not self.webhook_url:
            raise ConfigurationError(
                "Server configuration error: n8n webhook URL missing."
            )

        try:
            response = await self.client.post_event(
                self.webhook_url, event.to_payload()
            )
        except httpx.HTTPError as exc:
            raise UpstreamError(None, str(exc)) from exc

        if not response.is_success:
            raise UpstreamError(response.status_code, response.text)

        _logger.info(
            "Onboarding webhook forwarded: user_id=%s status=%s",
            event.user_id,
            response.status_code,
        )
        return response.json()
