"""Domain model for onboarding webhook events."""

from dataclasses import dataclass, field


def default_context() -> dict[str, object]:
    """Return the context sent when the caller supplies none."""
    return {"platform": "web", "source": "onboarding"}


@dataclass(frozen=True)
class WebhookEvent:
    """Onboarding event forwarded to the automation webhook."""

    user_id: object
    created_at: object
    context: object = field(default_factory=default_context)

    def to_payload(self) -> dict[str, object]:
        """Return the JSON body for the outbound request."""
        return {
            "user_id": self.user_id,
            "created_at": self.created_at,
            "context": self.context,
        }
