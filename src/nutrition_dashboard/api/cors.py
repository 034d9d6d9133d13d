"""Cross-origin headers for the public relay endpoints."""

from dataclasses import dataclass

from nutrition_dashboard.config import Settings


@dataclass(frozen=True)
class CorsPolicy:
    """Configured cross-origin allowances."""

    allow_origin: str
    allow_methods: str
    allow_headers: str
    max_age: int

    @classmethod
    def from_settings(cls, settings: Settings) -> "CorsPolicy":
        """Build the policy from application settings."""
        return cls(
            allow_origin=settings.cors_allow_origin,
            allow_methods=settings.cors_allow_methods,
            allow_headers=settings.cors_allow_headers,
            max_age=settings.cors_max_age,
        )

    def response_headers(self) -> dict[str, str]:
        """Headers attached to every relay response."""
        return {"Access-Control-Allow-Origin": self.allow_origin}

    def preflight_headers(self) -> dict[str, str]:
        """Headers answering an OPTIONS preflight request."""
        return {
            **self.response_headers(),
            "Access-Control-Allow-Methods": self.allow_methods,
            "Access-Control-Allow-Headers": self.allow_headers,
            "Access-Control-Max-Age": str(self.max_age),
        }
