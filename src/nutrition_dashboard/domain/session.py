"""Session context supplied by the authentication provider."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SessionContext:
    """Current identity and whether the provider is still resolving it."""

    user_id: str | None
    is_loading: bool = False
