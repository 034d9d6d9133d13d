"""Onboarding completeness evaluation."""

import logging
from dataclasses import dataclass
from typing import Protocol

from nutrition_dashboard.domain.profiles import Profile
from nutrition_dashboard.errors import ProfileFetchError

REQUIRED_FIELDS: tuple[str, ...] = ("full_name", "weight_kg", "height_cm", "goal_type")

_logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Read interface for user profiles."""

    async def get_profile(self, user_id: str) -> Profile | None:
        """Return the profile row for a user, or None when absent."""


@dataclass(frozen=True)
class OnboardingStatus:
    """Result of evaluating a user's profile."""

    profile: Profile | None
    is_complete: bool


def is_onboarding_complete(profile: Profile | None) -> bool:
    """Return true when every required field is present and truthy."""
    if profile is None:
        return False
    return all(getattr(profile, name, None) for name in REQUIRED_FIELDS)


def missing_fields(profile: Profile | None) -> list[str]:
    """Return required fields that are absent or falsy, in order."""
    if profile is None:
        return list(REQUIRED_FIELDS)
    return [name for name in REQUIRED_FIELDS if not getattr(profile, name, None)]


@dataclass
class OnboardingEvaluator:
    """Fetches a profile and checks it against the required field set."""

    repository: ProfileRepository

    async def evaluate(self, user_id: str) -> OnboardingStatus:
        """Return the onboarding status for a user.

        A missing profile row is an incomplete profile. A failed query is
        not, and raises ProfileFetchError instead.
        """
        try:
            profile = await self.repository.get_profile(user_id)
        except Exception as exc:
            raise ProfileFetchError(user_id) from exc
        is_complete = is_onboarding_complete(profile)
        if not is_complete:
            _logger.info(
                "Onboarding incomplete: user_id=%s missing=%s",
                user_id,
                ",".join(missing_fields(profile)),
            )
        return OnboardingStatus(profile=profile, is_complete=is_complete)
