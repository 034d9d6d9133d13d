"""Supabase repository for onboarding profiles."""

from dataclasses import dataclass

from supabase import AsyncClient

from nutrition_dashboard.domain.profiles import Profile
from nutrition_dashboard.services.onboarding import ProfileRepository

_PROFILE_COLUMNS = {
    "user_id",
    "full_name",
    "weight_kg",
    "height_cm",
    "goal_type",
    "target_weight",
}


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profile reads."""

    client: AsyncClient

    async def get_profile(self, user_id: str) -> Profile | None:
        """Return the profile row for a user, if present."""
        response = (
            await self.client.table("user_profiles")
            .select("*")
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(user_id, response.data[0])


def _parse_profile(user_id: str, row: dict[str, object]) -> Profile:
    return Profile(
        user_id=str(row.get("user_id") or user_id),
        full_name=row.get("full_name"),
        weight_kg=row.get("weight_kg"),
        height_cm=row.get("height_cm"),
        goal_type=row.get("goal_type"),
        target_weight=row.get("target_weight"),
        extra={
            key: value for key, value in row.items() if key not in _PROFILE_COLUMNS
        },
    )
