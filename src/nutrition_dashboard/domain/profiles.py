"""Domain models for user profiles and nutrition goals."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Profile:
    """A user's onboarding profile as stored in ``user_profiles``."""

    user_id: str
    full_name: str | None = None
    weight_kg: float | None = None
    height_cm: float | None = None
    goal_type: str | None = None
    target_weight: float | None = None
    extra: dict[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class Goals:
    """Daily calorie and macro targets from ``user_goals``."""

    target_calories: float | None
    target_protein_ratio: float | None
    target_carbs_ratio: float | None
    target_fat_ratio: float | None
    target_weight_kg: float | None
