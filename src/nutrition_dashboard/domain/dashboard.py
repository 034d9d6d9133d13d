"""Dashboard snapshot and view state models."""

from dataclasses import dataclass

from nutrition_dashboard.domain.logs import MealLogRecord, NutritionLogRecord
from nutrition_dashboard.domain.profiles import Goals, Profile


@dataclass(frozen=True)
class DashboardSnapshot:
    """All-or-nothing aggregate of one user's dashboard data."""

    profile: Profile
    goals: Goals | None
    meal_logs: tuple[MealLogRecord, ...]
    nutrition_logs: tuple[NutritionLogRecord, ...]

    @property
    def latest_nutrition_log(self) -> NutritionLogRecord | None:
        """Most recent daily summary, shown in the daily overview."""
        return self.nutrition_logs[0] if self.nutrition_logs else None


@dataclass(frozen=True)
class Loading:
    """Identity resolution or the load pipeline is in flight."""

    name = "loading"
    navigation: tuple[str, ...] = ()


@dataclass(frozen=True)
class OnboardingIncomplete:
    """The profile is missing required fields or could not be fetched."""

    name = "onboarding_incomplete"
    fetch_failed: bool = False
    navigation: tuple[str, ...] = ("onboarding", "profile")


@dataclass(frozen=True)
class NoData:
    """Onboarding is complete but no snapshot could be assembled."""

    name = "no_data"
    error: str | None = None
    navigation: tuple[str, ...] = ("log-meal", "goals")


@dataclass(frozen=True)
class Ready:
    """Snapshot assembled; the full dashboard can render."""

    snapshot: DashboardSnapshot
    name = "ready"
    navigation: tuple[str, ...] = ()


ViewState = Loading | OnboardingIncomplete | NoData | Ready
