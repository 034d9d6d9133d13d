"""Supabase repository for goals, meal logs and nutrition logs."""

from dataclasses import dataclass
from datetime import date, datetime

from supabase import AsyncClient

from nutrition_dashboard.domain.logs import MealLogRecord, NutritionLogRecord
from nutrition_dashboard.domain.profiles import Goals
from nutrition_dashboard.services.dashboard import DashboardRepository


@dataclass
class SupabaseDashboardRepository(DashboardRepository):
    """Supabase implementation for dashboard queries."""

    client: AsyncClient

    async def get_goals(self, user_id: str) -> Goals | None:
        """Return the goals row for a user, if present."""
        response = (
            await self.client.table("user_goals")
            .select("*")
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return Goals(
            target_calories=_optional_float(row.get("target_calories")),
            target_protein_ratio=_optional_float(row.get("target_protein_ratio")),
            target_carbs_ratio=_optional_float(row.get("target_carbs_ratio")),
            target_fat_ratio=_optional_float(row.get("target_fat_ratio")),
            target_weight_kg=_optional_float(row.get("target_weight_kg")),
        )

    async def list_meal_logs(self, user_id: str, limit: int) -> list[MealLogRecord]:
        """Return the most recent meal logs, newest first."""
        response = (
            await self.client.table("meal_logs")
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_meal_log(row) for row in response.data or []]

    async def list_nutrition_logs(
        self, user_id: str, limit: int
    ) -> list[NutritionLogRecord]:
        """Return the most recent daily summaries, newest first."""
        response = (
            await self.client.table("nutrition_logs")
            .select("*")
            .eq("user_id", user_id)
            .order("date", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_nutrition_log(row) for row in response.data or []]


def _optional_float(value: object) -> float | None:
    if value is None:
        return None
    return float(value)


def _parse_meal_log(row: dict[str, object]) -> MealLogRecord:
    created_at_raw = row.get("created_at")
    created_at = (
        datetime.fromisoformat(created_at_raw)
        if isinstance(created_at_raw, str) and created_at_raw
        else None
    )
    return MealLogRecord(
        total_calories=float(row.get("total_calories") or 0.0),
        protein=float(row.get("protein") or 0.0),
        carbs=float(row.get("carbs") or 0.0),
        fat=float(row.get("fat") or 0.0),
        created_at=created_at,
    )


def _parse_nutrition_log(row: dict[str, object]) -> NutritionLogRecord:
    day_raw = row.get("date")
    day = (
        date.fromisoformat(day_raw[:10])
        if isinstance(day_raw, str) and day_raw
        else None
    )
    return NutritionLogRecord(
        date=day,
        calories=float(row.get("calories") or 0.0),
        protein=float(row.get("protein") or 0.0),
        carbs=float(row.get("carbs") or 0.0),
        fat=float(row.get("fat") or 0.0),
        fiber=float(row.get("fiber") or 0.0),
    )
