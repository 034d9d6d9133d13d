"""Concurrent aggregation of dashboard data."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Protocol

from nutrition_dashboard.domain.dashboard import DashboardSnapshot
from nutrition_dashboard.domain.logs import MealLogRecord, NutritionLogRecord
from nutrition_dashboard.domain.profiles import Goals, Profile
from nutrition_dashboard.errors import AggregationError

DEFAULT_HISTORY_LIMIT = 30

_logger = logging.getLogger(__name__)


class DashboardRepository(Protocol):
    """Read interface for the collections shown on the dashboard."""

    async def get_goals(self, user_id: str) -> Goals | None:
        """Return the user's goals row, or None when absent."""

    async def list_meal_logs(self, user_id: str, limit: int) -> list[MealLogRecord]:
        """Return meal logs ordered by created_at descending."""

    async def list_nutrition_logs(
        self, user_id: str, limit: int
    ) -> list[NutritionLogRecord]:
        """Return nutrition logs ordered by date descending."""


@dataclass
class DashboardAggregator:
    """Builds a DashboardSnapshot from three concurrent queries."""

    repository: DashboardRepository
    history_limit: int = DEFAULT_HISTORY_LIMIT

    async def aggregate(self, user_id: str, profile: Profile) -> DashboardSnapshot:
        """Fetch goals and logs together and assemble a snapshot.

        All three queries are awaited before any result is inspected. If one
        fails, the first failure in dispatch order is raised as an
        AggregationError and nothing is assembled.
        """
        sources = ("goals", "meal_logs", "nutrition_logs")
        results = await asyncio.gather(
            self.repository.get_goals(user_id),
            self.repository.list_meal_logs(user_id, self.history_limit),
            self.repository.list_nutrition_logs(user_id, self.history_limit),
            return_exceptions=True,
        )
        for source, result in zip(sources, results, strict=True):
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    raise result
                raise AggregationError(source, result) from result

        goals, meal_logs, nutrition_logs = results
        _logger.info(
            "Dashboard aggregated: user_id=%s goals=%s meals=%s nutrition=%s",
            user_id,
            goals is not None,
            len(meal_logs),
            len(nutrition_logs),
        )
        return DashboardSnapshot(
            profile=profile,
            goals=goals,
            meal_logs=tuple(meal_logs),
            nutrition_logs=tuple(nutrition_logs),
        )
