"""Dashboard read pipeline: evaluate, aggregate, select a view."""

import logging
from dataclasses import dataclass

from nutrition_dashboard.domain.dashboard import ViewState
from nutrition_dashboard.errors import AggregationError, ProfileFetchError
from nutrition_dashboard.services.dashboard import DashboardAggregator
from nutrition_dashboard.services.onboarding import OnboardingEvaluator
from nutrition_dashboard.services.view_state import select_view_state

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardOutcome:
    """View state plus the error that degraded it, if any."""

    state: ViewState
    error: Exception | None = None


@dataclass
class DashboardService:
    """Runs the dashboard pipeline for one identity without raising."""

    evaluator: OnboardingEvaluator
    aggregator: DashboardAggregator

    async def load(self, user_id: str) -> DashboardOutcome:
        """Return the view state for a user, degrading on failures."""
        try:
            status = await self.evaluator.evaluate(user_id)
        except ProfileFetchError as exc:
            _logger.exception("Profile fetch failed: user_id=%s", user_id)
            state = select_view_state(
                is_loading=False,
                onboarding_complete=False,
                snapshot=None,
                profile_fetch_failed=True,
            )
            return DashboardOutcome(state=state, error=exc)

        if not status.is_complete or status.profile is None:
            state = select_view_state(
                is_loading=False, onboarding_complete=False, snapshot=None
            )
            return DashboardOutcome(state=state)

        try:
            snapshot = await self.aggregator.aggregate(user_id, status.profile)
        except AggregationError as exc:
            _logger.exception(
                "Dashboard aggregation failed: user_id=%s source=%s",
                user_id,
                exc.source,
            )
            state = select_view_state(
                is_loading=False,
                onboarding_complete=True,
                snapshot=None,
                aggregation_error=str(exc),
            )
            return DashboardOutcome(state=state, error=exc)

        state = select_view_state(
            is_loading=False, onboarding_complete=True, snapshot=snapshot
        )
        return DashboardOutcome(state=state)
