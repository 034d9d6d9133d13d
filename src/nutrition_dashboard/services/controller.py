"""Per-session dashboard state holder.

The view layer owns one controller per mounted dashboard and supplies its own
navigator and notifier; the HTTP surface calls DashboardService directly.
"""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from nutrition_dashboard.domain.dashboard import Loading, ViewState
from nutrition_dashboard.domain.session import SessionContext
from nutrition_dashboard.services.pipeline import DashboardService

HOME_TARGET = "home"
LOAD_ERROR_TITLE = "Error"
LOAD_ERROR_DESCRIPTION = "Failed to load dashboard data. Please try again."
LOAD_ERROR_DURATION_MS = 5000

_logger = logging.getLogger(__name__)


class Navigator(Protocol):
    """Requests navigation to a logical target."""

    def navigate(self, target: str) -> None:
        """Navigate to the named target."""


class Notifier(Protocol):
    """Shows transient notifications to the user."""

    def notify(self, title: str, description: str, duration_ms: int) -> None:
        """Show a dismissible error notification."""


@dataclass
class DashboardController:
    """Keeps the view state in sync with the injected session context.

    Each session change starts a new generation. A pipeline result that
    resolves after a newer generation has started is dropped.
    """

    service: DashboardService
    navigator: Navigator
    notifier: Notifier
    state: ViewState = field(default_factory=Loading)
    _generation: int = field(default=0, init=False, repr=False)

    async def on_session_change(self, session: SessionContext) -> ViewState:
        """Recompute the view state for a new session context."""
        self._generation += 1
        generation = self._generation
        self.state = Loading()
        if session.is_loading:
            return self.state
        if session.user_id is None:
            self.navigator.navigate(HOME_TARGET)
            return self.state

        outcome = await self.service.load(session.user_id)
        if generation != self._generation:
            _logger.info(
                "Discarding stale dashboard result: user_id=%s", session.user_id
            )
            return self.state
        if outcome.error is not None:
            self.notifier.notify(
                LOAD_ERROR_TITLE, LOAD_ERROR_DESCRIPTION, LOAD_ERROR_DURATION_MS
            )
        self.state = outcome.state
        return self.state

    def teardown(self) -> None:
        """Drop any in-flight result."""
        self._generation += 1

    def navigate(self, target: str) -> None:
        """Forward a navigation request from the view."""
        self.navigator.navigate(target)
