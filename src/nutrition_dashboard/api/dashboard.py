"""Dashboard read endpoint."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from nutrition_dashboard.domain.dashboard import (
    DashboardSnapshot,
    NoData,
    OnboardingIncomplete,
    Ready,
    ViewState,
)
from nutrition_dashboard.domain.session import SessionContext

if TYPE_CHECKING:
    from nutrition_dashboard.containers import AppContainer

router = APIRouter(tags=["dashboard"])


async def require_session(
    x_user_id: str | None = Header(default=None),
) -> SessionContext:
    """Build the session context from the identity header."""
    if not x_user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    return SessionContext(user_id=x_user_id, is_loading=False)


@router.get("/dashboard")
async def dashboard(
    request: Request, session: SessionContext = Depends(require_session)
) -> dict[str, object]:
    """Return the view state for the current user."""
    container: AppContainer = request.app.state.container
    outcome = await container.dashboard_service.load(str(session.user_id))
    return serialize_view_state(outcome.state)


def serialize_view_state(state: ViewState) -> dict[str, object]:
    """Convert a view state to a JSON-friendly dict."""
    payload: dict[str, object] = {
        "state": state.name,
        "navigation": list(state.navigation),
        "snapshot": None,
        "error": None,
    }
    if isinstance(state, Ready):
        payload["snapshot"] = _serialize_snapshot(state.snapshot)
    elif isinstance(state, NoData):
        payload["error"] = state.error
    elif isinstance(state, OnboardingIncomplete) and state.fetch_failed:
        payload["error"] = "profile_fetch_failed"
    return payload


def _serialize_snapshot(snapshot: DashboardSnapshot) -> dict[str, object]:
    latest = snapshot.latest_nutrition_log
    return {
        "profile": asdict(snapshot.profile),
        "goals": asdict(snapshot.goals) if snapshot.goals else None,
        "meal_logs": [asdict(log) for log in snapshot.meal_logs],
        "nutrition_logs": [asdict(log) for log in snapshot.nutrition_logs],
        "latest_nutrition_log": asdict(latest) if latest else None,
    }
