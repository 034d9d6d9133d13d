"""Selection of the active dashboard view."""

from nutrition_dashboard.domain.dashboard import (
    DashboardSnapshot,
    Loading,
    NoData,
    OnboardingIncomplete,
    Ready,
    ViewState,
)


def select_view_state(
    *,
    is_loading: bool,
    onboarding_complete: bool,
    snapshot: DashboardSnapshot | None,
    profile_fetch_failed: bool = False,
    aggregation_error: str | None = None,
) -> ViewState:
    """Map the pipeline outcome to exactly one view state."""
    if is_loading:
        return Loading()
    if not onboarding_complete:
        return OnboardingIncomplete(fetch_failed=profile_fetch_failed)
    if snapshot is None:
        return NoData(error=aggregation_error)
    return Ready(snapshot=snapshot)
