"""Tests for view state selection."""

import pytest

from nutrition_dashboard.domain.dashboard import (
    DashboardSnapshot,
    Loading,
    NoData,
    OnboardingIncomplete,
    Ready,
)
from nutrition_dashboard.services.view_state import select_view_state
from tests.conftest import complete_profile

_SNAPSHOT = DashboardSnapshot(
    profile=complete_profile(), goals=None, meal_logs=(), nutrition_logs=()
)


@pytest.mark.parametrize("onboarding_complete", [True, False])
@pytest.mark.parametrize("snapshot", [None, _SNAPSHOT])
def test_loading_wins(onboarding_complete: bool, snapshot) -> None:
    state = select_view_state(
        is_loading=True, onboarding_complete=onboarding_complete, snapshot=snapshot
    )

    assert state == Loading()


@pytest.mark.parametrize("snapshot", [None, _SNAPSHOT])
def test_incomplete_onboarding(snapshot) -> None:
    state = select_view_state(
        is_loading=False, onboarding_complete=False, snapshot=snapshot
    )

    assert state == OnboardingIncomplete()
    assert state.navigation == ("onboarding", "profile")


def test_profile_fetch_failure_keeps_incomplete_view() -> None:
    state = select_view_state(
        is_loading=False,
        onboarding_complete=False,
        snapshot=None,
        profile_fetch_failed=True,
    )

    assert isinstance(state, OnboardingIncomplete)
    assert state.fetch_failed is True


def test_complete_without_snapshot_is_no_data() -> None:
    state = select_view_state(
        is_loading=False,
        onboarding_complete=True,
        snapshot=None,
        aggregation_error="boom",
    )

    assert state == NoData(error="boom")
    assert state.navigation == ("log-meal", "goals")


def test_complete_with_snapshot_is_ready() -> None:
    state = select_view_state(
        is_loading=False, onboarding_complete=True, snapshot=_SNAPSHOT
    )

    assert state == Ready(snapshot=_SNAPSHOT)
    assert state.name == "ready"
