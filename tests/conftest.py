"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field
from datetime import UTC, date, datetime

import httpx
import pytest

from nutrition_dashboard.config import Settings
from nutrition_dashboard.containers import AppContainer
from nutrition_dashboard.domain.logs import MealLogRecord, NutritionLogRecord
from nutrition_dashboard.domain.profiles import Goals, Profile
from nutrition_dashboard.services.dashboard import (
    DashboardAggregator,
    DashboardRepository,
)
from nutrition_dashboard.services.onboarding import (
    OnboardingEvaluator,
    ProfileRepository,
)
from nutrition_dashboard.services.pipeline import DashboardService
from nutrition_dashboard.services.webhooks import WebhookRelay

WEBHOOK_URL = "https://n8n.example.com/webhook/onboarding"


def complete_profile(user_id: str = "user-1") -> Profile:
    return Profile(
        user_id=user_id,
        full_name="A",
        weight_kg=70,
        height_cm=170,
        goal_type="lose",
    )


def sample_goals() -> Goals:
    return Goals(
        target_calories=2000,
        target_protein_ratio=0.3,
        target_carbs_ratio=0.4,
        target_fat_ratio=0.3,
        target_weight_kg=65,
    )


def sample_meal_log(calories: float = 500) -> MealLogRecord:
    return MealLogRecord(
        total_calories=calories,
        protein=30,
        carbs=50,
        fat=15,
        created_at=datetime(2026, 10, 18, 12, 0, tzinfo=UTC),
    )


def sample_nutrition_log(day: date = date(2026, 10, 18)) -> NutritionLogRecord:
    return NutritionLogRecord(
        date=day, calories=1800, protein=120, carbs=200, fat=60, fiber=25
    )


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profiles: dict[str, Profile] = field(default_factory=dict)
    error: Exception | None = None
    calls: list[str] = field(default_factory=list)

    async def get_profile(self, user_id: str) -> Profile | None:
        self.calls.append(user_id)
        if self.error is not None:
            raise self.error
        return self.profiles.get(user_id)


@dataclass
class InMemoryDashboardRepository(DashboardRepository):
    """In-memory dashboard repository with per-query failure injection."""

    goals: dict[str, Goals] = field(default_factory=dict)
    meal_logs: dict[str, list[MealLogRecord]] = field(default_factory=dict)
    nutrition_logs: dict[str, list[NutritionLogRecord]] = field(default_factory=dict)
    failures: dict[str, Exception] = field(default_factory=dict)
    calls: list[tuple[str, str, int | None]] = field(default_factory=list)
    gate: asyncio.Event | None = None

    async def _query(self, source: str, user_id: str, limit: int | None) -> None:
        self.calls.append((source, user_id, limit))
        if self.gate is not None:
            await self.gate.wait()
        if source in self.failures:
            raise self.failures[source]

    async def get_goals(self, user_id: str) -> Goals | None:
        await self._query("goals", user_id, None)
        return self.goals.get(user_id)

    async def list_meal_logs(self, user_id: str, limit: int) -> list[MealLogRecord]:
        await self._query("meal_logs", user_id, limit)
        return self.meal_logs.get(user_id, [])[:limit]

    async def list_nutrition_logs(
        self, user_id: str, limit: int
    ) -> list[NutritionLogRecord]:
        await self._query("nutrition_logs", user_id, limit)
        return self.nutrition_logs.get(user_id, [])[:limit]


@dataclass
class FakeWebhookClient:
    """Fake webhook client that records outbound events."""

    response: httpx.Response = field(
        default_factory=lambda: httpx.Response(200, json={"status": "queued"})
    )
    error: Exception | None = None
    calls: list[tuple[str, dict[str, object]]] = field(default_factory=list)

    async def post_event(self, url: str, payload: dict[str, object]) -> httpx.Response:
        self.calls.append((url, payload))
        if self.error is not None:
            raise self.error
        return self.response


@dataclass
class RecordingNavigator:
    """Navigator that records requested targets."""

    targets: list[str] = field(default_factory=list)

    def navigate(self, target: str) -> None:
        self.targets.append(target)


@dataclass
class RecordingNotifier:
    """Notifier that records shown notifications."""

    notifications: list[tuple[str, str, int]] = field(default_factory=list)

    def notify(self, title: str, description: str, duration_ms: int) -> None:
        self.notifications.append((title, description, duration_ms))


def build_dashboard_service(
    profiles: InMemoryProfileRepository, dashboard: InMemoryDashboardRepository
) -> DashboardService:
    return DashboardService(
        evaluator=OnboardingEvaluator(profiles),
        aggregator=DashboardAggregator(dashboard),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
        n8n_onboarding_webhook_url=WEBHOOK_URL,
    )


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def dashboard_repository() -> InMemoryDashboardRepository:
    return InMemoryDashboardRepository()


@pytest.fixture
def webhook_client() -> FakeWebhookClient:
    return FakeWebhookClient()


@pytest.fixture
def container(
    settings: Settings,
    profile_repository: InMemoryProfileRepository,
    dashboard_repository: InMemoryDashboardRepository,
    webhook_client: FakeWebhookClient,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        dashboard_service=build_dashboard_service(
            profile_repository, dashboard_repository
        ),
        webhook_relay=WebhookRelay(
            client=webhook_client,
            webhook_url=settings.n8n_onboarding_webhook_url,
        ),
        close_resources=close_resources,
    )
