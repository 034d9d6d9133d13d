"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import AsyncClient

from nutrition_dashboard.adapters.onboarding_webhook_client import (
    HttpxOnboardingWebhookClient,
)
from nutrition_dashboard.adapters.supabase_dashboard_repository import (
    SupabaseDashboardRepository,
)
from nutrition_dashboard.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from nutrition_dashboard.config import Settings, normalize_webhook_url
from nutrition_dashboard.services.dashboard import DashboardAggregator
from nutrition_dashboard.services.onboarding import OnboardingEvaluator
from nutrition_dashboard.services.pipeline import DashboardService
from nutrition_dashboard.services.webhooks import WebhookRelay


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    dashboard_service: DashboardService
    webhook_relay: WebhookRelay
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = AsyncClient(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    evaluator = OnboardingEvaluator(SupabaseProfileRepository(supabase_client))
    aggregator = DashboardAggregator(
        repository=SupabaseDashboardRepository(supabase_client),
        history_limit=resolved_settings.dashboard_history_limit,
    )
    dashboard_service = DashboardService(evaluator=evaluator, aggregator=aggregator)
    webhook_client = HttpxOnboardingWebhookClient.create(
        timeout_seconds=resolved_settings.webhook_timeout_seconds
    )
    webhook_relay = WebhookRelay(
        client=webhook_client,
        webhook_url=normalize_webhook_url(
            resolved_settings.n8n_onboarding_webhook_url
        ),
    )

    async def close_resources() -> None:
        await webhook_client.close()

    return AppContainer(
        settings=resolved_settings,
        dashboard_service=dashboard_service,
        webhook_relay=webhook_relay,
        close_resources=close_resources,
    )
