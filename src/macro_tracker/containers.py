"""Dependency container wiring for the application."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import create_client

from macro_tracker.adapters.supabase_state_store import SupabaseStateStore
from macro_tracker.config import Settings
from macro_tracker.services.meals import MealStore
from macro_tracker.services.onboarding import OnboardingStateMachine
from macro_tracker.services.persistence import InMemoryStateStore, StateStore
from macro_tracker.services.profile import ProfileStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    state_store: StateStore
    profile_store: ProfileStore
    meal_store: MealStore
    onboarding: OnboardingStateMachine
    clock: Callable[[], datetime]


def utc_now() -> datetime:
    """Return the current UTC time."""
    return datetime.now(tz=UTC)


def build_state_store(settings: Settings) -> StateStore:
    """Create the configured state store backend."""
    if settings.storage_backend == "memory":
        return InMemoryStateStore()
    if not settings.supabase_url or not settings.supabase_service_key:
        raise RuntimeError(
            "Supabase storage requires SUPABASE_URL and SUPABASE_SERVICE_KEY"
        )
    supabase_client = create_client(
        settings.supabase_url, settings.supabase_service_key
    )
    return SupabaseStateStore(
        client=supabase_client,
        table=settings.state_table,
        namespace=settings.state_namespace,
    )


def build_container(
    settings: Settings | None = None,
    state_store: StateStore | None = None,
    clock: Callable[[], datetime] = utc_now,
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_store = state_store or build_state_store(resolved_settings)
    profile_store = ProfileStore(resolved_store)
    meal_store = MealStore(resolved_store)
    onboarding = OnboardingStateMachine(
        profile_store=profile_store, state_store=resolved_store
    )
    return AppContainer(
        settings=resolved_settings,
        state_store=resolved_store,
        profile_store=profile_store,
        meal_store=meal_store,
        onboarding=onboarding,
        clock=clock,
    )
