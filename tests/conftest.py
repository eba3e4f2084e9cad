"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

import pytest

from macro_tracker.config import Settings
from macro_tracker.containers import AppContainer, build_container
from macro_tracker.domain.meals import Meal, MealCategory
from macro_tracker.services.meals import MealStore
from macro_tracker.services.onboarding import OnboardingStateMachine
from macro_tracker.services.persistence import StateStore
from macro_tracker.services.profile import ProfileStore

FIXED_NOW = datetime(2024, 5, 14, 12, 30, tzinfo=UTC)


@dataclass
class RecordingStateStore(StateStore):
    """In-memory state store that records every save."""

    blobs: dict[str, bytes] = field(default_factory=dict)
    saves: list[str] = field(default_factory=list)

    def load(self, key: str) -> bytes | None:
        return self.blobs.get(key)

    def save(self, key: str, value: bytes) -> None:
        self.saves.append(key)
        self.blobs[key] = value


def make_meal(  # noqa: PLR0913
    meal_id: str = "meal-1",
    *,
    name: str = "Oatmeal",
    calories: float = 300,
    protein_g: float = 10,
    carbs_g: float = 50,
    fat_g: float = 6,
    category: MealCategory = MealCategory.BREAKFAST,
    logged_at: str = "2024-05-14T08:00:00+00:00",
) -> Meal:
    return Meal(
        id=meal_id,
        name=name,
        portion="1 bowl",
        calories=calories,
        protein_g=protein_g,
        carbs_g=carbs_g,
        fat_g=fat_g,
        category=category,
        logged_at=logged_at,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(storage_backend="memory")


@pytest.fixture
def state_store() -> RecordingStateStore:
    return RecordingStateStore()


@pytest.fixture
def profile_store(state_store: RecordingStateStore) -> ProfileStore:
    return ProfileStore(state_store)


@pytest.fixture
def meal_store(state_store: RecordingStateStore) -> MealStore:
    return MealStore(state_store)


@pytest.fixture
def onboarding(
    profile_store: ProfileStore, state_store: RecordingStateStore
) -> OnboardingStateMachine:
    return OnboardingStateMachine(profile_store=profile_store, state_store=state_store)


@pytest.fixture
def container(settings: Settings, state_store: RecordingStateStore) -> AppContainer:
    return build_container(settings, state_store=state_store, clock=lambda: FIXED_NOW)
