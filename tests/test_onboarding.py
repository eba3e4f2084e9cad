"""Tests for the onboarding state machine."""

import pytest

from macro_tracker.domain.onboarding import (
    TOTAL_STEPS,
    OnboardingCompletedError,
    OnboardingState,
    OnboardingStep,
    step_labels,
)
from macro_tracker.domain.profile import GoalType
from macro_tracker.services.onboarding import ONBOARDING_KEY, OnboardingStateMachine
from macro_tracker.services.profile import PROFILE_KEY, ProfileStore
from tests.conftest import RecordingStateStore


def test_starts_on_first_step(onboarding: OnboardingStateMachine) -> None:
    assert onboarding.state == OnboardingState(step=1, is_completed=False)
    assert onboarding.current_step is OnboardingStep.GOAL
    assert TOTAL_STEPS == 5
    assert step_labels() == ["Goal", "Details", "Activity", "Diet", "Target"]


def test_retreat_from_first_step_stays(onboarding: OnboardingStateMachine) -> None:
    onboarding.retreat()

    assert onboarding.step == 1
    assert not onboarding.is_completed


def test_advance_through_all_steps_completes(
    onboarding: OnboardingStateMachine,
    profile_store: ProfileStore,
    state_store: RecordingStateStore,
) -> None:
    profile_store.set_goal_type(GoalType.MUSCLE_GAIN)
    for _ in range(TOTAL_STEPS - 1):
        onboarding.advance()
    assert onboarding.step == TOTAL_STEPS
    assert not onboarding.is_completed
    state_store.saves.clear()

    onboarding.advance()

    assert onboarding.state == OnboardingState(step=TOTAL_STEPS, is_completed=True)
    assert onboarding.current_step is OnboardingStep.TARGET
    assert state_store.saves == [PROFILE_KEY, ONBOARDING_KEY]


def test_advance_after_completion_raises(onboarding: OnboardingStateMachine) -> None:
    for _ in range(TOTAL_STEPS):
        onboarding.advance()

    with pytest.raises(OnboardingCompletedError):
        onboarding.advance()

    assert onboarding.state == OnboardingState(step=TOTAL_STEPS, is_completed=True)


def test_completion_is_kept_when_moving_between_steps(
    onboarding: OnboardingStateMachine,
) -> None:
    for _ in range(TOTAL_STEPS):
        onboarding.advance()

    onboarding.retreat()
    onboarding.go_to(2)

    assert onboarding.step == 2
    assert onboarding.is_completed


def test_reset_after_completion(onboarding: OnboardingStateMachine) -> None:
    for _ in range(TOTAL_STEPS):
        onboarding.advance()

    state = onboarding.reset()

    assert state == OnboardingState(step=1, is_completed=False)


def test_go_to_clamps_step(onboarding: OnboardingStateMachine) -> None:
    assert onboarding.go_to(0).step == 1
    assert onboarding.go_to(-3).step == 1
    assert onboarding.go_to(9).step == TOTAL_STEPS
    assert onboarding.go_to(3).step == 3
    assert onboarding.retreat().step == 2


def test_state_survives_restart(
    profile_store: ProfileStore, state_store: RecordingStateStore
) -> None:
    first = OnboardingStateMachine(profile_store=profile_store, state_store=state_store)
    first.advance()
    first.advance()

    restored = OnboardingStateMachine(
        profile_store=ProfileStore(state_store), state_store=state_store
    )

    assert restored.state == OnboardingState(step=3, is_completed=False)


def test_out_of_range_saved_step_is_clamped(
    profile_store: ProfileStore, state_store: RecordingStateStore
) -> None:
    state_store.blobs[ONBOARDING_KEY] = b'{"step": 0, "is_completed": false}'

    machine = OnboardingStateMachine(
        profile_store=profile_store, state_store=state_store
    )

    assert machine.step == 1
