"""Onboarding state machine gating access to the tracking experience."""

import logging
from dataclasses import dataclass, field

from macro_tracker.domain.onboarding import (
    TOTAL_STEPS,
    OnboardingCompletedError,
    OnboardingState,
    OnboardingStep,
)
from macro_tracker.services.persistence import StateCodec, StateStore
from macro_tracker.services.profile import ProfileStore

ONBOARDING_KEY = "onboarding"

_logger = logging.getLogger(__name__)
_CODEC = StateCodec.for_type(ONBOARDING_KEY, OnboardingState)


@dataclass
class OnboardingStateMachine:
    """Step position plus a completion flag that only reset() clears."""

    profile_store: ProfileStore
    state_store: StateStore
    _state: OnboardingState = field(init=False)

    def __post_init__(self) -> None:
        restored = _CODEC.read(self.state_store) or OnboardingState()
        self._state = OnboardingState(
            step=_clamp_step(restored.step), is_completed=restored.is_completed
        )

    @property
    def state(self) -> OnboardingState:
        """Return the current onboarding snapshot."""
        return self._state

    @property
    def step(self) -> int:
        return self._state.step

    @property
    def is_completed(self) -> bool:
        return self._state.is_completed

    @property
    def current_step(self) -> OnboardingStep:
        """Return the named step at the current position."""
        return OnboardingStep.from_number(self._state.step)

    def advance(self) -> OnboardingState:
        """Move forward; on the last step commit the profile and complete.

        Raises OnboardingCompletedError once the flow is already complete.
        """
        if self._state.is_completed:
            raise OnboardingCompletedError("Onboarding is already completed")
        if self._state.step < TOTAL_STEPS:
            return self._save(OnboardingState(step=self._state.step + 1))
        self.profile_store.commit()
        _logger.info("Onboarding completed")
        return self._save(OnboardingState(step=TOTAL_STEPS, is_completed=True))

    def retreat(self) -> OnboardingState:
        """Move back one step, staying on the first step."""
        return self.go_to(self._state.step - 1)

    def go_to(self, step: int) -> OnboardingState:
        """Jump to a step, clamped to the valid range."""
        return self._save(
            OnboardingState(
                step=_clamp_step(step), is_completed=self._state.is_completed
            )
        )

    def reset(self) -> OnboardingState:
        """Start over from the first step with the flag cleared."""
        _logger.info("Onboarding reset")
        return self._save(OnboardingState())

    def _save(self, state: OnboardingState) -> OnboardingState:
        self._state = state
        _CODEC.write(self.state_store, state)
        return state


def _clamp_step(step: int) -> int:
    return min(max(step, 1), TOTAL_STEPS)
