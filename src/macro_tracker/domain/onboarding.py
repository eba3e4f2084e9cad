"""Domain models for the onboarding flow."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class StepDefinition:
    """Declarative onboarding step definition."""

    number: int
    label: str


class OnboardingStep(Enum):
    """Ordered onboarding steps (single source of truth)."""

    GOAL = StepDefinition(1, "Goal")
    DETAILS = StepDefinition(2, "Details")
    ACTIVITY = StepDefinition(3, "Activity")
    DIET = StepDefinition(4, "Diet")
    TARGET = StepDefinition(5, "Target")

    @classmethod
    def from_number(cls, number: int) -> "OnboardingStep":
        """Return the step with the given 1-based number."""
        for step in cls:
            if step.value.number == number:
                return step
        raise ValueError(f"Unknown onboarding step: {number}")


TOTAL_STEPS = len(OnboardingStep)


class OnboardingCompletedError(RuntimeError):
    """Raised when advancing an onboarding flow that already finished."""


@dataclass(frozen=True)
class OnboardingState:
    """Position in the onboarding flow and the completion flag."""

    step: int = 1
    is_completed: bool = False


def step_labels() -> list[str]:
    """Return step labels in order."""
    return [entry.value.label for entry in OnboardingStep]
