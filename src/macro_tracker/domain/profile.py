"""Domain models for the user profile."""

from dataclasses import dataclass
from enum import Enum


class GoalType(Enum):
    """Primary goal selected during onboarding."""

    WEIGHT_LOSS = "WEIGHT_LOSS"
    MAINTENANCE = "MAINTENANCE"
    MUSCLE_GAIN = "MUSCLE_GAIN"


class Gender(Enum):
    """Gender used by the BMR formula."""

    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"


class ActivityLevel(Enum):
    """Self-reported daily activity level."""

    SEDENTARY = "SEDENTARY"
    LIGHTLY_ACTIVE = "LIGHTLY_ACTIVE"
    MODERATELY_ACTIVE = "MODERATELY_ACTIVE"
    VERY_ACTIVE = "VERY_ACTIVE"
    EXTREMELY_ACTIVE = "EXTREMELY_ACTIVE"


class WeightChangeRate(Enum):
    """How quickly the user wants to move towards the target weight."""

    SLOW = "SLOW"
    MODERATE = "MODERATE"
    FAST = "FAST"


@dataclass(frozen=True)
class WeightChangeGoal:
    """Snapshot of a weight target, replaced whenever target or rate changes."""

    current_weight_kg: float
    target_weight_kg: float
    rate: WeightChangeRate


@dataclass(frozen=True)
class UserProfile:
    """Biometric, goal, and preference data collected during onboarding."""

    goal_type: GoalType = GoalType.WEIGHT_LOSS
    name: str | None = None
    age: int | None = None
    gender: Gender | None = None
    height_cm: float | None = None
    weight_kg: float | None = None
    activity_level: ActivityLevel | None = None
    dietary_preferences: frozenset[str] = frozenset()
    target_weight_kg: float | None = None
    weight_change_rate: WeightChangeRate | None = None
    weight_change_goal: WeightChangeGoal | None = None

    def has_biometrics(self) -> bool:
        """Return True when weight, height, and age are all known."""
        return bool(self.weight_kg) and bool(self.height_cm) and bool(self.age)
