"""Weight goal progress and duration estimates."""

import math
from dataclasses import dataclass

from macro_tracker.domain.profile import GoalType, WeightChangeRate

MAINTENANCE_PROGRESS = 50.0
MAX_LOSS_FRACTION = 0.3
MAX_GAIN_FRACTION = 0.2

_WEEKLY_RATES_KG = {
    WeightChangeRate.SLOW: 0.25,
    WeightChangeRate.MODERATE: 0.5,
    WeightChangeRate.FAST: 1.0,
}
_FAST_GAIN_RATE_KG = 0.75


@dataclass(frozen=True)
class WeightGoalEstimate:
    """How far along a weight goal is and how long it should take."""

    difference_kg: float
    progress_percent: float
    estimated_weeks: int


def weekly_rate(goal_type: GoalType, rate: WeightChangeRate | None) -> float:
    """Return the expected weekly weight change in kg."""
    if rate is WeightChangeRate.FAST and goal_type is GoalType.MUSCLE_GAIN:
        return _FAST_GAIN_RATE_KG
    return _WEEKLY_RATES_KG[rate or WeightChangeRate.MODERATE]


def progress_percent(
    current_weight_kg: float, target_weight_kg: float, goal_type: GoalType
) -> float:
    """Return how close the target is to the current weight, in [0, 100].

    Loss progress is measured against 30% of current weight, gain against 20%.
    A target on the wrong side of the current weight scores 0, as does a
    current weight that is not positive.
    """
    diff = target_weight_kg - current_weight_kg
    if goal_type is GoalType.MAINTENANCE:
        return MAINTENANCE_PROGRESS
    if goal_type is GoalType.WEIGHT_LOSS:
        if diff >= 0:
            return 0.0
        max_loss = current_weight_kg * MAX_LOSS_FRACTION
        if max_loss <= 0:
            return 0.0
        return _clamp_percent(100 - abs(diff) / max_loss * 100)
    if diff <= 0:
        return 0.0
    max_gain = current_weight_kg * MAX_GAIN_FRACTION
    if max_gain <= 0:
        return 0.0
    return _clamp_percent(diff / max_gain * 100)


def estimated_weeks(
    current_weight_kg: float,
    target_weight_kg: float,
    goal_type: GoalType,
    rate: WeightChangeRate | None,
) -> int:
    """Return whole weeks needed to reach the target at the chosen rate."""
    diff = target_weight_kg - current_weight_kg
    if goal_type is GoalType.MAINTENANCE or diff == 0:
        return 0
    return math.ceil(abs(diff) / weekly_rate(goal_type, rate))


def estimate(
    current_weight_kg: float,
    target_weight_kg: float,
    goal_type: GoalType,
    rate: WeightChangeRate | None,
) -> WeightGoalEstimate:
    """Return progress and duration for a weight goal."""
    return WeightGoalEstimate(
        difference_kg=target_weight_kg - current_weight_kg,
        progress_percent=progress_percent(
            current_weight_kg, target_weight_kg, goal_type
        ),
        estimated_weeks=estimated_weeks(
            current_weight_kg, target_weight_kg, goal_type, rate
        ),
    )


def _clamp_percent(value: float) -> float:
    return min(max(value, 0.0), 100.0)
