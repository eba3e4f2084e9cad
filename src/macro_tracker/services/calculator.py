"""Daily calorie and macro target calculation."""

import math

from macro_tracker.domain.nutrition import DEFAULT_TARGETS, NutritionalTargets
from macro_tracker.domain.profile import ActivityLevel, Gender, GoalType, UserProfile

MIN_CALORIES = 1200
PROTEIN_KCAL_PER_G = 4
CARBS_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9

_ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY_ACTIVE: 1.375,
    ActivityLevel.MODERATELY_ACTIVE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
    ActivityLevel.EXTREMELY_ACTIVE: 1.9,
}

_GOAL_ADJUSTMENTS = {
    GoalType.WEIGHT_LOSS: -500,
    GoalType.MAINTENANCE: 0,
    GoalType.MUSCLE_GAIN: 300,
}

# protein, carbs, fat as percent of calories
_MACRO_SPLITS = {
    GoalType.WEIGHT_LOSS: (40, 30, 30),
    GoalType.MAINTENANCE: (30, 40, 30),
    GoalType.MUSCLE_GAIN: (35, 45, 20),
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return math.floor(value + 0.5)


def basal_metabolic_rate(
    weight_kg: float, height_cm: float, age: int, gender: Gender | None
) -> float:
    """Return BMR using the Mifflin-St Jeor equation.

    Every gender other than MALE takes the female offset.
    """
    offset = 5 if gender is Gender.MALE else -161
    return 10 * weight_kg + 6.25 * height_cm - 5 * age + offset


def activity_multiplier(level: ActivityLevel | None) -> float:
    """Return the TDEE multiplier for an activity level, sedentary if unset."""
    if level is None:
        return _ACTIVITY_MULTIPLIERS[ActivityLevel.SEDENTARY]
    return _ACTIVITY_MULTIPLIERS[level]


def macro_split(goal_type: GoalType) -> tuple[int, int, int]:
    """Return the protein/carbs/fat percentages for a goal."""
    return _MACRO_SPLITS[goal_type]


def compute_targets(profile: UserProfile) -> NutritionalTargets:
    """Derive daily targets from a profile.

    Falls back to DEFAULT_TARGETS when weight, height, or age is missing.
    Macro grams are derived from the unrounded calorie figure; calories are
    rounded last.
    """
    if not profile.has_biometrics():
        return DEFAULT_TARGETS

    bmr = basal_metabolic_rate(
        profile.weight_kg, profile.height_cm, profile.age, profile.gender
    )
    tdee = bmr * activity_multiplier(profile.activity_level)
    calories = max(MIN_CALORIES, tdee + _GOAL_ADJUSTMENTS[profile.goal_type])

    protein_pct, carbs_pct, fat_pct = macro_split(profile.goal_type)
    return NutritionalTargets(
        calories=round_half_up(calories),
        protein_g=round_half_up(calories * protein_pct / (100 * PROTEIN_KCAL_PER_G)),
        carbs_g=round_half_up(calories * carbs_pct / (100 * CARBS_KCAL_PER_G)),
        fat_g=round_half_up(calories * fat_pct / (100 * FAT_KCAL_PER_G)),
    )
