"""Tests for the target calculator."""

from macro_tracker.domain.nutrition import DEFAULT_TARGETS
from macro_tracker.domain.profile import ActivityLevel, Gender, GoalType, UserProfile
from macro_tracker.services.calculator import (
    activity_multiplier,
    basal_metabolic_rate,
    compute_targets,
    macro_split,
    round_half_up,
)


def test_missing_biometrics_fall_back_to_defaults() -> None:
    assert compute_targets(UserProfile()) == DEFAULT_TARGETS
    assert compute_targets(UserProfile(weight_kg=70, height_cm=175)) == DEFAULT_TARGETS
    assert compute_targets(UserProfile(weight_kg=70, age=30)) == DEFAULT_TARGETS
    assert DEFAULT_TARGETS.calories == 2000
    assert DEFAULT_TARGETS.protein_g == 150
    assert DEFAULT_TARGETS.carbs_g == 200
    assert DEFAULT_TARGETS.fat_g == 65


def test_bmr_uses_male_offset() -> None:
    assert basal_metabolic_rate(70, 175, 30, Gender.MALE) == 1648.75


def test_bmr_uses_female_offset_for_other_genders() -> None:
    female = basal_metabolic_rate(70, 175, 30, Gender.FEMALE)
    assert female == 1482.75
    assert basal_metabolic_rate(70, 175, 30, Gender.OTHER) == female
    assert basal_metabolic_rate(70, 175, 30, None) == female


def test_activity_multiplier_defaults_to_sedentary() -> None:
    assert activity_multiplier(None) == 1.2
    assert activity_multiplier(ActivityLevel.LIGHTLY_ACTIVE) == 1.375
    assert activity_multiplier(ActivityLevel.EXTREMELY_ACTIVE) == 1.9


def test_maintenance_male_sedentary() -> None:
    profile = UserProfile(
        goal_type=GoalType.MAINTENANCE,
        age=30,
        gender=Gender.MALE,
        height_cm=175,
        weight_kg=70,
        activity_level=ActivityLevel.SEDENTARY,
    )

    targets = compute_targets(profile)

    # tdee = 1648.75 * 1.2 = 1978.5, rounded half up
    assert targets.calories == 1979
    assert targets.protein_g == 148
    assert targets.carbs_g == 198
    assert targets.fat_g == 66


def test_weight_loss_female_moderately_active() -> None:
    profile = UserProfile(
        goal_type=GoalType.WEIGHT_LOSS,
        age=25,
        gender=Gender.FEMALE,
        height_cm=165,
        weight_kg=60,
        activity_level=ActivityLevel.MODERATELY_ACTIVE,
    )

    targets = compute_targets(profile)

    assert targets.calories == 1585
    assert targets.protein_g == 159
    assert targets.carbs_g == 119
    assert targets.fat_g == 53


def test_muscle_gain_adds_surplus() -> None:
    profile = UserProfile(
        goal_type=GoalType.MUSCLE_GAIN,
        age=30,
        gender=Gender.MALE,
        height_cm=180,
        weight_kg=82,
        activity_level=ActivityLevel.VERY_ACTIVE,
    )

    targets = compute_targets(profile)

    # bmr 1800, tdee 3105, +300
    assert targets.calories == 3405
    assert macro_split(GoalType.MUSCLE_GAIN) == (35, 45, 20)
    assert targets.protein_g == 298
    assert targets.carbs_g == 383
    assert targets.fat_g == 76


def test_calorie_floor_applies_before_macro_split() -> None:
    profile = UserProfile(
        goal_type=GoalType.WEIGHT_LOSS,
        age=80,
        gender=Gender.FEMALE,
        height_cm=150,
        weight_kg=40,
    )

    targets = compute_targets(profile)

    assert targets.calories == 1200
    assert targets.protein_g == 120
    assert targets.carbs_g == 90
    assert targets.fat_g == 40


def test_targets_are_consistent_with_macro_calories() -> None:
    for goal in GoalType:
        for level in ActivityLevel:
            profile = UserProfile(
                goal_type=goal,
                age=42,
                gender=Gender.OTHER,
                height_cm=170,
                weight_kg=77,
                activity_level=level,
            )
            targets = compute_targets(profile)
            macro_calories = (
                4 * targets.protein_g + 4 * targets.carbs_g + 9 * targets.fat_g
            )
            assert abs(targets.calories - macro_calories) <= 9


def test_compute_targets_is_deterministic() -> None:
    profile = UserProfile(age=35, gender=Gender.MALE, height_cm=182, weight_kg=90)
    assert compute_targets(profile) == compute_targets(profile)


def test_round_half_up() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(1978.5) == 1979
    assert round_half_up(2.49) == 2
