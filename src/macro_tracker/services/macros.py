"""Macro breakdown and target progress views."""

import math

from macro_tracker.domain.nutrition import (
    MacroPercentages,
    MacroProgress,
    NutritionalTargets,
    NutritionalTotals,
)
from macro_tracker.services.calculator import round_half_up

EVEN_SPLIT = MacroPercentages(protein=33.33, carbs=33.33, fat=33.34)


def percentages(totals: NutritionalTotals) -> MacroPercentages:
    """Return each macro's share of total macro grams.

    Shares are rounded independently, so they may not add up to exactly 100.
    With no macros logged the even split is returned.
    """
    macro_sum = totals.protein_g + totals.carbs_g + totals.fat_g
    if macro_sum == 0:
        return EVEN_SPLIT
    return MacroPercentages(
        protein=round_half_up(100 * totals.protein_g / macro_sum),
        carbs=round_half_up(100 * totals.carbs_g / macro_sum),
        fat=round_half_up(100 * totals.fat_g / macro_sum),
    )


def progress(total: float, target: float) -> int:
    """Return progress towards a target in percent, clamped to [0, 100]."""
    if target == 0:
        return 0
    ratio = 100 * total / target
    if math.isnan(ratio):
        return 0
    return round_half_up(min(max(ratio, 0), 100))


def macro_progress(
    totals: NutritionalTotals, targets: NutritionalTargets
) -> MacroProgress:
    """Return progress for calories and each macro."""
    return MacroProgress(
        calories=progress(totals.calories, targets.calories),
        protein=progress(totals.protein_g, targets.protein_g),
        carbs=progress(totals.carbs_g, targets.carbs_g),
        fat=progress(totals.fat_g, targets.fat_g),
    )


def remaining_calories(totals: NutritionalTotals, targets: NutritionalTargets) -> float:
    """Return calories left for the day, never negative."""
    return max(0, targets.calories - totals.calories)
