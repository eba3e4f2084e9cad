"""Nutrition domain models."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class NutritionalTargets:
    """Daily calorie and macro targets, always replaced as a whole."""

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float


DEFAULT_TARGETS = NutritionalTargets(
    calories=2000, protein_g=150, carbs_g=200, fat_g=65
)


@dataclass(frozen=True)
class NutritionalTotals:
    """Summed intake for a single calendar day."""

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float


ZERO_TOTALS = NutritionalTotals(calories=0, protein_g=0, carbs_g=0, fat_g=0)


@dataclass(frozen=True)
class MacroPercentages:
    """Share of each macro in the total macro grams."""

    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class MacroProgress:
    """Progress towards each target, in percent clamped to [0, 100]."""

    calories: int
    protein: int
    carbs: int
    fat: int


@dataclass(frozen=True)
class DailySummary:
    """Everything the dashboard shows for one day."""

    day: date
    totals: NutritionalTotals
    targets: NutritionalTargets
    percentages: MacroPercentages
    progress: MacroProgress
    remaining_calories: float
