"""Meal store: owns the meal log and the active daily targets."""

import logging
from dataclasses import dataclass, field, replace
from datetime import date, datetime

from macro_tracker.domain.meals import Meal, MealCategory, MealLog
from macro_tracker.domain.nutrition import (
    ZERO_TOTALS,
    DailySummary,
    MacroPercentages,
    MacroProgress,
    NutritionalTargets,
    NutritionalTotals,
)
from macro_tracker.domain.profile import UserProfile
from macro_tracker.services import calculator, macros
from macro_tracker.services.persistence import StateCodec, StateStore

MEALS_KEY = "meals"

_logger = logging.getLogger(__name__)
_CODEC = StateCodec.for_type(MEALS_KEY, MealLog)


@dataclass
class MealStore:
    """Append-only meal log with CRUD by caller-supplied id.

    Ids are not checked for uniqueness; lookups, edits, and deletes act on the
    first entry with a matching id.
    """

    state_store: StateStore
    _log: MealLog = field(init=False)

    def __post_init__(self) -> None:
        self._log = _CODEC.read(self.state_store) or MealLog()

    @property
    def meals(self) -> list[Meal]:
        """Return all logged meals in log order."""
        return list(self._log.meals)

    def add(self, meal: Meal) -> Meal:
        """Append a meal to the log."""
        self._save(replace(self._log, meals=(*self._log.meals, meal)))
        return meal

    def get(self, meal_id: str) -> Meal | None:
        """Return the first meal with the given id."""
        index = self._index_of(meal_id)
        if index is None:
            return None
        return self._log.meals[index]

    def edit(self, meal_id: str, **changes: object) -> Meal | None:
        """Merge fields into the first matching meal; no-op when absent."""
        index = self._index_of(meal_id)
        if index is None:
            return None
        updated = replace(self._log.meals[index], **changes)
        meals = list(self._log.meals)
        meals[index] = updated
        self._save(replace(self._log, meals=tuple(meals)))
        return updated

    def delete(self, meal_id: str) -> bool:
        """Remove the first matching meal; return False when absent."""
        index = self._index_of(meal_id)
        if index is None:
            return False
        meals = list(self._log.meals)
        del meals[index]
        self._save(replace(self._log, meals=tuple(meals)))
        return True

    def meals_for_day(self, day: date | str) -> list[Meal]:
        """Return meals whose timestamp starts with the day's ISO date."""
        prefix = _day_prefix(day)
        return [meal for meal in self._log.meals if meal.logged_at.startswith(prefix)]

    def meals_by_category(self, day: date | str) -> dict[MealCategory, list[Meal]]:
        """Group a day's meals by category in display order, skipping empty ones."""
        grouped: dict[MealCategory, list[Meal]] = {}
        day_meals = self.meals_for_day(day)
        for category in MealCategory:
            entries = [meal for meal in day_meals if meal.category is category]
            if entries:
                grouped[category] = entries
        return grouped

    def daily_totals(self, day: date | str) -> NutritionalTotals:
        """Sum calories and macros for the given day."""
        total = ZERO_TOTALS
        for meal in self.meals_for_day(day):
            total = NutritionalTotals(
                calories=total.calories + meal.calories,
                protein_g=total.protein_g + meal.protein_g,
                carbs_g=total.carbs_g + meal.carbs_g,
                fat_g=total.fat_g + meal.fat_g,
            )
        return total

    def targets(self) -> NutritionalTargets:
        """Return the active daily targets."""
        return self._log.targets

    def set_targets(self, targets: NutritionalTargets) -> NutritionalTargets:
        """Replace the active daily targets."""
        self._save(replace(self._log, targets=targets))
        _logger.info(
            "Daily targets replaced: calories=%s protein_g=%s carbs_g=%s fat_g=%s",
            targets.calories,
            targets.protein_g,
            targets.carbs_g,
            targets.fat_g,
        )
        return targets

    def apply_recommended_targets(self, profile: UserProfile) -> NutritionalTargets:
        """Recompute targets from a profile and make them active."""
        return self.set_targets(calculator.compute_targets(profile))

    def macro_percentages(self, day: date | str) -> MacroPercentages:
        """Return the macro split of the day's intake."""
        return macros.percentages(self.daily_totals(day))

    def macro_progress(self, day: date | str) -> MacroProgress:
        """Return the day's progress against the active targets."""
        return macros.macro_progress(self.daily_totals(day), self._log.targets)

    def remaining_calories(self, day: date | str) -> float:
        """Return calories left for the day."""
        return macros.remaining_calories(self.daily_totals(day), self._log.targets)

    def summary(self, day: date) -> DailySummary:
        """Return totals and every derived view for a day."""
        totals = self.daily_totals(day)
        targets = self._log.targets
        return DailySummary(
            day=day,
            totals=totals,
            targets=targets,
            percentages=macros.percentages(totals),
            progress=macros.macro_progress(totals, targets),
            remaining_calories=macros.remaining_calories(totals, targets),
        )

    def _index_of(self, meal_id: str) -> int | None:
        for index, meal in enumerate(self._log.meals):
            if meal.id == meal_id:
                return index
        return None

    def _save(self, log: MealLog) -> None:
        self._log = log
        _CODEC.write(self.state_store, log)


def _day_prefix(day: date | str) -> str:
    if isinstance(day, datetime):
        return day.date().isoformat()
    if isinstance(day, date):
        return day.isoformat()
    return day[:10]
