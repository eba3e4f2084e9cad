"""Domain models for meal logging."""

import math
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from macro_tracker.domain.nutrition import DEFAULT_TARGETS, NutritionalTargets


class MealCategory(Enum):
    """Meal slot a logged entry belongs to, in display order."""

    BREAKFAST = "BREAKFAST"
    LUNCH = "LUNCH"
    DINNER = "DINNER"
    SNACK = "SNACK"


class MealValidationError(ValueError):
    """Raised when a meal is built from invalid values."""


_NUMERIC_FIELDS = ("calories", "protein_g", "carbs_g", "fat_g")


@dataclass(frozen=True)
class Meal:
    """A logged meal entry.

    ``id`` is supplied by the caller and is not checked for uniqueness.
    ``logged_at`` is an ISO-8601 timestamp; its leading ``YYYY-MM-DD`` decides
    which day the meal counts towards.
    """

    id: str
    name: str
    portion: str
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    category: MealCategory
    logged_at: str

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise MealValidationError("Meal name must not be empty")
        for name in _NUMERIC_FIELDS:
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise MealValidationError(
                    f"Meal {name} must be a finite non-negative number"
                )
        try:
            datetime.fromisoformat(self.logged_at)
        except ValueError as exc:
            raise MealValidationError(
                f"Meal logged_at is not an ISO timestamp: {self.logged_at!r}"
            ) from exc

    @property
    def day(self) -> str:
        """Return the ISO date prefix of the log timestamp."""
        return self.logged_at[:10]


@dataclass(frozen=True)
class MealLog:
    """Persisted meal store state: the log plus the active targets."""

    meals: tuple[Meal, ...] = ()
    targets: NutritionalTargets = field(default=DEFAULT_TARGETS)
