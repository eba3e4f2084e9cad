"""Pydantic models for API request payloads."""

from datetime import datetime

from pydantic import BaseModel, Field

from macro_tracker.domain.meals import MealCategory
from macro_tracker.domain.profile import (
    ActivityLevel,
    Gender,
    GoalType,
    WeightChangeRate,
)


class ProfileUpdate(BaseModel):
    """Partial profile update; omitted fields are left unchanged."""

    name: str | None = Field(default=None, min_length=1)
    goal_type: GoalType | None = None
    age: int | None = Field(default=None, ge=13, le=120)
    gender: Gender | None = None
    height_cm: float | None = Field(
        default=None, ge=100, le=300, allow_inf_nan=False
    )
    weight_kg: float | None = Field(
        default=None, ge=30, le=300, allow_inf_nan=False
    )
    activity_level: ActivityLevel | None = None
    dietary_preferences: list[str] | None = None
    target_weight_kg: float | None = Field(
        default=None, ge=30, le=300, allow_inf_nan=False
    )
    weight_change_rate: WeightChangeRate | None = None


class DietaryPreferencePayload(BaseModel):
    """A single dietary preference tag."""

    preference: str = Field(min_length=1)


class MealEntry(BaseModel):
    """Manual meal entry form."""

    id: str | None = Field(default=None, min_length=1)
    name: str = Field(min_length=2)
    portion: str = Field(min_length=1)
    calories: float = Field(ge=0, allow_inf_nan=False)
    protein_g: float = Field(ge=0, allow_inf_nan=False)
    carbs_g: float = Field(ge=0, allow_inf_nan=False)
    fat_g: float = Field(ge=0, allow_inf_nan=False)
    category: MealCategory
    logged_at: datetime | None = None


class MealUpdate(BaseModel):
    """Partial meal edit; omitted fields are left unchanged."""

    name: str | None = Field(default=None, min_length=2)
    portion: str | None = Field(default=None, min_length=1)
    calories: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    protein_g: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    carbs_g: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    fat_g: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    category: MealCategory | None = None
    logged_at: datetime | None = None


class TargetsPayload(BaseModel):
    """Explicit daily targets."""

    calories: float = Field(ge=0, allow_inf_nan=False)
    protein_g: float = Field(ge=0, allow_inf_nan=False)
    carbs_g: float = Field(ge=0, allow_inf_nan=False)
    fat_g: float = Field(ge=0, allow_inf_nan=False)


class OnboardingStepPayload(BaseModel):
    """Requested onboarding step."""

    step: int
