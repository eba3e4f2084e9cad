"""Profile store: owns the user's biometric, goal, and preference record."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from macro_tracker.domain.nutrition import NutritionalTargets
from macro_tracker.domain.profile import (
    ActivityLevel,
    Gender,
    GoalType,
    UserProfile,
    WeightChangeGoal,
    WeightChangeRate,
)
from macro_tracker.services import calculator, weight_goal
from macro_tracker.services.persistence import StateCodec, StateStore

PROFILE_KEY = "profile"

_logger = logging.getLogger(__name__)
_CODEC = StateCodec.for_type(PROFILE_KEY, UserProfile)


@dataclass
class ProfileStore:
    """Mutable holder for a UserProfile, persisted after every change."""

    state_store: StateStore
    _profile: UserProfile = field(init=False)

    def __post_init__(self) -> None:
        self._profile = _CODEC.read(self.state_store) or UserProfile()

    @property
    def profile(self) -> UserProfile:
        """Return the current profile snapshot."""
        return self._profile

    def update(self, **changes: object) -> UserProfile:
        """Merge a partial set of profile fields."""
        return self._apply(replace(self._profile, **changes))

    def set_name(self, name: str) -> UserProfile:
        """Set the display name."""
        return self.update(name=name)

    def set_goal_type(self, goal_type: GoalType) -> UserProfile:
        """Set the goal type."""
        return self.update(goal_type=goal_type)

    def set_age(self, age: int) -> UserProfile:
        """Set age in years."""
        return self.update(age=age)

    def set_gender(self, gender: Gender) -> UserProfile:
        """Set gender."""
        return self.update(gender=gender)

    def set_height(self, height_cm: float) -> UserProfile:
        """Set height in centimetres."""
        return self.update(height_cm=height_cm)

    def set_weight(self, weight_kg: float) -> UserProfile:
        """Set current weight in kg; refreshes an existing weight change goal."""
        return self.update(weight_kg=weight_kg)

    def set_activity_level(self, level: ActivityLevel) -> UserProfile:
        """Set the activity level."""
        return self.update(activity_level=level)

    def set_dietary_preferences(self, preferences: Iterable[str]) -> UserProfile:
        """Replace the dietary preference tags."""
        return self.update(dietary_preferences=frozenset(preferences))

    def add_dietary_preference(self, preference: str) -> UserProfile:
        """Add a dietary preference tag; adding it twice is a no-op."""
        return self.update(
            dietary_preferences=self._profile.dietary_preferences | {preference}
        )

    def remove_dietary_preference(self, preference: str) -> UserProfile:
        """Remove a dietary preference tag if present."""
        return self.update(
            dietary_preferences=self._profile.dietary_preferences - {preference}
        )

    def set_target_weight(self, target_weight_kg: float) -> UserProfile:
        """Set target weight in kg."""
        return self.update(target_weight_kg=target_weight_kg)

    def set_weight_change_rate(self, rate: WeightChangeRate) -> UserProfile:
        """Set how fast the weight goal should be approached."""
        return self.update(weight_change_rate=rate)

    def set_weight_change_goal(self, goal: WeightChangeGoal) -> UserProfile:
        """Replace the weight change snapshot directly."""
        return self._apply(replace(self._profile, weight_change_goal=goal))

    def commit(self) -> UserProfile:
        """Persist the accumulated profile as the completed setup."""
        _CODEC.write(self.state_store, self._profile)
        _logger.info(
            "Profile committed: goal=%s has_biometrics=%s",
            self._profile.goal_type.value,
            self._profile.has_biometrics(),
        )
        return self._profile

    def reset(self) -> UserProfile:
        """Drop every collected field."""
        self._profile = UserProfile()
        _CODEC.write(self.state_store, self._profile)
        _logger.info("Profile reset")
        return self._profile

    def compute_targets(self) -> NutritionalTargets:
        """Return recommended targets for the current profile."""
        return calculator.compute_targets(self._profile)

    def weight_goal_estimate(self) -> weight_goal.WeightGoalEstimate | None:
        """Return the weight goal estimate once weight and target are known."""
        current = self._profile.weight_kg
        target = self._profile.target_weight_kg
        if not current or not target:
            return None
        return weight_goal.estimate(
            current,
            target,
            self._profile.goal_type,
            self._profile.weight_change_rate,
        )

    def _apply(self, updated: UserProfile) -> UserProfile:
        previous = self._profile
        if (
            updated.weight_kg != previous.weight_kg
            or updated.target_weight_kg != previous.target_weight_kg
            or updated.weight_change_rate != previous.weight_change_rate
        ):
            updated = _refresh_weight_change_goal(updated)
        self._profile = updated
        _CODEC.write(self.state_store, updated)
        return updated


def _refresh_weight_change_goal(profile: UserProfile) -> UserProfile:
    if not profile.target_weight_kg or profile.weight_change_rate is None:
        return profile
    return replace(
        profile,
        weight_change_goal=WeightChangeGoal(
            current_weight_kg=profile.weight_kg or 0,
            target_weight_kg=profile.target_weight_kg,
            rate=profile.weight_change_rate,
        ),
    )
