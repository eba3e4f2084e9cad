"""FastAPI application factory."""

import logging
from datetime import date
from uuid import uuid4

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from macro_tracker.api.models import (
    DietaryPreferencePayload,
    MealEntry,
    MealUpdate,
    OnboardingStepPayload,
    ProfileUpdate,
    TargetsPayload,
)
from macro_tracker.app_logging import configure_logging
from macro_tracker.containers import AppContainer
from macro_tracker.domain.meals import Meal, MealValidationError
from macro_tracker.domain.nutrition import NutritionalTargets
from macro_tracker.domain.onboarding import OnboardingCompletedError, step_labels
from macro_tracker.services.onboarding import OnboardingStateMachine


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.exception_handler(MealValidationError)
    async def meal_validation_error(
        request: Request, exc: MealValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc)},
        )

    @app.exception_handler(OnboardingCompletedError)
    async def onboarding_completed_error(
        request: Request, exc: OnboardingCompletedError
    ) -> JSONResponse:
        logger.warning("Rejected onboarding advance after completion")
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/profile")
    async def get_profile(request: Request) -> dict[str, object]:
        """Return the current profile."""
        state_container: AppContainer = request.app.state.container
        return {"profile": state_container.profile_store.profile}

    @app.patch("/profile")
    async def update_profile(
        payload: ProfileUpdate, request: Request
    ) -> dict[str, object]:
        """Merge submitted fields into the profile."""
        state_container: AppContainer = request.app.state.container
        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        if "dietary_preferences" in changes:
            changes["dietary_preferences"] = frozenset(changes["dietary_preferences"])
        profile = state_container.profile_store.update(**changes)
        return {"profile": profile}

    @app.post("/profile/dietary-preferences")
    async def add_dietary_preference(
        payload: DietaryPreferencePayload, request: Request
    ) -> dict[str, object]:
        """Add a dietary preference tag."""
        state_container: AppContainer = request.app.state.container
        profile = state_container.profile_store.add_dietary_preference(
            payload.preference
        )
        return {"profile": profile}

    @app.delete("/profile/dietary-preferences/{preference}")
    async def remove_dietary_preference(
        preference: str, request: Request
    ) -> dict[str, object]:
        """Remove a dietary preference tag."""
        state_container: AppContainer = request.app.state.container
        profile = state_container.profile_store.remove_dietary_preference(preference)
        return {"profile": profile}

    @app.post("/profile/reset")
    async def reset_profile(request: Request) -> dict[str, object]:
        """Clear the profile before a fresh registration."""
        state_container: AppContainer = request.app.state.container
        return {"profile": state_container.profile_store.reset()}

    @app.get("/profile/recommended-targets")
    async def recommended_targets(request: Request) -> dict[str, object]:
        """Return targets computed from the profile without applying them."""
        state_container: AppContainer = request.app.state.container
        return {"targets": state_container.profile_store.compute_targets()}

    @app.get("/profile/weight-goal")
    async def weight_goal(request: Request) -> dict[str, object]:
        """Return weight goal progress and duration, if computable."""
        state_container: AppContainer = request.app.state.container
        return {"estimate": state_container.profile_store.weight_goal_estimate()}

    @app.get("/meals")
    async def list_meals(
        request: Request, day: date | None = None
    ) -> dict[str, object]:
        """Return all meals, or only those logged on a day."""
        state_container: AppContainer = request.app.state.container
        meal_store = state_container.meal_store
        meals = meal_store.meals if day is None else meal_store.meals_for_day(day)
        return {"meals": meals}

    @app.get("/meals/by-category")
    async def meals_by_category(
        request: Request, day: date | None = None
    ) -> dict[str, object]:
        """Return a day's meals grouped by category."""
        state_container: AppContainer = request.app.state.container
        resolved_day = day or state_container.clock().date()
        grouped = state_container.meal_store.meals_by_category(resolved_day)
        return {
            "day": resolved_day,
            "categories": {
                category.value: meals for category, meals in grouped.items()
            },
        }

    @app.post("/meals", status_code=status.HTTP_201_CREATED)
    async def add_meal(payload: MealEntry, request: Request) -> dict[str, object]:
        """Log a meal."""
        state_container: AppContainer = request.app.state.container
        logged_at = payload.logged_at or state_container.clock()
        meal = Meal(
            id=payload.id or uuid4().hex,
            name=payload.name,
            portion=payload.portion,
            calories=payload.calories,
            protein_g=payload.protein_g,
            carbs_g=payload.carbs_g,
            fat_g=payload.fat_g,
            category=payload.category,
            logged_at=logged_at.isoformat(),
        )
        return {"meal": state_container.meal_store.add(meal)}

    @app.get("/meals/{meal_id}")
    async def get_meal(meal_id: str, request: Request) -> dict[str, object]:
        """Return a meal by id."""
        state_container: AppContainer = request.app.state.container
        meal = state_container.meal_store.get(meal_id)
        if meal is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return {"meal": meal}

    @app.patch("/meals/{meal_id}")
    async def edit_meal(
        meal_id: str, payload: MealUpdate, request: Request
    ) -> dict[str, object]:
        """Edit fields of a logged meal."""
        state_container: AppContainer = request.app.state.container
        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        if "logged_at" in changes:
            changes["logged_at"] = changes["logged_at"].isoformat()
        meal = state_container.meal_store.edit(meal_id, **changes)
        if meal is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return {"meal": meal}

    @app.delete("/meals/{meal_id}")
    async def delete_meal(meal_id: str, request: Request) -> dict[str, object]:
        """Delete a logged meal."""
        state_container: AppContainer = request.app.state.container
        return {"deleted": state_container.meal_store.delete(meal_id)}

    @app.get("/targets")
    async def get_targets(request: Request) -> dict[str, object]:
        """Return the active daily targets."""
        state_container: AppContainer = request.app.state.container
        return {"targets": state_container.meal_store.targets()}

    @app.put("/targets")
    async def set_targets(
        payload: TargetsPayload, request: Request
    ) -> dict[str, object]:
        """Replace the active daily targets."""
        state_container: AppContainer = request.app.state.container
        targets = NutritionalTargets(
            calories=payload.calories,
            protein_g=payload.protein_g,
            carbs_g=payload.carbs_g,
            fat_g=payload.fat_g,
        )
        return {"targets": state_container.meal_store.set_targets(targets)}

    @app.post("/targets/recommended")
    async def apply_recommended_targets(request: Request) -> dict[str, object]:
        """Recompute targets from the profile and make them active."""
        state_container: AppContainer = request.app.state.container
        targets = state_container.meal_store.apply_recommended_targets(
            state_container.profile_store.profile
        )
        return {"targets": targets}

    @app.get("/dashboard")
    async def dashboard(request: Request, day: date | None = None) -> dict[str, object]:
        """Return totals, targets, and progress for a day."""
        state_container: AppContainer = request.app.state.container
        resolved_day = day or state_container.clock().date()
        return {"summary": state_container.meal_store.summary(resolved_day)}

    @app.get("/onboarding")
    async def get_onboarding(request: Request) -> dict[str, object]:
        """Return the onboarding position."""
        state_container: AppContainer = request.app.state.container
        return _onboarding_payload(state_container.onboarding)

    @app.post("/onboarding/next")
    async def onboarding_next(request: Request) -> dict[str, object]:
        """Advance onboarding, completing it on the last step."""
        state_container: AppContainer = request.app.state.container
        state_container.onboarding.advance()
        return _onboarding_payload(state_container.onboarding)

    @app.post("/onboarding/back")
    async def onboarding_back(request: Request) -> dict[str, object]:
        """Go back one onboarding step."""
        state_container: AppContainer = request.app.state.container
        state_container.onboarding.retreat()
        return _onboarding_payload(state_container.onboarding)

    @app.post("/onboarding/step")
    async def onboarding_step(
        payload: OnboardingStepPayload, request: Request
    ) -> dict[str, object]:
        """Jump to an onboarding step."""
        state_container: AppContainer = request.app.state.container
        state_container.onboarding.go_to(payload.step)
        return _onboarding_payload(state_container.onboarding)

    @app.post("/onboarding/reset")
    async def onboarding_reset(request: Request) -> dict[str, object]:
        """Restart onboarding from the first step."""
        state_container: AppContainer = request.app.state.container
        state_container.onboarding.reset()
        return _onboarding_payload(state_container.onboarding)

    return app


def _onboarding_payload(onboarding: OnboardingStateMachine) -> dict[str, object]:
    return {
        "step": onboarding.step,
        "step_label": onboarding.current_step.value.label,
        "steps": step_labels(),
        "is_completed": onboarding.is_completed,
    }
