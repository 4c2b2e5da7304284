"""Application services built on the domain store."""

from .session import IdentityClient, bootstrap_current_user, finish_onboarding, user_from_profile
from .workout_builder import WorkoutDraft, WorkoutValidationError, new_set

__all__ = [
    "IdentityClient",
    "WorkoutDraft",
    "WorkoutValidationError",
    "bootstrap_current_user",
    "finish_onboarding",
    "new_set",
    "user_from_profile",
]
