"""CLI commands for gym-helper."""

from .exercises import exercises
from .profile import achievements, leaderboard, onboarding
from .serve import serve
from .workouts import workouts

__all__ = [
    "achievements",
    "exercises",
    "leaderboard",
    "onboarding",
    "serve",
    "workouts",
]
