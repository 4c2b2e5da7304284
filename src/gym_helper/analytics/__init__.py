"""Derived read-only analytics over the domain store."""

from .achievements import (
    Achievements,
    LeaderboardEntry,
    build_leaderboard,
    calculate_achievements,
    current_user_position,
)
from .exercise_stats import (
    Difficulty,
    ExerciseStats,
    WorkoutGroup,
    calculate_exercise_stats,
    exercise_history,
)

__all__ = [
    "Achievements",
    "Difficulty",
    "ExerciseStats",
    "LeaderboardEntry",
    "WorkoutGroup",
    "build_leaderboard",
    "calculate_achievements",
    "calculate_exercise_stats",
    "current_user_position",
    "exercise_history",
]
