"""Data models for gym-helper."""

from .exercises import Exercise, ExerciseRecommendation, ExerciseStep
from .user import Friend, FriendStatus, User, UserLevel
from .workout import (
    ExerciseSet,
    ParticipantStatus,
    PendingExerciseHandoff,
    Workout,
    WorkoutExercise,
    WorkoutOrigin,
    WorkoutParticipant,
)

__all__ = [
    "Exercise",
    "ExerciseRecommendation",
    "ExerciseSet",
    "ExerciseStep",
    "Friend",
    "FriendStatus",
    "ParticipantStatus",
    "PendingExerciseHandoff",
    "User",
    "UserLevel",
    "Workout",
    "WorkoutExercise",
    "WorkoutOrigin",
    "WorkoutParticipant",
]
