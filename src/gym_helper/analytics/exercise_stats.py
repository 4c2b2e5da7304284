"""Exercise statistics and difficulty rating derived from workout history.

Everything here is a pure function of an Exercise and a list of Workouts:
nothing is cached, so results always match the store contents they were
computed from.
"""

import math
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Iterable

from ..models.exercises import Exercise
from ..models.workout import ExerciseSet, Workout

DEFAULT_SETS_PER_WORKOUT = 3
DEFAULT_REPS_RANGE = "8-12"
DEFAULT_WEIGHT_RANGE = "60-80 кг"
DEFAULT_REST_DISPLAY = "2-3 сек"
UNSPECIFIED_MUSCLE_GROUP = "Не указано"


class Difficulty(str, Enum):
    """Three-level difficulty label shown to the user."""

    EASY = "Легкий"
    MEDIUM = "Средний"
    HARD = "Сложный"


@dataclass(frozen=True)
class NumberedSet:
    """A set together with its 1-based position inside its workout."""

    set_number: int
    set: ExerciseSet


@dataclass
class WorkoutGroup:
    """All sets of one exercise performed in a single workout."""

    workout_id: str | None
    workout_title: str
    workout_date: date
    sets: list[NumberedSet] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "workout_id": self.workout_id,
            "workout_title": self.workout_title,
            "workout_date": self.workout_date.isoformat(),
            "sets": [
                {"set_number": s.set_number, **s.set.to_dict()} for s in self.sets
            ],
        }


@dataclass
class ExerciseStats:
    """Read-only summary for the exercise detail screen."""

    sets: int
    reps: str
    rest_time: str
    weight: str
    difficulty: Difficulty
    muscle_groups: list[str]
    score: int = 0
    total_sets: int = 0
    avg_reps: int | None = None
    avg_weight: float | None = None
    avg_duration: float | None = None

    def to_dict(self) -> dict:
        return {
            "sets": self.sets,
            "reps": self.reps,
            "rest_time": self.rest_time,
            "weight": self.weight,
            "difficulty": self.difficulty.value,
            "muscle_groups": list(self.muscle_groups),
            "score": self.score,
            "total_sets": self.total_sets,
            "avg_reps": self.avg_reps,
            "avg_weight": self.avg_weight,
            "avg_duration": self.avg_duration,
        }


def exercise_history(exercise_id: str, workouts: Iterable[Workout]) -> list[WorkoutGroup]:
    """Group the sets of ``exercise_id`` by workout, most recent workout first."""
    groups = []
    for workout in list(workouts):
        workout_exercise = workout.find_exercise(exercise_id)
        if workout_exercise is None:
            continue
        groups.append(
            WorkoutGroup(
                workout_id=workout.id,
                workout_title=workout.title,
                workout_date=workout.date,
                sets=[
                    NumberedSet(set_number=index, set=s)
                    for index, s in enumerate(workout_exercise.sets, start=1)
                ],
            )
        )
    return sorted(groups, key=lambda g: g.workout_date, reverse=True)


def calculate_exercise_stats(exercise: Exercise, workouts: Iterable[Workout]) -> ExerciseStats:
    """Aggregate the full history of ``exercise`` into an ExerciseStats.

    Every input, including an empty history, yields a complete result.
    """
    groups = exercise_history(exercise.id, workouts)
    all_sets = [numbered.set for group in groups for numbered in group.sets]
    total_sets = len(all_sets)
    avg_sets = (
        _round_half_up(total_sets / len(groups)) if total_sets > 0 else DEFAULT_SETS_PER_WORKOUT
    )

    reps = _numeric(s.reps for s in all_sets)
    reps_range = f"{_fmt(min(reps))}-{_fmt(max(reps))}" if reps else DEFAULT_REPS_RANGE
    avg_reps = _round_half_up(sum(reps) / len(reps)) if reps else None

    weights = _numeric(s.weight for s in all_sets)
    avg_weight = sum(weights) / len(weights) if weights else None
    hist_max_weight = max(weights) if weights else None
    has_range = exercise.has_declared_weight_range
    if has_range:
        weight_range = f"{_fmt(exercise.min_weight)}-{_fmt(exercise.max_weight)} кг"
    elif weights:
        weight_range = f"{_fmt(min(weights))}-{_fmt(max(weights))} кг"
    else:
        weight_range = DEFAULT_WEIGHT_RANGE

    rest_seconds = exercise.rest_time if _is_number(exercise.rest_time) else None
    rest_display = f"{_fmt(rest_seconds)} сек" if rest_seconds is not None else DEFAULT_REST_DISPLAY

    durations = _numeric(s.duration for s in all_sets)
    avg_duration = sum(durations) / len(durations) if durations else None

    score = 0

    # Weight: the closer to the top of the range, the harder
    if avg_weight is not None:
        ratio = None
        if has_range:
            span = max(1, exercise.max_weight - exercise.min_weight)
            ratio = (avg_weight - exercise.min_weight) / span
        elif hist_max_weight:
            ratio = avg_weight / hist_max_weight
        if ratio is not None:
            if ratio >= 0.85:
                score += 2
            elif ratio >= 0.6:
                score += 1
    else:
        score += 1

    if avg_reps is not None:
        if avg_reps <= 5:
            score += 2
        elif avg_reps <= 10:
            score += 1
        elif avg_reps >= 15:
            score -= 1

    if rest_seconds is not None:
        if rest_seconds <= 45:
            score += 2
        elif rest_seconds <= 90:
            score += 1
        elif rest_seconds >= 150:
            score -= 1

    if avg_duration is not None and avg_duration >= 90:
        score += 1

    if avg_sets >= 5:
        score += 1
    elif avg_sets <= 2:
        score -= 1

    return ExerciseStats(
        sets=avg_sets,
        reps=reps_range,
        rest_time=rest_display,
        weight=weight_range,
        difficulty=difficulty_for_score(score),
        muscle_groups=list(exercise.muscle_groups) or [UNSPECIFIED_MUSCLE_GROUP],
        score=score,
        total_sets=total_sets,
        avg_reps=avg_reps,
        avg_weight=avg_weight,
        avg_duration=avg_duration,
    )


def difficulty_for_score(score: int) -> Difficulty:
    """Map a difficulty score onto its label, highest threshold first."""
    if score >= 5:
        return Difficulty.HARD
    if score >= 2:
        return Difficulty.MEDIUM
    return Difficulty.EASY


def _is_number(value) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and not math.isnan(value)
    )


def _numeric(values: Iterable) -> list[float]:
    return [v for v in values if _is_number(v)]


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _fmt(value: float) -> str:
    """Render whole floats without a trailing ``.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
