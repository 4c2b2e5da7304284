"""Pytest configuration and fixtures."""

from datetime import date

import pytest

from gym_helper.config import Settings
from gym_helper.data import load_snapshot_file
from gym_helper.models.exercises import Exercise
from gym_helper.models.user import Friend, FriendStatus
from gym_helper.models.workout import ExerciseSet, Workout, WorkoutExercise
from gym_helper.store import DomainStore


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a throwaway data directory."""
    return Settings(data_dir=tmp_path, demo_data=False)


@pytest.fixture
def store():
    """An empty domain store."""
    return DomainStore()


@pytest.fixture
def demo_store():
    """A store seeded with the bundled demo snapshot."""
    store = DomainStore()
    load_snapshot_file(store)
    return store


@pytest.fixture
def bench_press():
    """An exercise with a declared weight range and rest time."""
    return Exercise(
        id="bench",
        name="Жим лежа",
        muscle_groups=["Грудь", "Трицепс"],
        equipment=["Штанга"],
        min_weight=60,
        max_weight=100,
        rest_time=120,
    )


@pytest.fixture
def friend():
    return Friend(
        id=101,
        first_name="Мария",
        last_name="Иванова",
        gym="GoldGym",
        is_online=True,
        status=FriendStatus.IN_GYM,
    )


def _build_workout(exercise_id: str, sets: list[dict], day: date, title: str = "Тренировка", **kwargs) -> Workout:
    """Build a workout with a single exercise from plain set dicts."""
    return Workout(
        title=title,
        date=day,
        time="18:00",
        exercises=[
            WorkoutExercise(
                exercise_id=exercise_id,
                sets=[ExerciseSet(id=i, **s) for i, s in enumerate(sets, start=1)],
            )
        ],
        **kwargs,
    )


@pytest.fixture
def make_workout():
    """Factory for single-exercise workouts."""
    return _build_workout
