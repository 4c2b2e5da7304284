"""Workout authoring: collect a draft, validate it, hand it to the store."""

from dataclasses import dataclass, field
import datetime as dt

from ..models.exercises import Exercise
from ..models.user import Friend
from ..models.workout import (
    ExerciseSet,
    ParticipantStatus,
    Workout,
    WorkoutExercise,
    WorkoutParticipant,
)
from ..store import DomainStore

DEFAULT_NEW_SET_REPS = 10
DEFAULT_NEW_SET_WEIGHT = 50


class WorkoutValidationError(ValueError):
    """Raised when a draft is missing required fields."""

    def __init__(self, errors: list[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


def new_set(reps: int | None = DEFAULT_NEW_SET_REPS, weight: float | None = DEFAULT_NEW_SET_WEIGHT) -> ExerciseSet:
    """A fresh set with a timestamp id."""
    return ExerciseSet(reps=reps, weight=weight)


@dataclass
class WorkoutDraft:
    """Everything the create-workout flow gathers before saving."""

    title: str = ""
    date: dt.date | None = None
    time: str = ""
    gym: str = ""
    description: str | None = None
    estimated_duration: int | None = None
    exercises: list[WorkoutExercise] = field(default_factory=list)
    friends: list[Friend] = field(default_factory=list)

    def has_exercise(self, exercise_id: str) -> bool:
        return any(e.exercise_id == exercise_id for e in self.exercises)

    def add_exercise(self, exercise: Exercise, sets: list[ExerciseSet] | None = None) -> None:
        """Add an exercise once; a second add of the same id is ignored."""
        if self.has_exercise(exercise.id):
            return
        self.exercises.append(
            WorkoutExercise(exercise_id=exercise.id, sets=list(sets or []), notes="")
        )

    def remove_exercise(self, exercise_id: str) -> None:
        self.exercises = [e for e in self.exercises if e.exercise_id != exercise_id]

    def invite(self, friend: Friend) -> None:
        if all(f.id != friend.id for f in self.friends):
            self.friends.append(friend)

    def take_pending(self, store: DomainStore) -> bool:
        """Consume the staged exercise, if any. Returns True when one was taken."""
        staged = store.consume_pending_exercise_for_workout()
        if staged.is_empty:
            return False
        self.add_exercise(staged.exercise, staged.sets)
        return True

    def validate(self) -> list[str]:
        errors = []
        if not self.title.strip():
            errors.append("title is required")
        if self.date is None:
            errors.append("date is required")
        if not self.time.strip():
            errors.append("time is required")
        if not self.gym.strip():
            errors.append("gym is required")
        return errors

    def build(self, created_by: int | None = None) -> Workout:
        now = dt.datetime.now()
        participants = [
            WorkoutParticipant(
                user_id=friend.id,
                user=friend,
                status=ParticipantStatus.PENDING,
                invited_at=now,
            )
            for friend in self.friends
        ]
        return Workout(
            title=self.title.strip(),
            date=self.date,
            time=self.time.strip(),
            gym=self.gym.strip(),
            description=self.description,
            estimated_duration=self.estimated_duration,
            exercises=list(self.exercises),
            participants=participants,
            created_by=created_by,
            created_at=now,
        )

    def save(self, store: DomainStore) -> Workout:
        """Validate and add the workout as a user workout."""
        errors = self.validate()
        if errors:
            raise WorkoutValidationError(errors)
        created_by = store.current_user.id if store.current_user else None
        return store.add_user_workout(self.build(created_by=created_by))
