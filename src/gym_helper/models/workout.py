"""Workout, set and participant data models."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

from ..utils.ids import next_timestamp_id
from .exercises import Exercise
from .user import Friend


class WorkoutOrigin(str, Enum):
    """Where a workout came from."""

    CATALOG = "catalog"  # seeded or shared
    USER = "user"  # created by the current user


class ParticipantStatus(str, Enum):
    """Invitation state of a workout participant."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"


@dataclass
class ExerciseSet:
    """One performed set of an exercise.

    Every measurement is optional; ``None`` means it was not recorded.
    ``id`` is only unique within the owning WorkoutExercise.
    """

    id: int = field(default_factory=next_timestamp_id)
    reps: int | None = None
    weight: float | None = None  # in kg
    duration: float | None = None  # in seconds
    distance: float | None = None  # in meters

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "reps": self.reps,
            "weight": self.weight,
            "duration": self.duration,
            "distance": self.distance,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ExerciseSet":
        return cls(
            id=int(data["id"]) if data.get("id") is not None else next_timestamp_id(),
            reps=data.get("reps"),
            weight=data.get("weight"),
            duration=data.get("duration"),
            distance=data.get("distance"),
        )


@dataclass
class WorkoutExercise:
    """An exercise bound to a workout together with its performed sets."""

    exercise_id: str
    sets: list[ExerciseSet] = field(default_factory=list)
    notes: str | None = None

    def to_dict(self) -> dict:
        return {
            "exercise_id": self.exercise_id,
            "sets": [s.to_dict() for s in self.sets],
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutExercise":
        return cls(
            exercise_id=str(data["exercise_id"]),
            sets=[ExerciseSet.from_dict(s) for s in data.get("sets", [])],
            notes=data.get("notes"),
        )


@dataclass
class WorkoutParticipant:
    """A friend invited to a workout."""

    user_id: int
    user: Friend
    status: ParticipantStatus = ParticipantStatus.PENDING
    invited_at: datetime = field(default_factory=datetime.now)
    responded_at: datetime | None = None

    def to_dict(self) -> dict:
        return {
            "user_id": self.user_id,
            "user": self.user.to_dict(),
            "status": self.status.value,
            "invited_at": self.invited_at.isoformat(),
            "responded_at": (
                self.responded_at.isoformat() if self.responded_at else None
            ),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutParticipant":
        responded_at = None
        if data.get("responded_at"):
            responded_at = datetime.fromisoformat(data["responded_at"])

        return cls(
            user_id=data["user_id"],
            user=Friend.from_dict(data["user"]),
            status=ParticipantStatus(data.get("status", "pending")),
            invited_at=datetime.fromisoformat(data["invited_at"]),
            responded_at=responded_at,
        )


@dataclass
class Workout:
    """A single training session.

    ``exercises`` keeps insertion order; chronology comes from ``date``.
    """

    title: str
    date: date
    time: str  # HH:MM
    exercises: list[WorkoutExercise] = field(default_factory=list)
    participants: list[WorkoutParticipant] = field(default_factory=list)
    description: str | None = None
    gym: str | None = None
    estimated_duration: int | None = None  # minutes
    completed: bool = False
    completed_at: datetime | None = None
    created_by: int | None = None
    created_at: datetime | None = None
    origin: WorkoutOrigin = WorkoutOrigin.USER
    id: str | None = None

    def find_exercise(self, exercise_id: str) -> WorkoutExercise | None:
        """Return the first entry for ``exercise_id`` in this workout."""
        for workout_exercise in self.exercises:
            if workout_exercise.exercise_id == exercise_id:
                return workout_exercise
        return None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "date": self.date.isoformat(),
            "time": self.time,
            "gym": self.gym,
            "estimated_duration": self.estimated_duration,
            "exercises": [e.to_dict() for e in self.exercises],
            "participants": [p.to_dict() for p in self.participants],
            "completed": self.completed,
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
            "created_by": self.created_by,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "origin": self.origin.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Workout":
        """Create from dictionary."""
        completed_at = None
        if data.get("completed_at"):
            completed_at = datetime.fromisoformat(data["completed_at"])

        created_at = None
        if data.get("created_at"):
            created_at = datetime.fromisoformat(data["created_at"])

        return cls(
            id=str(data["id"]) if data.get("id") is not None else None,
            title=data["title"],
            description=data.get("description"),
            date=parse_date(data["date"]),
            time=data["time"],
            gym=data.get("gym"),
            estimated_duration=data.get("estimated_duration"),
            exercises=[WorkoutExercise.from_dict(e) for e in data.get("exercises", [])],
            participants=[
                WorkoutParticipant.from_dict(p) for p in data.get("participants", [])
            ],
            completed=data.get("completed", False),
            completed_at=completed_at,
            created_by=data.get("created_by"),
            created_at=created_at,
            origin=WorkoutOrigin(data.get("origin", "user")),
        )


@dataclass
class PendingExerciseHandoff:
    """An exercise and chosen sets staged for the workout-creation flow."""

    exercise: Exercise | None = None
    sets: list[ExerciseSet] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.exercise is None


def parse_date(value: date | str) -> date:
    """Accept a date, a datetime, or an ISO date/datetime string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.fromisoformat(value).date()
