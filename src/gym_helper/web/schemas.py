"""Request bodies for the JSON API."""

import datetime as dt

from pydantic import BaseModel, ConfigDict

from ..models.user import UserLevel
from ..models.workout import ExerciseSet, ParticipantStatus, WorkoutExercise


class SetIn(BaseModel):
    id: int | None = None  # generated when missing
    reps: int | None = None
    weight: float | None = None
    duration: float | None = None
    distance: float | None = None

    def to_model(self) -> ExerciseSet:
        return ExerciseSet.from_dict(self.model_dump())


class WorkoutExerciseIn(BaseModel):
    exercise_id: str | int
    sets: list[SetIn] = []
    notes: str | None = None

    def to_model(self) -> WorkoutExercise:
        return WorkoutExercise(
            exercise_id=str(self.exercise_id),
            sets=[s.to_model() for s in self.sets],
            notes=self.notes,
        )


class StageRequest(BaseModel):
    """Sets chosen on the exercise screen."""

    sets: list[SetIn] = []


class CreateWorkoutRequest(BaseModel):
    """Create-workout form. Required fields are checked by WorkoutDraft."""

    title: str = ""
    date: dt.date | None = None
    time: str = ""
    gym: str = ""
    description: str | None = None
    estimated_duration: int | None = None
    exercises: list[WorkoutExerciseIn] = []
    friend_ids: list[int] = []


class UpdateWorkoutRequest(BaseModel):
    """Partial workout update. Only fields sent are applied."""

    model_config = ConfigDict(extra="forbid")

    title: str | None = None
    description: str | None = None
    date: dt.date | None = None
    time: str | None = None
    gym: str | None = None
    estimated_duration: int | None = None
    completed: bool | None = None
    exercises: list[WorkoutExerciseIn] | None = None


class InviteRequest(BaseModel):
    friend_id: int


class InvitationAnswer(BaseModel):
    status: ParticipantStatus


class UpdateUserRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    first_name: str | None = None
    last_name: str | None = None
    photo: str | None = None
    city: str | None = None
    level: UserLevel | None = None
    main_gym: str | None = None
