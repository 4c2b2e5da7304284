"""In-memory domain store: the single source of truth for a session."""

import copy
import logging
from dataclasses import dataclass, fields
from datetime import datetime
from typing import Callable

from ..models.exercises import Exercise
from ..models.user import Friend, User
from ..models.workout import (
    ExerciseSet,
    ParticipantStatus,
    PendingExerciseHandoff,
    Workout,
    WorkoutOrigin,
    WorkoutParticipant,
)
from ..utils.ids import next_timestamp_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoreEvent:
    """Notification sent to listeners after a committed mutation."""

    kind: str  # e.g. "workout_added", "handoff_cleared"
    entity_id: str | int | None = None


StoreListener = Callable[[StoreEvent], None]

# Lookup order for workouts: a fresh user workout shadows a catalog entry.
_LOOKUP_ORDER = (WorkoutOrigin.USER, WorkoutOrigin.CATALOG)


class DomainStore:
    """Central registry of users, exercises, workouts and friends.

    Reads never raise on a missing id, and updates or deletes of a missing id
    are no-ops. Listeners registered with :meth:`subscribe` run after every
    mutation that actually changed state.
    """

    def __init__(self):
        self._current_user: User | None = None
        self._show_onboarding_modal = False
        self._exercises: list[Exercise] = []
        self._workouts: list[Workout] = []
        self._friends: list[Friend] = []
        self._pending = PendingExerciseHandoff()
        self._listeners: list[StoreListener] = []

    # ================ SUBSCRIPTIONS ================

    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        """Register a listener and return a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, kind: str, entity_id: str | int | None = None) -> None:
        event = StoreEvent(kind=kind, entity_id=entity_id)
        logger.debug("store event %s (%s)", kind, entity_id)
        for listener in list(self._listeners):
            listener(event)

    # ================ CURRENT USER ================

    @property
    def current_user(self) -> User | None:
        return self._current_user

    @property
    def show_onboarding_modal(self) -> bool:
        return self._show_onboarding_modal

    def set_current_user(self, user: User) -> None:
        """Replace the current user snapshot."""
        self._current_user = user
        if user.first_login:
            self._show_onboarding_modal = True
        self._notify("user_set", user.id)

    def update_current_user(self, patch: dict) -> User | None:
        """Merge fields into the current user. No-op without a user."""
        _check_patch(User, patch, protected=("id",))
        if self._current_user is None:
            return None
        for key, value in patch.items():
            setattr(self._current_user, key, value)
        self._notify("user_updated", self._current_user.id)
        return self._current_user

    def set_main_gym(self, gym_name: str) -> None:
        self.update_current_user({"main_gym": gym_name})

    def clear_current_user(self) -> None:
        if self._current_user is None:
            return
        self._current_user = None
        self._notify("user_cleared")

    def set_show_onboarding_modal(self, show: bool) -> None:
        """Toggle the first-run onboarding gate."""
        self._show_onboarding_modal = show
        self._notify("onboarding_modal", int(show))

    # ================ EXERCISES ================

    @property
    def exercises(self) -> list[Exercise]:
        return list(self._exercises)

    def add_exercise(self, exercise: Exercise) -> Exercise:
        """Add a copy of ``exercise``, assigning an id when it has none."""
        stored = copy.deepcopy(exercise)
        if stored.id is None:
            stored.id = str(next_timestamp_id())
        self._exercises.append(stored)
        self._notify("exercise_added", stored.id)
        return stored

    def get_exercise(self, exercise_id: str) -> Exercise | None:
        for exercise in self._exercises:
            if exercise.id == exercise_id:
                return exercise
        return None

    def update_exercise(self, exercise_id: str, patch: dict) -> Exercise | None:
        _check_patch(Exercise, patch, protected=("id",))
        exercise = self.get_exercise(exercise_id)
        if exercise is None:
            return None
        for key, value in patch.items():
            setattr(exercise, key, value)
        if "muscle_groups" in patch:
            exercise.muscle_groups = list(dict.fromkeys(exercise.muscle_groups))
        self._notify("exercise_updated", exercise_id)
        return exercise

    def delete_exercise(self, exercise_id: str) -> None:
        remaining = [e for e in self._exercises if e.id != exercise_id]
        if len(remaining) == len(self._exercises):
            return
        self._exercises = remaining
        self._notify("exercise_deleted", exercise_id)

    def search_exercises(self, query: str) -> list[Exercise]:
        """Case-insensitive substring search on exercise names."""
        needle = query.strip().lower()
        return [e for e in self._exercises if needle in e.name.lower()]

    def unique_muscle_groups(self) -> list[str]:
        return sorted({mg for e in self._exercises for mg in e.muscle_groups})

    def unique_equipment(self) -> list[str]:
        return sorted({eq for e in self._exercises for eq in e.equipment})

    # ================ WORKOUTS ================

    @property
    def workouts(self) -> list[Workout]:
        """Every workout, catalog and user-created, in insertion order."""
        return list(self._workouts)

    def add_workout(
        self, workout: Workout, origin: WorkoutOrigin = WorkoutOrigin.CATALOG
    ) -> Workout:
        """Store a copy of ``workout`` under ``origin`` with a fresh id."""
        stored = copy.deepcopy(workout)
        stored.id = str(next_timestamp_id())
        stored.origin = origin
        self._workouts.append(stored)
        self._notify("workout_added", stored.id)
        return stored

    def add_user_workout(self, workout: Workout) -> Workout:
        return self.add_workout(workout, origin=WorkoutOrigin.USER)

    def load_workout(self, workout: Workout) -> Workout:
        """Insert a workout that already carries an id and origin (snapshot import)."""
        if workout.id is None:
            return self.add_workout(workout, origin=workout.origin)
        stored = copy.deepcopy(workout)
        self._workouts.append(stored)
        self._notify("workout_added", stored.id)
        return stored

    def get_workout(self, workout_id: str) -> Workout | None:
        """Find a workout by id, user-created first, then catalog."""
        for origin in _LOOKUP_ORDER:
            workout = self._find_workout(workout_id, origin)
            if workout is not None:
                return workout
        return None

    def get_user_workouts(self) -> list[Workout]:
        """User-created workouts in creation order."""
        return [w for w in self._workouts if w.origin == WorkoutOrigin.USER]

    def get_catalog_workouts(self) -> list[Workout]:
        return [w for w in self._workouts if w.origin == WorkoutOrigin.CATALOG]

    def update_workout(
        self, workout_id: str, patch: dict, origin: WorkoutOrigin | None = None
    ) -> Workout | None:
        """Merge ``patch`` into the matching workout; missing ids are ignored.

        With ``origin`` set only that collection is searched, otherwise the
        usual user-then-catalog lookup applies.
        """
        _check_patch(Workout, patch, protected=("id", "origin"))
        if origin is None:
            workout = self.get_workout(workout_id)
        else:
            workout = self._find_workout(workout_id, origin)
        if workout is None:
            logger.debug("update skipped, workout %s not found", workout_id)
            return None
        for key, value in patch.items():
            setattr(workout, key, value)
        self._notify("workout_updated", workout_id)
        return workout

    def update_user_workout(self, workout_id: str, patch: dict) -> Workout | None:
        return self.update_workout(workout_id, patch, origin=WorkoutOrigin.USER)

    def delete_workout(self, workout_id: str) -> None:
        """Remove a catalog workout. Deleting a missing id does nothing."""
        self._remove_workout(workout_id, WorkoutOrigin.CATALOG)

    def delete_user_workout(self, workout_id: str) -> None:
        """Remove a user-created workout. Deleting a missing id does nothing."""
        self._remove_workout(workout_id, WorkoutOrigin.USER)

    def mark_workout_as_completed(
        self, workout_id: str, completed_at: datetime | None = None
    ) -> Workout | None:
        """Flag a catalog workout as completed with a completion timestamp."""
        workout = self._find_workout(workout_id, WorkoutOrigin.CATALOG)
        if workout is None:
            return None
        workout.completed = True
        workout.completed_at = completed_at or datetime.now()
        self._notify("workout_completed", workout_id)
        return workout

    def _find_workout(self, workout_id: str, origin: WorkoutOrigin) -> Workout | None:
        for workout in self._workouts:
            if workout.id == workout_id and workout.origin == origin:
                return workout
        return None

    def _remove_workout(self, workout_id: str, origin: WorkoutOrigin) -> None:
        remaining = [
            w for w in self._workouts if not (w.id == workout_id and w.origin == origin)
        ]
        if len(remaining) == len(self._workouts):
            return
        self._workouts = remaining
        self._notify("workout_deleted", workout_id)

    # ================ PARTICIPANTS ================

    def invite_participant(self, workout_id: str, friend: Friend) -> WorkoutParticipant | None:
        """Add ``friend`` to a workout as a pending participant."""
        workout = self.get_workout(workout_id)
        if workout is None:
            return None
        for participant in workout.participants:
            if participant.user_id == friend.id:
                return participant
        participant = WorkoutParticipant(user_id=friend.id, user=copy.copy(friend))
        workout.participants.append(participant)
        self._notify("participant_invited", workout_id)
        return participant

    def respond_to_invitation(
        self, workout_id: str, user_id: int, status: ParticipantStatus
    ) -> WorkoutParticipant | None:
        """Record a participant's answer to an invitation."""
        if status == ParticipantStatus.PENDING:
            raise ValueError("An invitation response must accept or decline")
        workout = self.get_workout(workout_id)
        if workout is None:
            return None
        for participant in workout.participants:
            if participant.user_id == user_id:
                participant.status = status
                participant.responded_at = datetime.now()
                self._notify("participant_responded", workout_id)
                return participant
        return None

    # ================ FRIENDS ================

    @property
    def friends(self) -> list[Friend]:
        return list(self._friends)

    def set_friends(self, friends: list[Friend]) -> None:
        self._friends = list(friends)
        self._notify("friends_set")

    def add_friend(self, friend: Friend) -> None:
        self._friends.append(friend)
        self._notify("friend_added", friend.id)

    def remove_friend(self, friend_id: int) -> None:
        remaining = [f for f in self._friends if f.id != friend_id]
        if len(remaining) == len(self._friends):
            return
        self._friends = remaining
        self._notify("friend_removed", friend_id)

    def get_friend(self, friend_id: int) -> Friend | None:
        for friend in self._friends:
            if friend.id == friend_id:
                return friend
        return None

    # ================ PENDING EXERCISE HANDOFF ================

    @property
    def pending_exercise_for_workout(self) -> PendingExerciseHandoff:
        return self._pending

    def set_pending_exercise_for_workout(
        self, exercise: Exercise, sets: list[ExerciseSet]
    ) -> None:
        """Stage an exercise and its chosen sets, replacing anything staged before."""
        self._pending = PendingExerciseHandoff(exercise=exercise, sets=list(sets))
        self._notify("handoff_staged", exercise.id)

    def clear_pending_exercise_for_workout(self) -> None:
        self._pending = PendingExerciseHandoff()
        self._notify("handoff_cleared")

    def consume_pending_exercise_for_workout(self) -> PendingExerciseHandoff:
        """Return the staged value and leave the slot empty."""
        staged = self._pending
        if not staged.is_empty:
            self.clear_pending_exercise_for_workout()
        return staged


def _check_patch(entity_cls, patch: dict, protected: tuple[str, ...]) -> None:
    """Reject patches with unknown or protected field names."""
    known = {f.name for f in fields(entity_cls)}
    unknown = set(patch) - known
    if unknown:
        raise ValueError(f"Unknown {entity_cls.__name__} fields: {', '.join(sorted(unknown))}")
    locked = set(patch) & set(protected)
    if locked:
        raise ValueError(f"Cannot change {', '.join(sorted(locked))}")
