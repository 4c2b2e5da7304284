"""Workout routes."""

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from ...models.workout import Workout, WorkoutOrigin
from ...services.workout_builder import WorkoutDraft, WorkoutValidationError
from ...store import DomainStore
from ..deps import get_store
from ..schemas import (
    CreateWorkoutRequest,
    InvitationAnswer,
    InviteRequest,
    UpdateWorkoutRequest,
)

router = APIRouter(prefix="/workouts", tags=["workouts"])


def _get_or_404(store: DomainStore, workout_id: str) -> Workout:
    workout = store.get_workout(workout_id)
    if workout is None:
        raise HTTPException(status_code=404, detail="Workout not found")
    return workout


def _patch_from_request(request: UpdateWorkoutRequest) -> dict:
    """Model values for the fields the client actually sent."""
    patch = request.model_dump(exclude_unset=True, exclude={"exercises"})
    if "exercises" in request.model_fields_set:
        patch["exercises"] = [e.to_model() for e in request.exercises or []]
    if "completed" in patch:
        patch["completed"] = bool(patch["completed"])
        patch["completed_at"] = datetime.now() if patch["completed"] else None
    return patch


@router.get("")
async def list_workouts(
    all_workouts: bool = Query(False, alias="all"),
    store: DomainStore = Depends(get_store),
):
    """The user's workouts, or every workout with ``?all=true``."""
    items = store.workouts if all_workouts else store.get_user_workouts()
    return [w.to_dict() for w in items]


@router.post("", status_code=201)
async def create_workout(
    request: CreateWorkoutRequest, store: DomainStore = Depends(get_store)
):
    """Create a user workout, taking in any staged exercise."""
    draft = WorkoutDraft(
        title=request.title,
        date=request.date,
        time=request.time,
        gym=request.gym,
        description=request.description,
        estimated_duration=request.estimated_duration,
    )
    for entry in request.exercises:
        workout_exercise = entry.to_model()
        exercise = store.get_exercise(workout_exercise.exercise_id)
        if exercise is None:
            raise HTTPException(
                status_code=422,
                detail=f"Unknown exercise {workout_exercise.exercise_id}",
            )
        draft.add_exercise(exercise, workout_exercise.sets)
    for friend_id in request.friend_ids:
        friend = store.get_friend(friend_id)
        if friend is None:
            raise HTTPException(status_code=422, detail=f"Unknown friend {friend_id}")
        draft.invite(friend)

    errors = draft.validate()
    if errors:
        raise HTTPException(status_code=422, detail=errors)

    draft.take_pending(store)
    try:
        workout = draft.save(store)
    except WorkoutValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors)
    return workout.to_dict()


@router.get("/pending")
async def get_pending(store: DomainStore = Depends(get_store)):
    """Peek at the staged exercise without consuming it."""
    pending = store.pending_exercise_for_workout
    if pending.is_empty:
        return {"exercise": None, "sets": []}
    return {
        "exercise": pending.exercise.to_dict(),
        "sets": [s.to_dict() for s in pending.sets],
    }


@router.delete("/pending", status_code=204)
async def clear_pending(store: DomainStore = Depends(get_store)):
    store.clear_pending_exercise_for_workout()
    return Response(status_code=204)


@router.get("/{workout_id}")
async def get_workout(workout_id: str, store: DomainStore = Depends(get_store)):
    return _get_or_404(store, workout_id).to_dict()


@router.patch("/{workout_id}")
async def update_workout(
    workout_id: str,
    request: UpdateWorkoutRequest,
    store: DomainStore = Depends(get_store),
):
    workout = _get_or_404(store, workout_id)
    updated = store.update_workout(
        workout_id, _patch_from_request(request), origin=workout.origin
    )
    return updated.to_dict()


@router.delete("/{workout_id}", status_code=204)
async def delete_workout(workout_id: str, store: DomainStore = Depends(get_store)):
    """Delete a workout. Unknown ids succeed as well."""
    workout = store.get_workout(workout_id)
    if workout is not None:
        if workout.origin == WorkoutOrigin.USER:
            store.delete_user_workout(workout_id)
        else:
            store.delete_workout(workout_id)
    return Response(status_code=204)


@router.post("/{workout_id}/complete")
async def complete_workout(workout_id: str, store: DomainStore = Depends(get_store)):
    workout = _get_or_404(store, workout_id)
    if workout.origin == WorkoutOrigin.CATALOG:
        workout = store.mark_workout_as_completed(workout_id)
    else:
        workout = store.update_user_workout(
            workout_id, {"completed": True, "completed_at": datetime.now()}
        )
    return workout.to_dict()


@router.post("/{workout_id}/participants", status_code=201)
async def invite_participant(
    workout_id: str,
    request: InviteRequest,
    store: DomainStore = Depends(get_store),
):
    _get_or_404(store, workout_id)
    friend = store.get_friend(request.friend_id)
    if friend is None:
        raise HTTPException(status_code=404, detail="Friend not found")
    return store.invite_participant(workout_id, friend).to_dict()


@router.post("/{workout_id}/participants/{user_id}")
async def respond_to_invitation(
    workout_id: str,
    user_id: int,
    answer: InvitationAnswer,
    store: DomainStore = Depends(get_store),
):
    """Accept or decline an invitation on behalf of a participant."""
    _get_or_404(store, workout_id)
    try:
        participant = store.respond_to_invitation(workout_id, user_id, answer.status)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    if participant is None:
        raise HTTPException(status_code=404, detail="Participant not found")
    return participant.to_dict()
