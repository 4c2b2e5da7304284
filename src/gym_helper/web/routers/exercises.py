"""Exercise library routes."""

from fastapi import APIRouter, Depends, HTTPException

from ...analytics import calculate_exercise_stats, exercise_history
from ...models.exercises import Exercise
from ...store import DomainStore
from ..deps import get_store
from ..schemas import StageRequest

router = APIRouter(prefix="/exercises", tags=["exercises"])


def _get_or_404(store: DomainStore, exercise_id: str) -> Exercise:
    exercise = store.get_exercise(exercise_id)
    if exercise is None:
        raise HTTPException(status_code=404, detail="Exercise not found")
    return exercise


@router.get("")
async def list_exercises(q: str = "", store: DomainStore = Depends(get_store)):
    """List exercises, optionally filtered by name."""
    return [e.to_dict() for e in store.search_exercises(q)]


@router.get("/filters")
async def exercise_filters(store: DomainStore = Depends(get_store)):
    """Distinct muscle groups and equipment across the library."""
    return {
        "muscle_groups": store.unique_muscle_groups(),
        "equipment": store.unique_equipment(),
    }


@router.get("/{exercise_id}")
async def get_exercise(exercise_id: str, store: DomainStore = Depends(get_store)):
    return _get_or_404(store, exercise_id).to_dict()


@router.get("/{exercise_id}/stats")
async def get_exercise_stats(exercise_id: str, store: DomainStore = Depends(get_store)):
    """Statistics and difficulty, recomputed from the current workouts."""
    exercise = _get_or_404(store, exercise_id)
    return calculate_exercise_stats(exercise, store.workouts).to_dict()


@router.get("/{exercise_id}/history")
async def get_exercise_history(exercise_id: str, store: DomainStore = Depends(get_store)):
    _get_or_404(store, exercise_id)
    return [group.to_dict() for group in exercise_history(exercise_id, store.workouts)]


@router.post("/{exercise_id}/stage")
async def stage_exercise(
    exercise_id: str,
    request: StageRequest | None = None,
    store: DomainStore = Depends(get_store),
):
    """Stage this exercise and chosen sets for the next created workout."""
    exercise = _get_or_404(store, exercise_id)
    sets = [s.to_model() for s in request.sets] if request else []
    store.set_pending_exercise_for_workout(exercise, sets)
    return {"status": "staged", "exercise_id": exercise_id, "sets": len(sets)}
