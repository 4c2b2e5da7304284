"""Current user, friends and weekly standings."""

from fastapi import APIRouter, Depends, HTTPException

from ...analytics import build_leaderboard, calculate_achievements
from ...db.repositories import OnboardingRepository
from ...services.session import finish_onboarding
from ...store import DomainStore
from ..deps import get_onboarding, get_store
from ..schemas import UpdateUserRequest

router = APIRouter(tags=["profile"])


@router.get("/me")
async def get_me(store: DomainStore = Depends(get_store)):
    """The session user and whether the onboarding modal should show."""
    user = store.current_user
    if user is None:
        raise HTTPException(status_code=404, detail="No current user")
    return {
        "user": user.to_dict(),
        "show_onboarding_modal": store.show_onboarding_modal,
    }


@router.patch("/me")
async def update_me(
    request: UpdateUserRequest, store: DomainStore = Depends(get_store)
):
    if store.current_user is None:
        raise HTTPException(status_code=404, detail="No current user")
    user = store.update_current_user(request.model_dump(exclude_unset=True))
    return user.to_dict()


@router.post("/me/onboarding/complete")
async def complete_onboarding(
    store: DomainStore = Depends(get_store),
    onboarding: OnboardingRepository = Depends(get_onboarding),
):
    await finish_onboarding(store, onboarding)
    return {"status": "completed", "show_onboarding_modal": store.show_onboarding_modal}


@router.get("/friends")
async def list_friends(store: DomainStore = Depends(get_store)):
    return [f.to_dict() for f in store.friends]


@router.get("/leaderboard")
async def get_leaderboard(store: DomainStore = Depends(get_store)):
    """This week's completed workouts for friends and the current user."""
    entries = build_leaderboard(store.current_user, store.friends, store.workouts)
    return [e.to_dict() for e in entries]


@router.get("/achievements")
async def get_achievements(store: DomainStore = Depends(get_store)):
    return calculate_achievements(store.get_user_workouts()).to_dict()
