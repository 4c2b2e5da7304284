"""Request dependencies."""

from fastapi import Request

from ..db.repositories import OnboardingRepository
from ..store import DomainStore


def get_store(request: Request) -> DomainStore:
    """Get the session store from app state."""
    return request.app.state.store


def get_onboarding(request: Request) -> OnboardingRepository:
    """Get the onboarding flag repository from app state."""
    return request.app.state.onboarding
