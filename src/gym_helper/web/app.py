"""FastAPI application for the gym-helper JSON API."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from ..config import Settings, get_settings
from ..data import build_store
from ..db.engine import init_db
from ..db.repositories import OnboardingRepository
from ..services.session import IdentityClient, bootstrap_current_user
from ..store import DomainStore
from .routers import exercises, profile, workouts


def create_app(
    store: DomainStore | None = None,
    settings: Settings | None = None,
    identity_client: IdentityClient | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    One store instance lives for the whole process and is shared by all
    requests through ``app.state``.
    """
    settings = settings or get_settings()
    if store is None:
        store = build_store(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup: schema, then the session user."""
        await init_db(settings.db_path)
        if store.current_user is None:
            await bootstrap_current_user(
                store, identity_client, app.state.onboarding, settings
            )
        yield

    app = FastAPI(
        title="gym-helper",
        description="Workout tracking store and exercise analytics",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.store = store
    app.state.onboarding = OnboardingRepository(settings.db_path)

    app.include_router(exercises.router)
    app.include_router(workouts.router)
    app.include_router(profile.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": "0.1.0"}

    return app
