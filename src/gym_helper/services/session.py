"""Session bootstrap: current user identity and onboarding state."""

import logging
from typing import Protocol, runtime_checkable

from ..config import Settings, get_settings
from ..db.repositories import OnboardingRepository
from ..models.user import User
from ..store import DomainStore

logger = logging.getLogger(__name__)


@runtime_checkable
class IdentityClient(Protocol):
    """Host-platform identity source."""

    async def fetch_profile(self) -> dict:
        """Return ``{id, first_name, last_name, photo_200, city}`` or raise."""
        ...


def user_from_profile(profile: dict, first_login: bool) -> User:
    """Map a raw identity profile onto the stored User shape.

    ``city`` may be a plain string or an object with a ``title``.
    """
    city = profile.get("city")
    if isinstance(city, dict):
        city = city.get("title")

    return User(
        id=profile["id"],
        first_name=profile.get("first_name", ""),
        last_name=profile.get("last_name", ""),
        photo=profile.get("photo_200"),
        city=city,
        first_login=first_login,
    )


async def bootstrap_current_user(
    store: DomainStore,
    client: IdentityClient | None,
    onboarding: OnboardingRepository,
    settings: Settings | None = None,
) -> User:
    """Resolve the session's user and write it into the store.

    A missing client, or one that fails or returns an incomplete profile,
    is replaced by the configured fallback profile.
    """
    settings = settings or get_settings()
    first_login = not await onboarding.is_onboarded()

    user = None
    if client is not None:
        try:
            profile = await client.fetch_profile()
            user = user_from_profile(profile, first_login=first_login)
        except Exception as e:
            logger.warning("Identity fetch failed, using fallback profile: %s", e)
    if user is None:
        user = user_from_profile(
            settings.fallback_profile.to_profile(), first_login=first_login
        )

    store.set_current_user(user)
    logger.info("Current user %s (%s)", user.id, user.full_name)
    return user


async def finish_onboarding(store: DomainStore, onboarding: OnboardingRepository) -> None:
    """Persist onboarding completion and close the first-run gate."""
    await onboarding.set_onboarded(True)
    if store.current_user is not None:
        store.update_current_user({"first_login": False})
    store.set_show_onboarding_modal(False)
