"""Tests for the session bootstrap and onboarding persistence."""

import asyncio

from gym_helper.config import FallbackProfile, Settings
from gym_helper.db.repositories import FlagRepository, OnboardingRepository
from gym_helper.services.session import bootstrap_current_user, finish_onboarding, user_from_profile


class StaticIdentityClient:
    def __init__(self, profile):
        self.profile = profile

    async def fetch_profile(self) -> dict:
        return self.profile


class FailingIdentityClient:
    async def fetch_profile(self) -> dict:
        raise ConnectionError("bridge unavailable")


class PartialIdentityClient:
    async def fetch_profile(self) -> dict:
        return {"first_name": "Только"}


PROFILE = {
    "id": 4242,
    "first_name": "Анна",
    "last_name": "Смирнова",
    "photo_200": "https://example.com/a.jpg",
    "city": {"id": 2, "title": "Санкт-Петербург"},
}


class TestUserFromProfile:
    def test_city_object(self):
        user = user_from_profile(PROFILE, first_login=False)
        assert user.city == "Санкт-Петербург"
        assert user.photo == "https://example.com/a.jpg"

    def test_city_string(self):
        user = user_from_profile({**PROFILE, "city": "Казань"}, first_login=True)
        assert user.city == "Казань"
        assert user.first_login is True


class TestBootstrap:
    """Tests for bootstrap_current_user."""

    def test_identity_client_profile(self, store, settings):
        onboarding = OnboardingRepository(settings.db_path)
        user = asyncio.run(
            bootstrap_current_user(store, StaticIdentityClient(PROFILE), onboarding, settings)
        )

        assert user.id == 4242
        assert store.current_user is user
        assert user.first_login is True
        assert store.show_onboarding_modal is True

    def test_failing_client_uses_fallback(self, store, settings):
        onboarding = OnboardingRepository(settings.db_path)
        user = asyncio.run(
            bootstrap_current_user(store, FailingIdentityClient(), onboarding, settings)
        )

        assert user.id == 1
        assert user.full_name == "Тестовый Пользователь"
        assert user.city == "Москва"

    def test_incomplete_profile_uses_fallback(self, store, settings):
        onboarding = OnboardingRepository(settings.db_path)
        user = asyncio.run(
            bootstrap_current_user(store, PartialIdentityClient(), onboarding, settings)
        )

        assert user.id == 1
        assert user.first_name == "Тестовый"
        assert store.current_user is user

    def test_no_client_uses_configured_fallback(self, store, tmp_path):
        settings = Settings(
            data_dir=tmp_path,
            fallback_profile=FallbackProfile(id=7, first_name="Гость", last_name="", city=None),
        )
        onboarding = OnboardingRepository(settings.db_path)
        user = asyncio.run(bootstrap_current_user(store, None, onboarding, settings))

        assert user.id == 7
        assert user.full_name == "Гость"

    def test_onboarded_user_skips_modal(self, store, settings):
        onboarding = OnboardingRepository(settings.db_path)
        asyncio.run(onboarding.set_onboarded(True))
        user = asyncio.run(bootstrap_current_user(store, None, onboarding, settings))

        assert user.first_login is False
        assert store.show_onboarding_modal is False


class TestOnboarding:
    """Tests for onboarding persistence."""

    def test_finish_onboarding(self, store, settings):
        onboarding = OnboardingRepository(settings.db_path)
        asyncio.run(bootstrap_current_user(store, None, onboarding, settings))
        asyncio.run(finish_onboarding(store, onboarding))

        assert store.show_onboarding_modal is False
        assert store.current_user.first_login is False
        assert asyncio.run(onboarding.is_onboarded()) is True

    def test_flag_survives_new_repository(self, settings):
        asyncio.run(OnboardingRepository(settings.db_path).set_onboarded(True))
        assert asyncio.run(OnboardingRepository(settings.db_path).is_onboarded()) is True

    def test_reset(self, settings):
        onboarding = OnboardingRepository(settings.db_path)
        asyncio.run(onboarding.set_onboarded(True))
        asyncio.run(onboarding.reset())
        assert asyncio.run(onboarding.is_onboarded()) is False

    def test_flag_repository_json_values(self, settings):
        flags = FlagRepository(settings.db_path)
        asyncio.run(flags.set("theme", {"dark": True}))
        asyncio.run(flags.set("theme", {"dark": False}))

        assert asyncio.run(flags.get("theme")) == {"dark": False}
        assert asyncio.run(flags.get("missing", "default")) == "default"
