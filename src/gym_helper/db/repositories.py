"""Data access layer for gym-helper."""

import json
import logging
from pathlib import Path

import aiosqlite

from .engine import get_db_path, init_db

logger = logging.getLogger(__name__)

ONBOARDING_KEY = "onboarding_completed"


class FlagRepository:
    """Repository for persisted app flags."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def get(self, key: str, default=None):
        """Get a flag value, or ``default`` if it was never written."""
        await init_db(self.db_path)
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "SELECT value FROM app_flags WHERE key = ?", (key,)
            )
            row = await cursor.fetchone()
            if row is None:
                return default
            return json.loads(row[0])

    async def set(self, key: str, value) -> None:
        """Insert or replace a flag value."""
        await init_db(self.db_path)
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO app_flags (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
                """,
                (key, json.dumps(value)),
            )
            await db.commit()

    async def delete(self, key: str) -> None:
        await init_db(self.db_path)
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute("DELETE FROM app_flags WHERE key = ?", (key,))
            await db.commit()


class OnboardingRepository:
    """Has the user completed onboarding on this device."""

    def __init__(self, db_path: Path | None = None):
        self.flags = FlagRepository(db_path)

    async def is_onboarded(self) -> bool:
        return bool(await self.flags.get(ONBOARDING_KEY, False))

    async def set_onboarded(self, onboarded: bool = True) -> None:
        logger.debug("onboarding flag -> %s", onboarded)
        await self.flags.set(ONBOARDING_KEY, onboarded)

    async def reset(self) -> None:
        await self.flags.delete(ONBOARDING_KEY)
