"""Application settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

# Default data directory
DATA_DIR = Path(__file__).parent.parent.parent / "data"


class FallbackProfile(BaseModel):
    """Identity used when the host platform cannot supply one."""

    id: int = 1
    first_name: str = "Тестовый"
    last_name: str = "Пользователь"
    photo_200: str | None = "https://via.placeholder.com/200"
    city: str | None = "Москва"

    def to_profile(self) -> dict:
        """Same shape the identity client returns."""
        return self.model_dump()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="GYM_HELPER_",
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
    )

    data_dir: Path = DATA_DIR
    db_name: str = "gym_helper.db"
    demo_data: bool = True
    fallback_profile: FallbackProfile = FallbackProfile()

    @property
    def db_path(self) -> Path:
        return self.data_dir / self.db_name


@lru_cache
def get_settings() -> Settings:
    return Settings()
