"""Database layer for gym-helper."""

from .engine import get_db_path, init_db
from .repositories import FlagRepository, OnboardingRepository

__all__ = [
    "FlagRepository",
    "get_db_path",
    "init_db",
    "OnboardingRepository",
]
