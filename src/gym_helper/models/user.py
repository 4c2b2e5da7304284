"""User and friend data models."""

from dataclasses import dataclass
from enum import Enum


class UserLevel(str, Enum):
    """Self-reported training level."""

    BEGINNER = "beginner"
    AMATEUR = "amateur"
    ADVANCED = "advanced"
    EXPERT = "expert"


class FriendStatus(str, Enum):
    """What a friend is currently up to."""

    IN_GYM = "in_gym"
    LOOKING_FOR_PARTNER = "looking_for_partner"
    FINISHED_WORKOUT = "finished_workout"
    RESTING = "resting"


@dataclass
class User:
    """The app user (self or another person)."""

    id: int
    first_name: str
    last_name: str
    photo: str | None = None
    city: str | None = None
    level: UserLevel = UserLevel.BEGINNER
    main_gym: str | None = None
    first_login: bool = False

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "photo": self.photo,
            "city": self.city,
            "level": self.level.value,
            "main_gym": self.main_gym,
            "first_login": self.first_login,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            first_name=data["first_name"],
            last_name=data.get("last_name", ""),
            photo=data.get("photo"),
            city=data.get("city"),
            level=UserLevel(data.get("level", "beginner")),
            main_gym=data.get("main_gym"),
            first_login=data.get("first_login", False),
        )


@dataclass
class Friend:
    """A social contact, lighter than a full User."""

    id: int
    first_name: str
    last_name: str = ""
    photo: str | None = None
    gym: str | None = None
    is_online: bool = False
    status: FriendStatus = FriendStatus.RESTING

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "photo": self.photo,
            "gym": self.gym,
            "is_online": self.is_online,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Friend":
        return cls(
            id=data["id"],
            first_name=data["first_name"],
            last_name=data.get("last_name", ""),
            photo=data.get("photo"),
            gym=data.get("gym"),
            is_online=data.get("is_online", False),
            status=FriendStatus(data.get("status", "resting")),
        )
