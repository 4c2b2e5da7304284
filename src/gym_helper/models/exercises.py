"""Exercise definitions and metadata."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class ExerciseStep:
    """One numbered step of an exercise technique."""

    id: str
    step_number: int
    description: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "step_number": self.step_number,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ExerciseStep":
        return cls(
            id=str(data["id"]),
            step_number=data["step_number"],
            description=data["description"],
        )


@dataclass
class ExerciseRecommendation:
    """A short execution tip."""

    id: str
    text: str

    def to_dict(self) -> dict:
        return {"id": self.id, "text": self.text}

    @classmethod
    def from_dict(cls, data: dict) -> "ExerciseRecommendation":
        return cls(id=str(data["id"]), text=data["text"])


@dataclass
class Exercise:
    """A reusable exercise definition.

    Workouts reference exercises by id and never embed a copy. Muscle groups
    keep their declared order with duplicates dropped.
    """

    name: str
    muscle_groups: list[str] = field(default_factory=list)
    equipment: list[str] = field(default_factory=list)
    description: str = ""
    min_weight: float | None = None  # in kg
    max_weight: float | None = None  # in kg
    rest_time: int | None = None  # seconds between sets
    steps: list[ExerciseStep] = field(default_factory=list)
    recommendations: list[ExerciseRecommendation] = field(default_factory=list)
    video_url: str | None = None
    created_by: int | None = None
    created_at: datetime | None = None
    id: str | None = None

    def __post_init__(self):
        self.muscle_groups = list(dict.fromkeys(self.muscle_groups))

    @property
    def has_declared_weight_range(self) -> bool:
        """True when both working-weight bounds are set and the upper one is positive."""
        return (
            _is_number(self.min_weight)
            and _is_number(self.max_weight)
            and self.max_weight > 0
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "name": self.name,
            "muscle_groups": list(self.muscle_groups),
            "equipment": list(self.equipment),
            "description": self.description,
            "min_weight": self.min_weight,
            "max_weight": self.max_weight,
            "rest_time": self.rest_time,
            "steps": [step.to_dict() for step in self.steps],
            "recommendations": [rec.to_dict() for rec in self.recommendations],
            "video_url": self.video_url,
            "created_by": self.created_by,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Exercise":
        """Create from dictionary."""
        created_at = None
        if data.get("created_at"):
            created_at = datetime.fromisoformat(data["created_at"])

        return cls(
            id=str(data["id"]) if data.get("id") is not None else None,
            name=data["name"],
            muscle_groups=data.get("muscle_groups", []),
            equipment=data.get("equipment", []),
            description=data.get("description", ""),
            min_weight=data.get("min_weight"),
            max_weight=data.get("max_weight"),
            rest_time=data.get("rest_time"),
            steps=[ExerciseStep.from_dict(s) for s in data.get("steps", [])],
            recommendations=[
                ExerciseRecommendation.from_dict(r)
                for r in data.get("recommendations", [])
            ],
            video_url=data.get("video_url"),
            created_by=data.get("created_by"),
            created_at=created_at,
        )


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
