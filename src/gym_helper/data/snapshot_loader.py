"""Load exercises, workouts and friends from JSON snapshots."""

import json
import logging
from pathlib import Path

from ..config import Settings
from ..models.exercises import Exercise
from ..models.user import Friend
from ..models.workout import Workout
from ..store import DomainStore

logger = logging.getLogger(__name__)


def get_demo_snapshot_path() -> Path:
    """Get the path to the bundled demo snapshot."""
    return Path(__file__).parent / "demo_snapshot.json"


def load_snapshot(store: DomainStore, data: dict) -> int:
    """Populate ``store`` from a snapshot dictionary.

    Invalid entries are skipped with a warning.

    Returns:
        Number of entities loaded
    """
    count = 0

    for ex_data in data.get("exercises", []):
        try:
            store.add_exercise(Exercise.from_dict(ex_data))
            count += 1
        except (ValueError, KeyError, TypeError) as e:
            logger.warning("Skipping invalid exercise %s: %s", ex_data.get("name", "unknown"), e)

    for w_data in data.get("workouts", []):
        try:
            store.load_workout(Workout.from_dict(w_data))
            count += 1
        except (ValueError, KeyError, TypeError) as e:
            logger.warning("Skipping invalid workout %s: %s", w_data.get("title", "unknown"), e)

    friends = []
    for f_data in data.get("friends", []):
        try:
            friends.append(Friend.from_dict(f_data))
        except (ValueError, KeyError) as e:
            logger.warning("Skipping invalid friend %s: %s", f_data.get("id", "unknown"), e)
    if friends:
        store.set_friends(store.friends + friends)
        count += len(friends)

    return count


def load_snapshot_file(store: DomainStore, path: Path | None = None) -> int:
    """Load a snapshot file (the bundled demo data by default)."""
    path = path or get_demo_snapshot_path()
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    return load_snapshot(store, data)


def dump_snapshot(store: DomainStore) -> dict:
    """Serialize the store's collections into snapshot form."""
    return {
        "exercises": [e.to_dict() for e in store.exercises],
        "workouts": [w.to_dict() for w in store.workouts],
        "friends": [f.to_dict() for f in store.friends],
    }


def build_store(settings: Settings, data_path: Path | None = None) -> DomainStore:
    """Create the session store, seeded from a snapshot or the demo data."""
    store = DomainStore()
    if data_path is not None:
        load_snapshot_file(store, data_path)
    elif settings.demo_data:
        load_snapshot_file(store)
    return store
