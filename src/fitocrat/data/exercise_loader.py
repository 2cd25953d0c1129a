"""Exercise library loader from JSON."""

import json
import logging
from pathlib import Path

from ..db.engine import get_db_path, seed_exercises
from ..models.exercises import Exercise

logger = logging.getLogger(__name__)


def get_exercises_json_path() -> Path:
    """Get the path to the bundled exercise library."""
    return Path(__file__).parent / "exercises.json"


def load_library_exercises(json_path: Path | None = None) -> list[Exercise]:
    """Load exercises from a library JSON file.

    Args:
        json_path: Library file to read. Uses the bundled library if not provided.

    Returns:
        List of Exercise objects loaded from JSON
    """
    json_path = json_path or get_exercises_json_path()
    if not json_path.exists():
        return []

    with open(json_path) as f:
        data = json.load(f)

    exercises = []
    for ex_data in data.get("exercises", []):
        try:
            exercises.append(Exercise.from_dict(ex_data))
        except (ValueError, KeyError) as e:
            logger.warning(
                "Skipping invalid exercise %s: %s", ex_data.get("name", "unknown"), e
            )
            continue

    return exercises


async def seed_exercises_from_json(
    db_path: Path | None = None, json_path: Path | None = None
) -> int:
    """Seed the database with exercises from a library JSON file.

    Args:
        db_path: Optional database path. Uses default if not provided.
        json_path: Optional library file. Uses the bundled library if not provided.

    Returns:
        Number of exercises seeded
    """
    if db_path is None:
        db_path = get_db_path()

    exercises = load_library_exercises(json_path)
    return await seed_exercises(db_path, exercises)
