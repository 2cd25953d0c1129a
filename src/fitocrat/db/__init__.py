"""Database layer for fitocrat."""

from .catalog import ExerciseCatalog, ExerciseLookup
from .engine import get_db_path, init_db, seed_exercises
from .repositories import ExerciseRepository

__all__ = [
    "ExerciseCatalog",
    "ExerciseLookup",
    "ExerciseRepository",
    "get_db_path",
    "init_db",
    "seed_exercises",
]
