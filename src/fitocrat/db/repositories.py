"""Data access layer for fitocrat."""

import logging
from pathlib import Path

import aiosqlite

from ..models.exercises import Exercise, Focus
from .catalog import ExerciseCatalog
from .engine import get_db_path

logger = logging.getLogger(__name__)

_EXERCISE_QUERY = """
    SELECT e.id, e.name, e.focus, e.url, GROUP_CONCAT(g.name, '|') AS gear
    FROM exercises e
    LEFT JOIN exercise_gear eg ON eg.exercise_id = e.id
    LEFT JOIN gear g ON g.id = eg.gear_id
"""


class ExerciseRepository:
    """Repository for the exercise library."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def get_by_name(self, name: str) -> Exercise | None:
        """Get an exercise by name."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                _EXERCISE_QUERY + " WHERE e.name = ? GROUP BY e.id", (name,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_exercise(row)

    async def get_by_focus(self, focus: Focus) -> list[Exercise]:
        """Get every exercise with a focus, regardless of gear."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                _EXERCISE_QUERY + " WHERE e.focus = ? GROUP BY e.id ORDER BY e.name",
                (Focus(focus).value,),
            )
            rows = await cursor.fetchall()
            return self._rows_to_exercises(rows)

    async def list_all(self) -> list[Exercise]:
        """List all exercises."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(_EXERCISE_QUERY + " GROUP BY e.id ORDER BY e.name")
            rows = await cursor.fetchall()
            return self._rows_to_exercises(rows)

    async def list_gear_names(self) -> list[str]:
        """List every gear name in the gear table."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute("SELECT name FROM gear ORDER BY name")
            rows = await cursor.fetchall()
            return [row[0] for row in rows]

    async def load_catalog(self) -> ExerciseCatalog:
        """Read the whole library into an in-memory catalog."""
        exercises = await self.list_all()
        gear_names = await self.list_gear_names()
        logger.debug(
            "Loaded %d exercises and %d gear names from %s",
            len(exercises),
            len(gear_names),
            self.db_path,
        )
        return ExerciseCatalog(exercises, gear_names)

    def _rows_to_exercises(self, rows) -> list[Exercise]:
        exercises = []
        for row in rows:
            try:
                exercises.append(self._row_to_exercise(row))
            except ValueError:
                logger.warning(
                    "Skipping exercise %r with unknown focus %r", row["name"], row["focus"]
                )
        return exercises

    def _row_to_exercise(self, row: aiosqlite.Row) -> Exercise:
        """Convert a database row to an Exercise."""
        gear = row["gear"].split("|") if row["gear"] else []
        return Exercise(
            id=row["id"],
            name=row["name"],
            focus=Focus(row["focus"]),
            gear=tuple(sorted(gear)),
            url=row["url"],
        )
