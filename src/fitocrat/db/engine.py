"""Database engine setup and initialization."""

import logging
from collections.abc import Iterable
from pathlib import Path

import aiosqlite

from ..models.exercises import Exercise

logger = logging.getLogger(__name__)

# Default data directory
DATA_DIR = Path(__file__).parent.parent.parent.parent / "data"


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = DATA_DIR
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / "fitocrat.db"


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        # Exercise library
        await db.execute("""
            CREATE TABLE IF NOT EXISTS exercises (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT UNIQUE NOT NULL,
                focus TEXT NOT NULL,
                url TEXT
            )
        """)

        # Gear names; bodyweight is implicit and never stored
        await db.execute("""
            CREATE TABLE IF NOT EXISTS gear (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT UNIQUE NOT NULL
            )
        """)

        # Gear required by each exercise
        await db.execute("""
            CREATE TABLE IF NOT EXISTS exercise_gear (
                exercise_id INTEGER NOT NULL,
                gear_id INTEGER NOT NULL,
                PRIMARY KEY (exercise_id, gear_id),
                FOREIGN KEY (exercise_id) REFERENCES exercises(id) ON DELETE CASCADE,
                FOREIGN KEY (gear_id) REFERENCES gear(id) ON DELETE CASCADE
            )
        """)

        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_exercises_focus
            ON exercises(focus)
        """)

        await db.commit()


async def _gear_id(db: aiosqlite.Connection, name: str) -> int:
    await db.execute("INSERT OR IGNORE INTO gear (name) VALUES (?)", (name,))
    cursor = await db.execute("SELECT id FROM gear WHERE name = ?", (name,))
    row = await cursor.fetchone()
    return row[0]


async def seed_exercises(db_path: Path | None, exercises: Iterable[Exercise]) -> int:
    """Insert or replace exercises and their gear links.

    Returns:
        Number of exercises written
    """
    if db_path is None:
        db_path = get_db_path()

    count = 0
    async with aiosqlite.connect(db_path) as db:
        for exercise in exercises:
            await db.execute(
                """
                INSERT INTO exercises (name, focus, url) VALUES (?, ?, ?)
                ON CONFLICT(name) DO UPDATE SET focus = excluded.focus, url = excluded.url
                """,
                (exercise.name, exercise.focus.value, exercise.url),
            )
            cursor = await db.execute(
                "SELECT id FROM exercises WHERE name = ?", (exercise.name,)
            )
            exercise_id = (await cursor.fetchone())[0]

            await db.execute(
                "DELETE FROM exercise_gear WHERE exercise_id = ?", (exercise_id,)
            )
            for name in sorted(exercise.required_gear):
                gear_id = await _gear_id(db, name)
                await db.execute(
                    "INSERT INTO exercise_gear (exercise_id, gear_id) VALUES (?, ?)",
                    (exercise_id, gear_id),
                )
            count += 1

        # Drop gear no exercise needs any more
        await db.execute(
            "DELETE FROM gear WHERE id NOT IN (SELECT gear_id FROM exercise_gear)"
        )
        await db.commit()

    logger.debug("Seeded %d exercises into %s", count, db_path)
    return count
