"""Pytest configuration and fixtures."""

import tempfile
from pathlib import Path

import pytest

from fitocrat.db.catalog import ExerciseCatalog
from fitocrat.models.exercises import Exercise, Focus


class FirstChoice:
    """Random source that always picks the first option."""

    def choice(self, seq):
        return seq[0]


class LastChoice:
    """Random source that always picks the last option."""

    def choice(self, seq):
        return seq[-1]


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def sample_exercises():
    """A small library with bodyweight cover for the calisthenics template only."""
    return [
        Exercise(name="Pull-ups", focus=Focus.PULL_UP, gear=("pull-up bar",)),
        Exercise(name="Table Rows", focus=Focus.PULL_UP),
        Exercise(name="Push-ups", focus=Focus.PUSH_UP),
        Exercise(name="Dips", focus=Focus.PUSH_UP, gear=("dip bars",)),
        Exercise(name="Crunches", focus=Focus.ABS),
        Exercise(name="Flutter Kicks", focus=Focus.ABS),
        Exercise(name="Air Squats", focus=Focus.WHEEL_HOUSE),
        Exercise(name="Kettlebell Swings", focus=Focus.WHEEL_HOUSE, gear=("kettlebell",)),
        Exercise(name="Sandbag Carries", focus=Focus.ASSIST, gear=("sandbag",)),
        Exercise(name="Turkish Get-ups", focus=Focus.ASSIST, gear=("kettlebell",)),
        Exercise(name="Neck Bridges", focus=Focus.NECK),
        Exercise(name="Towel Hangs", focus=Focus.GRIP, gear=("pull-up bar",)),
        Exercise(name="Sandbag Pinch Holds", focus=Focus.GRIP, gear=("sandbag",)),
    ]


@pytest.fixture
def catalog(sample_exercises):
    """In-memory catalog over the sample library."""
    return ExerciseCatalog(sample_exercises)


@pytest.fixture
def first_choice():
    return FirstChoice()


@pytest.fixture
def last_choice():
    return LastChoice()
