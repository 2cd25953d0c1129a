"""CLI commands for fitocrat."""

from .exercises import exercises
from .gear import gear
from .init import init
from .mission import mission

__all__ = [
    "exercises",
    "gear",
    "init",
    "mission",
]
