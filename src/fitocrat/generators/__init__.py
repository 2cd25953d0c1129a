"""Mission generation and rendering."""

from .mission_builder import (
    GearProbe,
    MissionBuilder,
    build_mission,
    probe_gear_catalog,
    select_exercise,
)
from .mission_text import MissionRenderer, render

__all__ = [
    "build_mission",
    "GearProbe",
    "MissionBuilder",
    "MissionRenderer",
    "probe_gear_catalog",
    "render",
    "select_exercise",
]
