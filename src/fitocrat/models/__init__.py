"""Data models for fitocrat."""

from .exercises import BODYWEIGHT, Exercise, Focus, make_gear_set
from .mission import (
    CALISTHENICS_TEMPLATE,
    STANDARD_TEMPLATE,
    TEMPLATES,
    FocusTemplate,
    Mission,
    MissionMode,
    RandomSource,
    Slot,
)

__all__ = [
    "BODYWEIGHT",
    "CALISTHENICS_TEMPLATE",
    "Exercise",
    "Focus",
    "FocusTemplate",
    "make_gear_set",
    "Mission",
    "MissionMode",
    "RandomSource",
    "Slot",
    "STANDARD_TEMPLATE",
    "TEMPLATES",
]
