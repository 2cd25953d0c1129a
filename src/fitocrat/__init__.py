"""fitocrat: random workout missions constrained by available gear."""

from .errors import (
    FitocratError,
    InvalidFormatError,
    MissionUnbuildableError,
    NoCandidateForFocus,
)
from .generators import GearProbe, MissionBuilder, build_mission, probe_gear_catalog, render
from .models import Exercise, Focus, Mission, MissionMode

__version__ = "0.1.0"

__all__ = [
    "build_mission",
    "Exercise",
    "FitocratError",
    "Focus",
    "GearProbe",
    "InvalidFormatError",
    "Mission",
    "MissionBuilder",
    "MissionMode",
    "MissionUnbuildableError",
    "NoCandidateForFocus",
    "probe_gear_catalog",
    "render",
]
