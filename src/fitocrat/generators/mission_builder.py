"""Random mission construction.

A mission is built by walking a template's focus slots and drawing one
exercise per slot, uniformly at random among the exercises the available gear
allows. Standard requests fall back to the calisthenics template when the
gear cannot cover every standard slot; calisthenics requests never fall back.

Each template is attempted once per build. The standard template's
neck-or-grip slot is decided by a coin flip at the start of the attempt, so
an unlucky flip can push a build onto the fallback even though the other
side of the coin would have worked.
"""

import logging
import random
from collections.abc import Iterable
from dataclasses import dataclass

from ..db.catalog import ExerciseLookup
from ..errors import MissionUnbuildableError, NoCandidateForFocus
from ..models.exercises import BODYWEIGHT, Exercise, Focus, make_gear_set
from ..models.mission import (
    CALISTHENICS_TEMPLATE,
    STANDARD_TEMPLATE,
    FocusTemplate,
    Mission,
    MissionMode,
    RandomSource,
)

logger = logging.getLogger(__name__)


def select_exercise(
    lookup: ExerciseLookup, focus: Focus, gear: Iterable[str], rng: RandomSource
) -> Exercise | None:
    """Pick one exercise for a focus, or None if nothing matches."""
    candidates = lookup.find_candidates(focus, gear)
    if not candidates:
        return None
    return rng.choice(list(candidates))


@dataclass(frozen=True)
class GearProbe:
    """Whether a single piece of gear (plus bodyweight) covers the standard template."""

    name: str
    can_complete_standard: bool

    def __str__(self) -> str:
        if self.can_complete_standard:
            return f"{self.name} (can complete standard mission)"
        return self.name


class MissionBuilder:
    """Builds missions against an exercise lookup.

    Args:
        lookup: Dataset to draw exercises from
        rng: Random source with a ``choice`` method. Pass a seeded
            ``random.Random`` (or a stub) for reproducible missions.
    """

    def __init__(self, lookup: ExerciseLookup, rng: RandomSource | None = None):
        self.lookup = lookup
        self.rng = rng if rng is not None else random.Random()

    def build(self, gear: Iterable[str] | None = None, calisthenics: bool = False) -> Mission:
        """Build a mission, falling back to calisthenics for standard requests.

        Raises:
            MissionUnbuildableError: if no allowed template can be satisfied
        """
        gear_set = make_gear_set(gear)
        requested = MissionMode.CALISTHENICS if calisthenics else MissionMode.STANDARD

        if requested == MissionMode.CALISTHENICS:
            templates = [CALISTHENICS_TEMPLATE]
        else:
            templates = [STANDARD_TEMPLATE, CALISTHENICS_TEMPLATE]

        for template in templates:
            exercises = self.attempt(template, gear_set)
            if exercises is None:
                continue
            if template.mode != requested:
                logger.info(
                    "Fell back to %s mission; %s template not satisfiable",
                    template.mode.value,
                    requested.value,
                )
            return Mission(
                requested_mode=requested,
                resolved_mode=template.mode,
                exercises=tuple(exercises),
                gear=gear_set,
            )

        raise MissionUnbuildableError(requested, gear_set)

    def attempt(self, template: FocusTemplate, gear: Iterable[str]) -> list[Exercise] | None:
        """Try to fill every slot of a template once.

        Returns:
            Exercises in slot order, or None if any slot has no candidate
        """
        foci = template.resolve(self.rng)
        logger.debug(
            "Trying %s template: %s", template.mode.value, " ".join(f.value for f in foci)
        )
        try:
            return [self._select(focus, gear) for focus in foci]
        except NoCandidateForFocus as e:
            logger.debug("%s template failed: %s", template.mode.value, e)
            return None

    def probe_gear(self) -> list[GearProbe]:
        """Report, for each gear name, whether it alone covers the standard template."""
        probes = []
        for name in self.lookup.list_all_gear_names():
            if name == BODYWEIGHT:
                continue
            exercises = self.attempt(STANDARD_TEMPLATE, make_gear_set([name]))
            probes.append(GearProbe(name=name, can_complete_standard=exercises is not None))
        return probes

    def _select(self, focus: Focus, gear: Iterable[str]) -> Exercise:
        exercise = select_exercise(self.lookup, focus, gear, self.rng)
        if exercise is None:
            raise NoCandidateForFocus(focus, make_gear_set(gear))
        return exercise


def build_mission(
    lookup: ExerciseLookup,
    gear: Iterable[str] | None = None,
    calisthenics: bool = False,
    rng: RandomSource | None = None,
) -> Mission:
    """Build a mission with the given gear.

    Args:
        lookup: Dataset to draw exercises from
        gear: Available gear names; bodyweight is always included
        calisthenics: Request the calisthenics template (no fallback)
        rng: Optional random source

    Returns:
        The built mission. Check ``resolved_mode`` to see which template
        was used.

    Raises:
        MissionUnbuildableError: if no allowed template can be satisfied
    """
    return MissionBuilder(lookup, rng).build(gear, calisthenics=calisthenics)


def probe_gear_catalog(
    lookup: ExerciseLookup, rng: RandomSource | None = None
) -> list[GearProbe]:
    """List every gear name with whether it alone covers the standard template."""
    return MissionBuilder(lookup, rng).probe_gear()
