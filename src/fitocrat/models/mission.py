"""Mission templates and the built mission model."""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, TypeVar, runtime_checkable

from .exercises import Exercise, Focus

T = TypeVar("T")


@runtime_checkable
class RandomSource(Protocol):
    """Anything with a ``random.Random``-style ``choice``."""

    def choice(self, seq: Sequence[T]) -> T: ...


class MissionMode(str, Enum):
    """Workout structures a mission can follow."""

    STANDARD = "standard"
    CALISTHENICS = "calisthenics"


@dataclass(frozen=True)
class Slot:
    """One exercise position in a template.

    A slot with several choices is resolved by a fair random pick at the
    start of each attempt (the standard template's neck-or-grip slot).
    """

    choices: tuple[Focus, ...]
    reps: str  # Rep scheme printed after the exercise name

    @property
    def label(self) -> str:
        return "-or-".join(f.value for f in self.choices)

    def resolve(self, rng: RandomSource) -> Focus:
        if len(self.choices) == 1:
            return self.choices[0]
        return rng.choice(self.choices)


@dataclass(frozen=True)
class FocusTemplate:
    """A fixed workout structure and its phrasing.

    Slots are grouped into rounds; each round is one numbered item when the
    mission is rendered. ``alternate`` rounds are phrased as pairs
    ("A, alternate with B") instead of a plain run of exercises.
    """

    mode: MissionMode
    rounds: tuple[tuple[Slot, ...], ...]
    alternate: bool = False

    @property
    def slots(self) -> tuple[Slot, ...]:
        return tuple(slot for round_ in self.rounds for slot in round_)

    @property
    def foci(self) -> tuple[str, ...]:
        """Slot labels in order, e.g. ``("pull-up", ..., "neck-or-grip", "abs")``."""
        return tuple(slot.label for slot in self.slots)

    def resolve(self, rng: RandomSource) -> list[Focus]:
        """Fix every slot to a single focus for one attempt."""
        return [slot.resolve(rng) for slot in self.slots]


def _slot(focus: Focus, reps: str) -> Slot:
    return Slot(choices=(focus,), reps=reps)


STANDARD_TEMPLATE = FocusTemplate(
    mode=MissionMode.STANDARD,
    alternate=True,
    rounds=(
        (_slot(Focus.PULL_UP, "10 x 3"), _slot(Focus.PUSH_UP, "25 x 3")),
        (_slot(Focus.WHEEL_HOUSE, "10-15 x 3"), _slot(Focus.ABS, "50 x 3")),
        (_slot(Focus.ASSIST, "10-15 x 3"), _slot(Focus.ABS, "50 x 3")),
        (Slot(choices=(Focus.NECK, Focus.GRIP), reps="Max x 2"), _slot(Focus.ABS, "50")),
    ),
)

CALISTHENICS_TEMPLATE = FocusTemplate(
    mode=MissionMode.CALISTHENICS,
    rounds=(
        (
            _slot(Focus.PULL_UP, "10 x 3"),
            _slot(Focus.PUSH_UP, "25 x 3"),
            _slot(Focus.ABS, "50 x 3"),
        ),
        (
            _slot(Focus.WHEEL_HOUSE, "25 x 3"),
            _slot(Focus.WHEEL_HOUSE, "10 x 3"),
            _slot(Focus.ABS, "50 x 3"),
        ),
    ),
)

TEMPLATES: dict[MissionMode, FocusTemplate] = {
    MissionMode.STANDARD: STANDARD_TEMPLATE,
    MissionMode.CALISTHENICS: CALISTHENICS_TEMPLATE,
}


@dataclass(frozen=True)
class Mission:
    """A fully resolved workout.

    ``requested_mode`` is what the caller asked for; ``resolved_mode`` is the
    template that actually produced the exercises. A standard request can
    resolve to calisthenics when the gear cannot cover the standard template.
    """

    requested_mode: MissionMode
    resolved_mode: MissionMode
    exercises: tuple[Exercise, ...]
    gear: frozenset[str]

    def __post_init__(self):
        expected = len(self.template.slots)
        if len(self.exercises) != expected:
            raise ValueError(
                f"{self.resolved_mode.value} mission needs {expected} exercises, "
                f"got {len(self.exercises)}"
            )

    @property
    def template(self) -> FocusTemplate:
        return TEMPLATES[self.resolved_mode]

    @property
    def fell_back(self) -> bool:
        """True when the mission did not follow the requested template."""
        return self.requested_mode != self.resolved_mode

    def rounds(self) -> list[list[tuple[Exercise, Slot]]]:
        """Pair exercises with their slots, grouped by round."""
        it = iter(self.exercises)
        return [[(next(it), slot) for slot in round_] for round_ in self.template.rounds]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON export."""
        return {
            "requested_mode": self.requested_mode.value,
            "resolved_mode": self.resolved_mode.value,
            "gear": sorted(self.gear),
            "exercises": [
                {**exercise.to_dict(), "reps": slot.reps}
                for exercise, slot in zip(self.exercises, self.template.slots)
            ],
        }
