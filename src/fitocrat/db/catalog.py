"""In-memory exercise catalog used by the mission builder."""

from collections.abc import Iterable, Sequence
from typing import Protocol, runtime_checkable

from ..models.exercises import BODYWEIGHT, Exercise, Focus, make_gear_set


@runtime_checkable
class ExerciseLookup(Protocol):
    """Query interface the mission builder needs from a dataset."""

    def find_candidates(self, focus: Focus, gear: Iterable[str]) -> Sequence[Exercise]:
        """Return every exercise for ``focus`` that ``gear`` allows."""
        ...

    def list_all_gear_names(self) -> Sequence[str]:
        """Return the distinct gear names present in the dataset."""
        ...


class ExerciseCatalog:
    """Read-only exercise library held in memory.

    Loaded once per process (see ``ExerciseRepository.load_catalog``) and
    passed explicitly to whatever needs it.
    """

    def __init__(self, exercises: Iterable[Exercise], gear_names: Iterable[str] | None = None):
        self._by_focus: dict[Focus, list[Exercise]] = {}
        for exercise in sorted(exercises, key=lambda e: e.name):
            self._by_focus.setdefault(exercise.focus, []).append(exercise)

        if gear_names is None:
            gear_names = (g for e in self.exercises for g in e.required_gear)
        self._gear_names = sorted({g for g in gear_names if g and g != BODYWEIGHT})

    def __len__(self) -> int:
        return sum(len(v) for v in self._by_focus.values())

    @property
    def exercises(self) -> list[Exercise]:
        return [e for group in self._by_focus.values() for e in group]

    def find_candidates(self, focus: Focus, gear: Iterable[str]) -> list[Exercise]:
        available = make_gear_set(gear)
        return [
            e for e in self._by_focus.get(Focus(focus), []) if e.required_gear <= available
        ]

    def list_all_gear_names(self) -> list[str]:
        return list(self._gear_names)
