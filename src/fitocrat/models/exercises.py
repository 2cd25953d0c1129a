"""Exercise definitions and gear handling."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

# Sentinel gear name for bodyweight work; always available
BODYWEIGHT = "none"


class Focus(str, Enum):
    """Movement categories an exercise can target."""

    PULL_UP = "pull-up"
    PUSH_UP = "push-up"
    ABS = "abs"
    WHEEL_HOUSE = "wheel-house"  # legs and hips
    ASSIST = "assist"
    NECK = "neck"
    GRIP = "grip"


def make_gear_set(gear: Iterable[str] | None = None) -> frozenset[str]:
    """Normalize user-supplied gear names into a gear set.

    The bodyweight sentinel is always included, so ``None`` or an empty
    iterable means bodyweight only. Names are stripped and blanks dropped.
    """
    names = {BODYWEIGHT}
    for name in gear or ():
        name = name.strip()
        if name:
            names.add(name)
    return frozenset(names)


@dataclass(frozen=True)
class Exercise:
    """A named exercise in the reference library."""

    name: str
    focus: Focus
    gear: tuple[str, ...] = ()
    url: str | None = None  # Reference link used by markup rendering
    id: int | None = field(default=None, compare=False)

    @property
    def required_gear(self) -> frozenset[str]:
        """Gear needed beyond bodyweight."""
        return frozenset(g for g in self.gear if g != BODYWEIGHT)

    def is_available_with(self, gear: Iterable[str]) -> bool:
        """Check whether every piece of required gear is on hand."""
        return self.required_gear <= make_gear_set(gear)

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "name": self.name,
            "focus": self.focus.value,
            "gear": list(self.gear),
            "url": self.url,
        }

    @classmethod
    def from_dict(cls, data: dict, id: int | None = None) -> "Exercise":
        """Create from dictionary."""
        return cls(
            id=id,
            name=data["name"],
            focus=Focus(data["focus"]),
            gear=tuple(g for g in data.get("gear", []) if g != BODYWEIGHT),
            url=data.get("url"),
        )
