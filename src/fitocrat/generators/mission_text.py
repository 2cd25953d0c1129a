"""Text rendering for missions.

Two output formats are supported:

- plain: a markdown-style numbered list, one item per round
- markup: an HTML ``<ul>``, one ``<li>`` per round

Example (standard template, plain):
```
1. Pull-ups (10 x 3), alternate with Push-ups (25 x 3)
2. Air Squats (10-15 x 3), alternate with Crunches (50 x 3)
3. Sandbag Carries (10-15 x 3), alternate with Leg Levers (50 x 3)
4. Neck Bridges (Max x 2), alternate with Flutter Kicks (50)
```

Rep schemes come from the template that produced the mission, not the one
that was requested.
"""

from html import escape

from ..errors import InvalidFormatError
from ..models.exercises import Exercise
from ..models.mission import Mission

PLAIN = "plain"
MARKUP = "markup"

# Accepted format names (lowercased) and the renderer each maps to
FORMAT_ALIASES = {
    "plain": PLAIN,
    "markdown": PLAIN,
    "markup": MARKUP,
    "html": MARKUP,
}

ALTERNATE_SEPARATOR = ", alternate with "


def resolve_format(format: str | None) -> str:
    """Map a requested format name to a renderer.

    Raises:
        InvalidFormatError: for anything not in ``FORMAT_ALIASES``
    """
    if format is None:
        return PLAIN
    try:
        return FORMAT_ALIASES[format.lower()]
    except (KeyError, AttributeError):
        raise InvalidFormatError(format) from None


class MissionRenderer:
    """Renders missions as plain or markup text."""

    def render(self, mission: Mission, format: str | None = PLAIN) -> str:
        """Render a mission.

        Args:
            mission: The mission to describe
            format: "plain"/"markdown" (default) or "markup"/"html"

        Returns:
            The mission text, ending with a newline

        Raises:
            InvalidFormatError: if the format is not recognised
        """
        if resolve_format(format) == MARKUP:
            return self._render_markup(mission)
        return self._render_plain(mission)

    def _render_plain(self, mission: Mission) -> str:
        separator = ALTERNATE_SEPARATOR if mission.template.alternate else ",\n   "
        lines = []
        for number, round_ in enumerate(mission.rounds(), 1):
            parts = [f"{exercise.name} ({slot.reps})" for exercise, slot in round_]
            lines.append(f"{number}. {separator.join(parts)}")
        return "\n".join(lines) + "\n"

    def _render_markup(self, mission: Mission) -> str:
        separator = ALTERNATE_SEPARATOR if mission.template.alternate else ", "
        lines = ["<ul>"]
        for round_ in mission.rounds():
            parts = [f"{self._link(exercise)} ({slot.reps})" for exercise, slot in round_]
            lines.append(f"<li>{separator.join(parts)}</li>")
        lines.append("</ul>")
        return "\n".join(lines) + "\n"

    def _link(self, exercise: Exercise) -> str:
        if exercise.url:
            return f'<a href="{escape(exercise.url)}">{escape(exercise.name)}</a>'
        return escape(exercise.name)


def render(mission: Mission, format: str | None = PLAIN) -> str:
    """Convenience function to render a mission.

    Args:
        mission: The mission to describe
        format: "plain"/"markdown" (default) or "markup"/"html"

    Returns:
        The mission text
    """
    return MissionRenderer().render(mission, format)
