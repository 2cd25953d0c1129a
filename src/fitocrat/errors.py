"""Exceptions raised by fitocrat."""


class FitocratError(Exception):
    """Base class for fitocrat errors."""


class NoCandidateForFocus(FitocratError):
    """No exercise in the library matches a focus with the given gear.

    Only used inside the mission builder to abandon a template attempt.
    """

    def __init__(self, focus, gear):
        self.focus = focus
        self.gear = gear
        super().__init__(f"No exercise for focus '{focus.value}' with gear {sorted(gear)}")


class MissionUnbuildableError(FitocratError):
    """No allowed template can be satisfied with the given gear."""

    def __init__(self, requested_mode, gear):
        self.requested_mode = requested_mode
        self.gear = gear
        super().__init__(
            f"Cannot build a {requested_mode.value} mission with gear: "
            + ", ".join(sorted(gear))
        )


class InvalidFormatError(FitocratError, ValueError):
    """Rendering was requested in an unknown format."""

    def __init__(self, format):
        self.format = format
        super().__init__(f"Invalid format requested: {format!r}")
