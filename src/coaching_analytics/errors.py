"""Error types raised by the progress and analytics engine."""


class AnalyticsError(Exception):
    """Base class for engine errors."""


class NotFound(AnalyticsError):
    """A user, course, lesson or progress entry does not exist."""

    def __init__(self, kind: str, identifier: str):
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"{kind} not found: {identifier}")


class InvalidInput(AnalyticsError):
    """Caller supplied a malformed answer map, mood value or lesson kind."""


class NotEligible(AnalyticsError):
    """The user has not completed every lesson of the course."""


class Forbidden(AnalyticsError):
    """The user's role does not allow the requested view."""


class ComputationError(AnalyticsError):
    """A derived value could not be computed from the given snapshot."""
