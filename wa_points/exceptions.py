"""
Scoring errors.

Placement lookups that find nothing are not errors: they return None
and contribute zero points.
"""


class ScoringError(Exception):
    """Base scoring error."""
    pass


class ReferenceDataError(ScoringError):
    """Reference dataset is missing or malformed."""
    pass


class TableAlreadyLoadedError(ScoringError):
    """A write-once reference table was initialized twice."""
    pass


class TableNotLoadedError(ScoringError):
    """Lookup attempted before the reference table was initialized."""
    pass


class CoefficientsNotFoundError(ScoringError):
    """No coefficients for the requested gender and event."""

    def __init__(self, gender: str, event_name: str):
        self.gender = gender
        self.event_name = event_name
        super().__init__(
            f'Coefficients not found for gender "{gender}" and event: {event_name}'
        )
