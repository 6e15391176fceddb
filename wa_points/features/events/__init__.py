"""
Event taxonomy.

Usage:
    from wa_points.features.events import Event, TrackAndFieldEvent, Gender
    from wa_points.features.events.formatters import parse_time_to_seconds

Components:
- Event: one scorable event (family enum member + derived properties)
- Family enums: TrackAndFieldEvent, CombinedEvent, RoadRunningEvent,
  RaceWalkingEvent, CrossCountryEvent
- Time helpers: parse_time_to_seconds, seconds_to_time_string, parse_performance
"""

from .models import (
    Event,
    EventFamily,
    EventDiscipline,
    TrackAndFieldEvent,
    CombinedEvent,
    RoadRunningEvent,
    RaceWalkingEvent,
    CrossCountryEvent,
    PerformanceType,
    Gender,
    CompetitionCategory,
    PlacementScoreEventGroup,
    FIELD_EVENTS,
    WIND_AFFECTED_EVENTS,
    expected_events,
)
from .formatters import (
    TimeParseError,
    PerformanceParseError,
    parse_time_to_seconds,
    seconds_to_time_string,
    parse_performance,
)

__all__ = [
    # Models
    "Event",
    "EventFamily",
    "EventDiscipline",
    "TrackAndFieldEvent",
    "CombinedEvent",
    "RoadRunningEvent",
    "RaceWalkingEvent",
    "CrossCountryEvent",
    "PerformanceType",
    "Gender",
    "CompetitionCategory",
    "PlacementScoreEventGroup",
    "FIELD_EVENTS",
    "WIND_AFFECTED_EVENTS",
    "expected_events",
    # Formatters
    "TimeParseError",
    "PerformanceParseError",
    "parse_time_to_seconds",
    "seconds_to_time_string",
    "parse_performance",
]
