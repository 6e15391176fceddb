"""
World Athletics Points

Scoring engine for World Athletics performance points.

Usage:
    from wa_points import (
        Event, Gender, TrackAndFieldEvent,
        build_score_input, calculate_world_athletics_score,
    )
    from wa_points.main import init_reference_tables

    init_reference_tables()
    score_input = build_score_input(
        Gender.MEN, Event(TrackAndFieldEvent.M_100), "10.50", wind_speed=0.0
    )
    calculate_world_athletics_score(score_input)  # -> 1040.0
"""

from .exceptions import (
    ScoringError,
    ReferenceDataError,
    TableAlreadyLoadedError,
    TableNotLoadedError,
    CoefficientsNotFoundError,
)
from .features.events import (
    Event,
    EventFamily,
    TrackAndFieldEvent,
    CombinedEvent,
    RoadRunningEvent,
    RaceWalkingEvent,
    CrossCountryEvent,
    PerformanceType,
    Gender,
    CompetitionCategory,
    PlacementScoreEventGroup,
    TimeParseError,
    PerformanceParseError,
    parse_time_to_seconds,
    seconds_to_time_string,
    parse_performance,
)
from .features.scoring import (
    RoundType,
    PlacementInfo,
    PlacementScoreCalcInput,
    WorldAthleticsScoreInput,
    build_score_input,
    calculate_world_athletics_score,
    ScoringService,
)
from .features.scoring.calculators import (
    CoefficientTable,
    PlacementScoreTable,
    load_coefficients,
    calculate_result_score,
    init_placement_score_calculator,
    calculate_placement_score,
    calculate_wind_adjustment,
    calculate_downhill_adjustment,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "ScoringError",
    "ReferenceDataError",
    "TableAlreadyLoadedError",
    "TableNotLoadedError",
    "CoefficientsNotFoundError",
    # Events
    "Event",
    "EventFamily",
    "TrackAndFieldEvent",
    "CombinedEvent",
    "RoadRunningEvent",
    "RaceWalkingEvent",
    "CrossCountryEvent",
    "PerformanceType",
    "Gender",
    "CompetitionCategory",
    "PlacementScoreEventGroup",
    "TimeParseError",
    "PerformanceParseError",
    "parse_time_to_seconds",
    "seconds_to_time_string",
    "parse_performance",
    # Scoring
    "RoundType",
    "PlacementInfo",
    "PlacementScoreCalcInput",
    "WorldAthleticsScoreInput",
    "build_score_input",
    "calculate_world_athletics_score",
    "ScoringService",
    # Tables
    "CoefficientTable",
    "PlacementScoreTable",
    "load_coefficients",
    "calculate_result_score",
    "init_placement_score_calculator",
    "calculate_placement_score",
    "calculate_wind_adjustment",
    "calculate_downhill_adjustment",
]
