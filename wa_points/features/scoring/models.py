"""
Scoring input types.

Plain frozen dataclasses: built fresh per scoring request, never mutated.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from wa_points.features.events.models import CompetitionCategory, Event, Gender
from wa_points.features.events.formatters import parse_performance


class RoundType(str, Enum):
    """Competition round; selects the placing score table."""
    FINAL = "final"
    SEMI_FINAL = "semi_final"
    OTHER = "other"

    @classmethod
    def from_label(cls, label: str) -> Optional["RoundType"]:
        """Round for a display label ('Final', 'Semifinal', 'Other')."""
        return _ROUND_LABELS.get(label)


_ROUND_LABELS = {
    "Final": RoundType.FINAL,
    "Semifinal": RoundType.SEMI_FINAL,
    "Other": RoundType.OTHER,
}


@dataclass(frozen=True)
class PlacementInfo:
    """
    Where the athlete finished.

    size_of_final and qualified_to_final only matter for semifinals.
    Fields are not cross-checked against place.
    """
    competition_category: CompetitionCategory
    place: int
    round: RoundType
    size_of_final: int = 8
    qualified_to_final: bool = False


@dataclass(frozen=True)
class PlacementScoreCalcInput:
    """Everything the placing score lookup needs."""
    event: Event
    competition_category: CompetitionCategory
    round_type: RoundType
    place: int
    qualified_to_final: bool
    size_of_final: int


@dataclass(frozen=True)
class WorldAthleticsScoreInput:
    """Input for one World Athletics score calculation."""
    gender: Gender
    event: Event
    performance: float                       # Seconds or meters
    wind_speed: Optional[float] = None       # m/s, wind-affected events
    net_downhill: Optional[float] = None     # m/km, road running events
    placement_info: Optional[PlacementInfo] = None

    def placement_calc_input(self) -> Optional[PlacementScoreCalcInput]:
        """Placing lookup input, or None without placement info."""
        if self.placement_info is None:
            return None
        info = self.placement_info
        return PlacementScoreCalcInput(
            event=self.event,
            competition_category=info.competition_category,
            round_type=info.round,
            place=info.place,
            qualified_to_final=info.qualified_to_final,
            size_of_final=info.size_of_final,
        )


def build_score_input(
    gender: Gender,
    event: Event,
    performance: Union[str, float],
    wind_speed: Optional[float] = None,
    net_downhill: Optional[float] = None,
    placement_info: Optional[PlacementInfo] = None,
) -> WorldAthleticsScoreInput:
    """
    Build a score input from caller-side values.

    Text performances go through parse_performance. Wind is kept only for
    wind-affected events and net downhill only for road running events,
    so callers can pass whatever their form holds.

    Raises:
        PerformanceParseError: If performance text cannot be parsed
    """
    if isinstance(performance, str):
        performance = parse_performance(performance, event)

    return WorldAthleticsScoreInput(
        gender=gender,
        event=event,
        performance=float(performance),
        wind_speed=wind_speed if event.is_wind_affected else None,
        net_downhill=net_downhill if event.is_road_running else None,
        placement_info=placement_info,
    )
