"""
Event taxonomy for World Athletics scoring.

Events are grouped into five families, each a closed Enum whose values are
the canonical event strings used as keys in the coefficient dataset.
`Event` wraps one family member and is the value passed around the
scoring engine.

Usage:
    event = Event(TrackAndFieldEvent.M_100)
    str(event)                      # "100m"
    Event.from_string("Road HM")    # Event(RoadRunningEvent.HALF_MARATHON)
    event.performance_type          # PerformanceType.TIME
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Union


class PerformanceType(str, Enum):
    """How a performance is measured."""
    TIME = "time"           # Seconds (running, hurdles, walks, road)
    DISTANCE = "distance"   # Meters (jumps, throws)


class Gender(str, Enum):
    """Gender key into the coefficient dataset."""
    MEN = "men"
    WOMEN = "women"

    def __str__(self) -> str:
        return self.value


class EventFamily(str, Enum):
    """World Athletics event section."""
    TRACK_AND_FIELD = "track_and_field"
    COMBINED_EVENTS = "combined_events"
    ROAD_RUNNING = "road_running"
    RACE_WALKING = "race_walking"
    CROSS_COUNTRY = "cross_country"


class TrackAndFieldEvent(str, Enum):
    """Track and field events, including short track (indoor) variants."""
    # Sprints / middle distance / long distance
    M_50 = "50m"
    M_55 = "55m"
    M_60 = "60m"
    M_100 = "100m"
    M_200 = "200m"
    M_300 = "300m"
    M_400 = "400m"
    M_500 = "500m"
    M_600 = "600m"
    M_800 = "800m"
    M_1000 = "1000m"
    M_1500 = "1500m"
    M_2000 = "2000m"
    M_3000 = "3000m"
    M_5000 = "5000m"
    M_10000 = "10000m"
    # Hurdles
    M_50_HURDLES = "50m Hurdle"
    M_55_HURDLES = "55m Hurdle"
    M_60_HURDLES = "60m Hurdle"
    M_100_HURDLES = "100m Hurdle"   # Women
    M_110_HURDLES = "110m Hurdle"   # Men
    M_400_HURDLES = "400m Hurdle"
    # Steeplechase
    M_2000_STEEPLECHASE = "2000m SC"
    M_3000_STEEPLECHASE = "3000m SC"
    # Relays
    RELAY_4X100 = "4x100m"
    RELAY_4X200 = "4x200m"
    RELAY_4X400 = "4x400m"
    RELAY_4X400_MIXED = "4x400mix"
    # Field events
    LONG_JUMP = "Long Jump"
    TRIPLE_JUMP = "Triple Jump"
    HIGH_JUMP = "High Jump"
    POLE_VAULT = "Pole Vault"
    SHOT_PUT = "Shot Put"
    DISCUS_THROW = "Discus Throw"
    HAMMER_THROW = "Hammer Throw"
    JAVELIN_THROW = "Javelin Throw"
    # Short track
    M_200_SHORT_TRACK = "200m short track"
    M_300_SHORT_TRACK = "300m short track"
    M_400_SHORT_TRACK = "400m short track"
    M_500_SHORT_TRACK = "500m short track"
    M_600_SHORT_TRACK = "600m short track"
    M_800_SHORT_TRACK = "800m short track"
    M_1000_SHORT_TRACK = "1000m short track"
    M_1500_SHORT_TRACK = "1500m short track"
    M_2000_SHORT_TRACK = "2000m short track"
    M_3000_SHORT_TRACK = "3000m short track"
    M_5000_SHORT_TRACK = "5000m short track"
    MILE_SHORT_TRACK = "Mile short track"
    TWO_MILES_SHORT_TRACK = "2 Miles short track"
    RELAY_4X200_SHORT_TRACK = "4x200m short track"
    RELAY_4X400_SHORT_TRACK = "4x400m short track"
    RELAY_4X400_MIXED_SHORT_TRACK = "4x400mix short track"


class CombinedEvent(str, Enum):
    """Combined events."""
    DECATHLON = "Dec."
    HEPTATHLON = "Hept."
    HEPTATHLON_SHORT_TRACK = "Hept. short track"
    PENTATHLON_SHORT_TRACK = "Pent. short track"


class RoadRunningEvent(str, Enum):
    """Road running events."""
    ROAD_5KM = "Road 5 km"
    ROAD_10KM = "Road 10 km"
    ROAD_15KM = "Road 15 km"
    ROAD_20KM = "Road 20 km"
    ROAD_25KM = "Road 25 km"
    ROAD_30KM = "Road 30 km"
    HALF_MARATHON = "Road HM"
    MARATHON = "Road Marathon"
    ROAD_10_MILES = "Road 10 Miles"
    ROAD_MILE = "Road Mile"


class RaceWalkingEvent(str, Enum):
    """Race walking events, road and track."""
    ROAD_5KM_WALK = "Road 5km Walk"
    ROAD_10KM_WALK = "Road 10km Walk"
    ROAD_15KM_WALK = "Road 15km Walk"
    ROAD_20KM_WALK = "Road 20km Walk"
    ROAD_30KM_WALK = "Road 30km Walk"
    ROAD_35KM_WALK = "Road 35km Walk"
    ROAD_50KM_WALK = "Road 50km Walk"
    M_3000_WALK = "3000m Walk"
    M_5000_WALK = "5000m Walk"
    M_15000_WALK = "15,000m Walk"
    M_20000_WALK = "20,000m Walk"
    M_30000_WALK = "30,000m Walk"
    M_35000_WALK = "35,000m Walk"
    M_50000_WALK = "50,000m Walk"


class CrossCountryEvent(str, Enum):
    """Cross country events."""
    # No distances are scored separately yet
    GENERIC = "GenericXC"


EventDiscipline = Union[
    TrackAndFieldEvent,
    CombinedEvent,
    RoadRunningEvent,
    RaceWalkingEvent,
    CrossCountryEvent,
]

# Declaration order is the order of Event.all_variants()
FAMILY_ENUMS = {
    EventFamily.TRACK_AND_FIELD: TrackAndFieldEvent,
    EventFamily.COMBINED_EVENTS: CombinedEvent,
    EventFamily.ROAD_RUNNING: RoadRunningEvent,
    EventFamily.RACE_WALKING: RaceWalkingEvent,
    EventFamily.CROSS_COUNTRY: CrossCountryEvent,
}

_FAMILY_BY_ENUM = {enum_cls: family for family, enum_cls in FAMILY_ENUMS.items()}

FIELD_EVENTS = frozenset({
    TrackAndFieldEvent.LONG_JUMP,
    TrackAndFieldEvent.TRIPLE_JUMP,
    TrackAndFieldEvent.HIGH_JUMP,
    TrackAndFieldEvent.POLE_VAULT,
    TrackAndFieldEvent.SHOT_PUT,
    TrackAndFieldEvent.DISCUS_THROW,
    TrackAndFieldEvent.HAMMER_THROW,
    TrackAndFieldEvent.JAVELIN_THROW,
})

# Wind modification: 100m, 200m, 100mH, 110mH, Long Jump, Triple Jump
WIND_AFFECTED_EVENTS = frozenset({
    TrackAndFieldEvent.M_100,
    TrackAndFieldEvent.M_200,
    TrackAndFieldEvent.M_100_HURDLES,
    TrackAndFieldEvent.M_110_HURDLES,
    TrackAndFieldEvent.LONG_JUMP,
    TrackAndFieldEvent.TRIPLE_JUMP,
})

# Events scored for one gender only
WOMEN_ONLY_EVENTS = frozenset({
    TrackAndFieldEvent.M_100_HURDLES,
    CombinedEvent.HEPTATHLON,
    CombinedEvent.PENTATHLON_SHORT_TRACK,
})
MEN_ONLY_EVENTS = frozenset({
    TrackAndFieldEvent.M_110_HURDLES,
    CombinedEvent.DECATHLON,
    CombinedEvent.HEPTATHLON_SHORT_TRACK,
})


class CompetitionCategory(str, Enum):
    """Competition category, lowest to highest prestige."""
    F = "F"     # Other competitions
    E = "E"     # International matches
    D = "D"     # Continental Tour Challenger series
    C = "C"     # Continental Tour Bronze meetings
    B = "B"     # Continental Tour Silver meetings
    A = "A"     # Major Games and Gold meetings
    GL = "GL"   # Area Senior Outdoor Championships
    GW = "GW"   # Minor Championships
    DF = "DF"   # Diamond League Finals
    OW = "OW"   # Worlds and Olympics

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, code: str) -> Optional["CompetitionCategory"]:
        """Category for its code, or None if unknown."""
        try:
            return cls(code)
        except ValueError:
            return None


class PlacementScoreEventGroup(str, Enum):
    """Event group selecting a placing score table."""
    TRACK_AND_FIELD = "track_and_field"
    DISTANCE_5000M_3000M_SC = "distance_5000m_3000m_sc"
    DISTANCE_10000M = "distance_10000m"
    ROAD_10KM = "road_10km"
    COMBINED_EVENT = "combined_event"
    ROAD_MARATHON = "road_marathon"
    HALF_MARATHON = "half_marathon"
    ROAD_RUNNING = "road_running"
    RACE_WALKING_20KM = "race_walking_20km"
    RACE_WALKING_35KM = "race_walking_35km"
    RACE_WALKING_35KM_SIMILAR = "race_walking_35km_similar"
    CROSS_COUNTRY = "cross_country"


# Specific events with their own placing group. Anything not listed falls
# back to its family's group (see Event.placement_group).
_PLACEMENT_GROUP_OVERRIDES = {
    TrackAndFieldEvent.M_5000: PlacementScoreEventGroup.DISTANCE_5000M_3000M_SC,
    TrackAndFieldEvent.M_3000_STEEPLECHASE: PlacementScoreEventGroup.DISTANCE_5000M_3000M_SC,
    TrackAndFieldEvent.M_10000: PlacementScoreEventGroup.DISTANCE_10000M,
    RoadRunningEvent.ROAD_10KM: PlacementScoreEventGroup.ROAD_10KM,
    RoadRunningEvent.MARATHON: PlacementScoreEventGroup.ROAD_MARATHON,
    # TODO: half marathon as the main event of a competition has its own table
    RoadRunningEvent.HALF_MARATHON: PlacementScoreEventGroup.HALF_MARATHON,
    RoadRunningEvent.ROAD_30KM: PlacementScoreEventGroup.HALF_MARATHON,
    RoadRunningEvent.ROAD_25KM: PlacementScoreEventGroup.HALF_MARATHON,
    RaceWalkingEvent.M_20000_WALK: PlacementScoreEventGroup.RACE_WALKING_20KM,
    RaceWalkingEvent.ROAD_20KM_WALK: PlacementScoreEventGroup.RACE_WALKING_20KM,
    RaceWalkingEvent.ROAD_5KM_WALK: PlacementScoreEventGroup.RACE_WALKING_20KM,
    RaceWalkingEvent.ROAD_10KM_WALK: PlacementScoreEventGroup.RACE_WALKING_20KM,
    RaceWalkingEvent.ROAD_15KM_WALK: PlacementScoreEventGroup.RACE_WALKING_20KM,
    RaceWalkingEvent.M_3000_WALK: PlacementScoreEventGroup.RACE_WALKING_20KM,
    RaceWalkingEvent.M_5000_WALK: PlacementScoreEventGroup.RACE_WALKING_20KM,
    RaceWalkingEvent.M_15000_WALK: PlacementScoreEventGroup.RACE_WALKING_20KM,
    RaceWalkingEvent.M_35000_WALK: PlacementScoreEventGroup.RACE_WALKING_35KM,
    RaceWalkingEvent.ROAD_35KM_WALK: PlacementScoreEventGroup.RACE_WALKING_35KM,
}

_FAMILY_PLACEMENT_GROUPS = {
    EventFamily.TRACK_AND_FIELD: PlacementScoreEventGroup.TRACK_AND_FIELD,
    EventFamily.COMBINED_EVENTS: PlacementScoreEventGroup.COMBINED_EVENT,
    EventFamily.ROAD_RUNNING: PlacementScoreEventGroup.ROAD_RUNNING,
    EventFamily.RACE_WALKING: PlacementScoreEventGroup.RACE_WALKING_35KM_SIMILAR,
    EventFamily.CROSS_COUNTRY: PlacementScoreEventGroup.CROSS_COUNTRY,
}


@dataclass(frozen=True)
class Event:
    """
    A single scorable event: one member of one family enum.

    str(event) is the canonical event string, and
    Event.from_string(str(event)) == event for every supported event.
    """
    discipline: EventDiscipline

    def __post_init__(self):
        if type(self.discipline) not in _FAMILY_BY_ENUM:
            raise TypeError(f"Not an event discipline: {self.discipline!r}")

    def __str__(self) -> str:
        return self.discipline.value

    @property
    def family(self) -> EventFamily:
        return _FAMILY_BY_ENUM[type(self.discipline)]

    @property
    def performance_type(self) -> PerformanceType:
        """Field events are measured in meters, everything else in seconds."""
        if self.discipline in FIELD_EVENTS:
            return PerformanceType.DISTANCE
        return PerformanceType.TIME

    @property
    def placement_group(self) -> PlacementScoreEventGroup:
        """Placing score group for this event."""
        group = _PLACEMENT_GROUP_OVERRIDES.get(self.discipline)
        if group is not None:
            return group
        return _FAMILY_PLACEMENT_GROUPS[self.family]

    @property
    def is_wind_affected(self) -> bool:
        return self.discipline in WIND_AFFECTED_EVENTS

    @property
    def is_road_running(self) -> bool:
        return self.family == EventFamily.ROAD_RUNNING

    @classmethod
    def default(cls) -> "Event":
        return cls(TrackAndFieldEvent.M_100)

    @classmethod
    def all_variants(cls) -> List["Event"]:
        """Every supported event, family by family in declaration order."""
        return [
            cls(discipline)
            for enum_cls in FAMILY_ENUMS.values()
            for discipline in enum_cls
        ]

    @classmethod
    def from_string(cls, value: str) -> Optional["Event"]:
        """Event for a canonical event string, or None if unknown."""
        return _EVENTS_BY_STRING.get(value)


_EVENTS_BY_STRING = {str(event): event for event in Event.all_variants()}


def expected_events(gender: Gender) -> Iterator[Event]:
    """
    Events a complete coefficient dataset must cover for a gender.

    Skips cross country (placeholder) and events contested
    by the other gender only.
    """
    excluded = WOMEN_ONLY_EVENTS if gender == Gender.MEN else MEN_ONLY_EVENTS
    for event in Event.all_variants():
        if event.family == EventFamily.CROSS_COUNTRY:
            continue
        if event.discipline in excluded:
            continue
        yield event
