"""
Reference dataset schemas.

Pydantic models validating the two JSON datasets loaded at startup.
"""

from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict

from wa_points.features.events.models import CompetitionCategory


# [conversion_factor, result_shift, point_shift]
RawCoefficients = Tuple[float, float, float]

# Competition category -> place -> points. JSON object keys are strings;
# place keys are coerced to int during validation.
PlacementSubTable = Dict[CompetitionCategory, Dict[int, int]]


class CoefficientsDataset(BaseModel):
    """Scoring table coefficients per gender and canonical event string."""
    model_config = ConfigDict(extra="forbid")

    men: Dict[str, RawCoefficients]
    women: Dict[str, RawCoefficients]


class PlacementScoreDataset(BaseModel):
    """Placing score sub-tables, one per event group and round context."""
    model_config = ConfigDict(extra="forbid")

    # Track and field
    track_field_final: PlacementSubTable
    track_field_semi_max9: PlacementSubTable
    track_field_semi_10plus: PlacementSubTable
    # 5000m / 3000m steeplechase
    distance_5000m_final: PlacementSubTable
    distance_5000m_semi_max9: PlacementSubTable
    distance_5000m_semi_10plus: PlacementSubTable
    # Long distance and road
    distance_10000m_final: PlacementSubTable
    road_10km_final: PlacementSubTable
    combined_events: PlacementSubTable
    road_marathon: PlacementSubTable
    half_marathon_similar: PlacementSubTable
    road_running: PlacementSubTable
    # Race walking
    race_walking_20km: PlacementSubTable
    race_walking_35km: PlacementSubTable
    race_walking_35km_similar: PlacementSubTable
    # Cross country
    cross_country_final: PlacementSubTable
