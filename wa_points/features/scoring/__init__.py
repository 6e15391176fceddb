"""
World Athletics scoring.

Usage:
    from wa_points.features.scoring import calculate_world_athletics_score
    from wa_points.features.scoring.calculators import load_coefficients

Components:
- calculate_world_athletics_score: result score + adjustments + placing score
- ScoringService: the same against explicit table instances
- WorldAthleticsScoreInput / build_score_input: scoring request
"""

from .models import (
    RoundType,
    PlacementInfo,
    PlacementScoreCalcInput,
    WorldAthleticsScoreInput,
    build_score_input,
)
from .schemas import CoefficientsDataset, PlacementScoreDataset
from .service import (
    calculate_world_athletics_score,
    ScoringService,
    ResultScoreCalculator,
    PlacementScoreCalculator,
)

__all__ = [
    # Models
    "RoundType",
    "PlacementInfo",
    "PlacementScoreCalcInput",
    "WorldAthleticsScoreInput",
    "build_score_input",
    # Schemas
    "CoefficientsDataset",
    "PlacementScoreDataset",
    # Service
    "calculate_world_athletics_score",
    "ScoringService",
    "ResultScoreCalculator",
    "PlacementScoreCalculator",
]
