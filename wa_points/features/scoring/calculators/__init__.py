"""
Scoring calculators.

Components:
- CoefficientTable: result score from per-event quadratic coefficients
- PlacementScoreTable: placing bonus by event group, round, category and place
- Adjustments: wind and net downhill corrections
"""

from .coefficients import (
    Coefficients,
    CoefficientTable,
    round_half_away_from_zero,
    load_coefficients,
    get_coefficient_table,
    get_coefficients,
    calculate_result_score,
)
from .placement import (
    PlacementScoreTable,
    FINAL_TABLES,
    SEMI_FINAL_TABLES,
    init_placement_score_calculator,
    get_placement_score_table,
    calculate_placement_score,
)
from .adjustments import (
    calculate_wind_adjustment,
    calculate_downhill_adjustment,
    POINTS_PER_M_S,
    NWI_PENALTY,
    TAILWIND_THRESHOLD,
    DOWNHILL_THRESHOLD,
    POINTS_PER_0_1_M_KM,
)

__all__ = [
    # Coefficients
    "Coefficients",
    "CoefficientTable",
    "round_half_away_from_zero",
    "load_coefficients",
    "get_coefficient_table",
    "get_coefficients",
    "calculate_result_score",
    # Placement
    "PlacementScoreTable",
    "FINAL_TABLES",
    "SEMI_FINAL_TABLES",
    "init_placement_score_calculator",
    "get_placement_score_table",
    "calculate_placement_score",
    # Adjustments
    "calculate_wind_adjustment",
    "calculate_downhill_adjustment",
    "POINTS_PER_M_S",
    "NWI_PENALTY",
    "TAILWIND_THRESHOLD",
    "DOWNHILL_THRESHOLD",
    "POINTS_PER_0_1_M_KM",
]
