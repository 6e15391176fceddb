"""
World Athletics Score Service

Combines the scoring components into one total:
- Result score from the coefficient table
- Wind adjustment (wind-affected events)
- Net downhill adjustment (road running)
- Placing score (when placement info is given)

The two table lookups are passed in as callables so a caller can score
against the process-wide tables, explicit table instances, or stubs.
"""

import logging
from typing import Callable, Optional

from wa_points.features.events.models import Gender
from wa_points.features.scoring.calculators.adjustments import (
    calculate_downhill_adjustment,
    calculate_wind_adjustment,
)
from wa_points.features.scoring.calculators.coefficients import (
    CoefficientTable,
    calculate_result_score,
)
from wa_points.features.scoring.calculators.placement import (
    PlacementScoreTable,
    calculate_placement_score,
)
from wa_points.features.scoring.models import (
    PlacementScoreCalcInput,
    WorldAthleticsScoreInput,
)

logger = logging.getLogger(__name__)


# (performance, gender, event string) -> rounded result score
ResultScoreCalculator = Callable[[float, Gender, str], float]
# placement input -> placing score, None = no bonus
PlacementScoreCalculator = Callable[[PlacementScoreCalcInput], Optional[int]]


def calculate_world_athletics_score(
    score_input: WorldAthleticsScoreInput,
    result_score_calculator: ResultScoreCalculator = calculate_result_score,
    placement_score_calculator: PlacementScoreCalculator = calculate_placement_score,
) -> float:
    """
    Total World Athletics points for one performance.

    Args:
        score_input: Gender, event, performance and optional conditions
        result_score_calculator: Result score lookup (default: global table)
        placement_score_calculator: Placing score lookup (default: global table)

    Returns:
        Result score plus adjustments plus placing score

    Raises:
        CoefficientsNotFoundError: No coefficients for gender and event
        TableNotLoadedError: Coefficients not loaded
    """
    logger.info(f"Calculating score for {score_input}")

    event = score_input.event
    result_score = result_score_calculator(
        score_input.performance, score_input.gender, str(event)
    )
    score = result_score

    if event.is_wind_affected:
        score += calculate_wind_adjustment(score_input.wind_speed)

    if event.is_road_running:
        score += calculate_downhill_adjustment(score_input.net_downhill)

    placement_score = 0
    calc_input = score_input.placement_calc_input()
    if calc_input is not None:
        placement_score = placement_score_calculator(calc_input) or 0
        score += placement_score

    logger.debug(
        f"{event}: result score {result_score}, placing score {placement_score}, "
        f"total {score}"
    )
    return score


class ScoringService:
    """
    Scores against explicit table instances instead of the global ones.

    Example usage:
        service = ScoringService(
            CoefficientTable.from_file(coefficients_path),
            PlacementScoreTable.from_file(placement_path),
        )
        service.calculate(score_input)  # -> 1040.0
    """

    def __init__(
        self,
        coefficients: CoefficientTable,
        placement_scores: Optional[PlacementScoreTable] = None
    ):
        self.coefficients = coefficients
        self.placement_scores = placement_scores

    def result_score(self, performance: float, gender: Gender, event_name: str) -> float:
        return self.coefficients.calculate_result_score(performance, gender, event_name)

    def placement_score(self, calc_input: PlacementScoreCalcInput) -> Optional[int]:
        """Placing score, or None without placement tables."""
        if self.placement_scores is None:
            return None
        return self.placement_scores.calculate_placement_score(calc_input)

    def calculate(self, score_input: WorldAthleticsScoreInput) -> float:
        return calculate_world_athletics_score(
            score_input,
            result_score_calculator=self.result_score,
            placement_score_calculator=self.placement_score,
        )
