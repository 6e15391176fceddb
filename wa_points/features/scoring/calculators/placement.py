"""
Placing Score Calculator

Bonus points for finishing position, looked up from per-group tables:

    event group + round -> sub-table
    sub-table[competition category][place] -> points

Only finals have a table for every group. Semifinals are scored for
track and field and 5000m/3000mSC only, with separate tables for finals
of up to 9 and of 10+ athletes. Everything else earns no placing score.

A missing table, category or place is not an error: the lookup returns
None and the athlete gets no bonus.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Optional, Union

from pydantic import ValidationError

from wa_points.config import settings
from wa_points.exceptions import ReferenceDataError, TableAlreadyLoadedError
from wa_points.features.events.models import CompetitionCategory, PlacementScoreEventGroup
from wa_points.features.scoring.models import PlacementScoreCalcInput, RoundType
from wa_points.features.scoring.schemas import PlacementScoreDataset
from wa_points.shared.once import WriteOnce

logger = logging.getLogger(__name__)


# Semifinal table switch: finals of up to this size use the "max9" table
SMALL_FINAL_MAX_SIZE = 9

# Place every qualifier is scored as in a semifinal
QUALIFIED_PLACE = 1

SubTable = Dict[CompetitionCategory, Dict[int, int]]

# Final round: one table per event group
FINAL_TABLES: Dict[PlacementScoreEventGroup, str] = {
    PlacementScoreEventGroup.TRACK_AND_FIELD: "track_field_final",
    PlacementScoreEventGroup.DISTANCE_5000M_3000M_SC: "distance_5000m_final",
    PlacementScoreEventGroup.DISTANCE_10000M: "distance_10000m_final",
    PlacementScoreEventGroup.ROAD_10KM: "road_10km_final",
    PlacementScoreEventGroup.COMBINED_EVENT: "combined_events",
    PlacementScoreEventGroup.ROAD_MARATHON: "road_marathon",
    PlacementScoreEventGroup.HALF_MARATHON: "half_marathon_similar",
    PlacementScoreEventGroup.ROAD_RUNNING: "road_running",
    PlacementScoreEventGroup.RACE_WALKING_20KM: "race_walking_20km",
    PlacementScoreEventGroup.RACE_WALKING_35KM: "race_walking_35km",
    PlacementScoreEventGroup.RACE_WALKING_35KM_SIMILAR: "race_walking_35km_similar",
    PlacementScoreEventGroup.CROSS_COUNTRY: "cross_country_final",
}

# Semifinal: (final of <= 9, final of 10+) tables, for these groups only
SEMI_FINAL_TABLES: Dict[PlacementScoreEventGroup, tuple[str, str]] = {
    PlacementScoreEventGroup.TRACK_AND_FIELD: (
        "track_field_semi_max9",
        "track_field_semi_10plus",
    ),
    PlacementScoreEventGroup.DISTANCE_5000M_3000M_SC: (
        "distance_5000m_semi_max9",
        "distance_5000m_semi_10plus",
    ),
}


def effective_place(calc_input: PlacementScoreCalcInput) -> int:
    """
    Place used for the lookup.

    Semifinalists who qualified for the final all score as place 1,
    whatever their semifinal place.
    """
    if calc_input.round_type == RoundType.SEMI_FINAL and calc_input.qualified_to_final:
        return QUALIFIED_PLACE
    return calc_input.place


def select_sub_table_name(
    group: PlacementScoreEventGroup,
    round_type: RoundType,
    size_of_final: int
) -> Optional[str]:
    """
    Name of the sub-table for an event group and round.

    Returns:
        Sub-table name, or None when the round is not scored for the group
    """
    if round_type == RoundType.FINAL:
        return FINAL_TABLES[group]

    if round_type == RoundType.SEMI_FINAL and group in SEMI_FINAL_TABLES:
        small_final, large_final = SEMI_FINAL_TABLES[group]
        return small_final if size_of_final <= SMALL_FINAL_MAX_SIZE else large_final

    return None


class PlacementScoreTable:
    """
    All placing score sub-tables.

    Example usage:
        table = PlacementScoreTable.from_json(json_text)
        table.calculate_placement_score(calc_input)  # -> 375 or None
    """

    def __init__(self, dataset: PlacementScoreDataset):
        self._tables: Dict[str, SubTable] = dataset.model_dump()

    @classmethod
    def from_dict(cls, data: dict) -> "PlacementScoreTable":
        """
        Build from parsed JSON.

        Raises:
            ReferenceDataError: If data does not match the schema
        """
        try:
            dataset = PlacementScoreDataset.model_validate(data)
        except ValidationError as e:
            raise ReferenceDataError(f"Failed to parse placement score data: {e}") from e
        return cls(dataset)

    @classmethod
    def from_json(cls, json_data: str) -> "PlacementScoreTable":
        try:
            data = json.loads(json_data)
        except json.JSONDecodeError as e:
            raise ReferenceDataError(f"Failed to parse placement score data: {e}") from e
        return cls.from_dict(data)

    @classmethod
    def from_file(cls, path: Path) -> "PlacementScoreTable":
        try:
            json_data = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ReferenceDataError(f"Failed to parse placement score data: {e}") from e
        return cls.from_json(json_data)

    def sub_table(self, name: str) -> SubTable:
        return self._tables[name]

    def calculate_placement_score(self, calc_input: PlacementScoreCalcInput) -> Optional[int]:
        """
        Placing score for a finish.

        Args:
            calc_input: Event, category, round, place and semifinal context

        Returns:
            Points, or None if no table entry applies
        """
        place = effective_place(calc_input)
        group = calc_input.event.placement_group
        table_name = select_sub_table_name(
            group, calc_input.round_type, calc_input.size_of_final
        )
        if table_name is None:
            logger.debug(f"No placing table for {group.value} in {calc_input.round_type.value}")
            return None

        points = self._tables[table_name].get(calc_input.competition_category, {}).get(place)
        if points is None:
            logger.debug(
                f"No placing score in {table_name} for "
                f"{calc_input.competition_category} place {place}"
            )
        return points


# Global table (set once by init_placement_score_calculator)
_PLACEMENT_SCORES: WriteOnce[PlacementScoreTable] = WriteOnce(
    TableAlreadyLoadedError, "Placement score calculator already initialized."
)


def init_placement_score_calculator(path: Optional[Union[str, Path]] = None) -> None:
    """
    Load the placing score tables. Call once at application startup.

    Args:
        path: Dataset file (default: settings.placement_scores_path)

    Raises:
        ReferenceDataError: If the dataset is missing or malformed
        TableAlreadyLoadedError: If the tables are already loaded
    """
    if _PLACEMENT_SCORES.is_set:
        raise TableAlreadyLoadedError("Placement score calculator already initialized.")

    path = Path(path) if path is not None else settings.placement_scores_path
    table = PlacementScoreTable.from_file(path)
    _PLACEMENT_SCORES.set(table)
    logger.info(f"Loaded placing score tables from {path}")


def get_placement_score_table() -> Optional[PlacementScoreTable]:
    """Loaded global tables, or None before initialization."""
    return _PLACEMENT_SCORES.get()


def calculate_placement_score(calc_input: PlacementScoreCalcInput) -> Optional[int]:
    """
    Placing score from the global tables.

    Returns None (no bonus) when the tables are not initialized.
    """
    table = _PLACEMENT_SCORES.get()
    if table is None:
        logger.debug("Placing score tables not initialized, no placing score")
        return None
    return table.calculate_placement_score(calc_input)
