"""
Result score from scoring table coefficients.

Each (gender, event) pair has three coefficients defining a quadratic
curve over the raw performance:

    points = round(a * result^2 + b * result + c)

The table is loaded once at startup into a write-once cell; lookups
before loading fail with TableNotLoadedError.
"""

import json
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from pydantic import ValidationError

from wa_points.config import settings
from wa_points.exceptions import (
    CoefficientsNotFoundError,
    ReferenceDataError,
    TableAlreadyLoadedError,
    TableNotLoadedError,
)
from wa_points.features.events.models import Event, Gender, expected_events
from wa_points.features.scoring.schemas import CoefficientsDataset
from wa_points.shared.once import WriteOnce

logger = logging.getLogger(__name__)


def round_half_away_from_zero(value: float) -> float:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


@dataclass(frozen=True)
class Coefficients:
    """Quadratic scoring curve for one gender and event."""
    conversion_factor: float
    result_shift: float
    point_shift: float

    def points(self, result: float) -> float:
        """Unrounded points for a result in seconds or meters."""
        return (
            self.conversion_factor * result * result
            + self.result_shift * result
            + self.point_shift
        )


class CoefficientTable:
    """
    Coefficients for both genders, keyed by canonical event string.

    Example usage:
        table = CoefficientTable.from_json(json_text)
        table.calculate_result_score(10.5, Gender.MEN, "100m")  # -> 1040.0
    """

    def __init__(self, dataset: CoefficientsDataset):
        self._events: Dict[Gender, Dict[str, Coefficients]] = {
            Gender.MEN: {
                name: Coefficients(*raw) for name, raw in dataset.men.items()
            },
            Gender.WOMEN: {
                name: Coefficients(*raw) for name, raw in dataset.women.items()
            },
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CoefficientTable":
        """
        Build from parsed JSON.

        Raises:
            ReferenceDataError: If data does not match the schema
        """
        try:
            dataset = CoefficientsDataset.model_validate(data)
        except ValidationError as e:
            raise ReferenceDataError(f"Failed to parse coefficients data: {e}") from e
        return cls(dataset)

    @classmethod
    def from_json(cls, json_data: str) -> "CoefficientTable":
        try:
            data = json.loads(json_data)
        except json.JSONDecodeError as e:
            raise ReferenceDataError(f"Failed to parse coefficients data: {e}") from e
        return cls.from_dict(data)

    @classmethod
    def from_file(cls, path: Path) -> "CoefficientTable":
        try:
            json_data = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ReferenceDataError(f"Failed to parse coefficients data: {e}") from e
        return cls.from_json(json_data)

    def __len__(self) -> int:
        return sum(len(events) for events in self._events.values())

    def get_coefficients(self, gender: Gender, event_name: str) -> Optional[Coefficients]:
        """Coefficients for gender and event, or None if absent."""
        return self._events[gender].get(event_name)

    def calculate_result_score(
        self,
        result: float,
        gender: Gender,
        event_name: str
    ) -> float:
        """
        Calculate the result score for a performance.

        Args:
            result: Performance in seconds (time events) or meters (field events)
            gender: Athlete gender
            event_name: Canonical event string (e.g., '100m', 'Long Jump')

        Returns:
            Points rounded to the nearest integer (as float)

        Raises:
            CoefficientsNotFoundError: If the pair is not in the table
        """
        coefficients = self.get_coefficients(gender, event_name)
        if coefficients is None:
            raise CoefficientsNotFoundError(str(gender), event_name)
        return round_half_away_from_zero(coefficients.points(result))

    def missing_events(self) -> List[Tuple[Gender, Event]]:
        """Expected (gender, event) pairs with no coefficients."""
        return [
            (gender, event)
            for gender in Gender
            for event in expected_events(gender)
            if str(event) not in self._events[gender]
        ]


# Global table (set once by load_coefficients)
_COEFFICIENTS: WriteOnce[CoefficientTable] = WriteOnce(
    TableAlreadyLoadedError, "Coefficients already loaded."
)


def load_coefficients(path: Optional[Union[str, Path]] = None) -> None:
    """
    Load the coefficient table. Call once at application startup.

    Args:
        path: Dataset file (default: settings.coefficients_path)

    Raises:
        ReferenceDataError: If the dataset is missing or malformed
        TableAlreadyLoadedError: If the table is already loaded
    """
    if _COEFFICIENTS.is_set:
        raise TableAlreadyLoadedError("Coefficients already loaded.")

    path = Path(path) if path is not None else settings.coefficients_path
    table = CoefficientTable.from_file(path)
    _COEFFICIENTS.set(table)
    logger.info(f"Loaded {len(table)} coefficient entries from {path}")

    if settings.warn_on_missing_coefficients:
        missing = table.missing_events()
        if missing:
            logger.warning(
                f"{len(missing)} events have no coefficients: "
                + ", ".join(f"{gender}/{event}" for gender, event in missing)
            )


def get_coefficient_table() -> CoefficientTable:
    """
    Get the loaded global table.

    Raises:
        TableNotLoadedError: If load_coefficients() has not succeeded
    """
    table = _COEFFICIENTS.get()
    if table is None:
        raise TableNotLoadedError(
            "Coefficients not loaded. Call load_coefficients() first."
        )
    return table


def get_coefficients(gender: Gender, event_name: str) -> Optional[Coefficients]:
    """Coefficients from the global table; None if absent or not loaded."""
    table = _COEFFICIENTS.get()
    if table is None:
        return None
    return table.get_coefficients(gender, event_name)


def calculate_result_score(result: float, gender: Gender, event_name: str) -> float:
    """
    Result score from the global table.

    Raises:
        TableNotLoadedError: If load_coefficients() has not succeeded
        CoefficientsNotFoundError: If the pair is not in the table
    """
    return get_coefficient_table().calculate_result_score(result, gender, event_name)
