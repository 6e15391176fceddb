"""
World Athletics Points bootstrap

Logging setup and one-time loading of the reference tables.
Call both once at process start, before scoring anything.
"""

import logging
import sys
from typing import Dict

from wa_points.config import settings
from wa_points.exceptions import ScoringError
from wa_points.features.scoring.calculators.coefficients import load_coefficients
from wa_points.features.scoring.calculators.placement import init_placement_score_calculator


logger = logging.getLogger(__name__)


# === Logging Setup ===
def setup_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )


# === Reference Tables ===
def init_reference_tables() -> Dict[str, bool]:
    """
    Load the coefficient and placing score tables.

    A table that fails to load is logged and skipped; scoring then
    fails with TableNotLoadedError (coefficients) or scores no placing
    bonus (placement) instead of crashing at startup.

    Returns:
        Table name -> loaded successfully
    """
    loaders = {
        "coefficients": load_coefficients,
        "placement_scores": init_placement_score_calculator,
    }

    status = {}
    for name, loader in loaders.items():
        try:
            loader()
            status[name] = True
        except ScoringError as e:
            logger.error(f"Failed to initialize {name} table: {e}")
            status[name] = False

    return status
