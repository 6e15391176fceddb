"""
Shared fixtures.

The coefficient and placing score tables are process-wide write-once
cells; every test starts with both empty.
"""

import json

import pytest

from wa_points.features.scoring.calculators import coefficients, placement
from wa_points.features.scoring.schemas import PlacementScoreDataset


PLACEMENT_TABLE_NAMES = list(PlacementScoreDataset.model_fields)


@pytest.fixture(autouse=True)
def reset_reference_tables():
    """Clear the global tables before and after each test."""
    coefficients._COEFFICIENTS._reset()
    placement._PLACEMENT_SCORES._reset()
    yield
    coefficients._COEFFICIENTS._reset()
    placement._PLACEMENT_SCORES._reset()


@pytest.fixture
def coefficients_data():
    """Small coefficient dataset (men 100m, 5000m; women Long Jump, High Jump)."""
    return {
        "men": {
            "100m": [24.642211664166098, -837.7135408530303, 7119.3125116789015],
            "5000m": [0.002777997945427213, -8.000608112196687, 5760.418712362531],
        },
        "women": {
            "Long Jump": [1.958114032649064, 193.69548254413166, -233.98988652729167],
            "High Jump": [39.557908744493034, 831.3655724464043, -601.5063267494843],
        },
    }


def make_placement_data(**tables):
    """Placement dataset with every sub-table present; unnamed ones empty."""
    data = {name: {} for name in PLACEMENT_TABLE_NAMES}
    data.update(tables)
    return data


@pytest.fixture
def placement_data():
    """Placement dataset with track and field final/semifinal entries."""
    return make_placement_data(
        track_field_final={
            "OW": {"1": 375, "2": 330, "3": 300},
            "DF": {"1": 240, "2": 210},
            "A": {"1": 100},
        },
        track_field_semi_max9={
            "OW": {"1": 140, "9": 130},
            "DF": {"1": 95, "9": 90},
        },
        track_field_semi_10plus={
            "DF": {"1": 90, "11": 85, "12": 60},
        },
        distance_5000m_final={
            "OW": {"1": 305, "2": 270},
        },
        distance_5000m_semi_max9={
            "OW": {"1": 120},
        },
        distance_5000m_semi_10plus={
            "OW": {"1": 110},
        },
        road_10km_final={
            "OW": {"1": 95},
        },
        race_walking_35km={
            "A": {"1": 100},
        },
    )


@pytest.fixture
def coefficients_file(tmp_path, coefficients_data):
    path = tmp_path / "coefficients.json"
    path.write_text(json.dumps(coefficients_data), encoding="utf-8")
    return path


@pytest.fixture
def placement_file(tmp_path, placement_data):
    path = tmp_path / "placement_scores.json"
    path.write_text(json.dumps(placement_data), encoding="utf-8")
    return path


@pytest.fixture
def make_placement():
    """Factory: make_placement(track_field_final={...}) -> full dataset dict."""
    return make_placement_data
