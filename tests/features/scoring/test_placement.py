"""
Tests for the placing score table.
"""

import pytest

from wa_points.exceptions import ReferenceDataError, TableAlreadyLoadedError
from wa_points.features.events import (
    CombinedEvent,
    CompetitionCategory,
    Event,
    PlacementScoreEventGroup,
    RaceWalkingEvent,
    RoadRunningEvent,
    TrackAndFieldEvent,
)
from wa_points.features.scoring.calculators.placement import (
    FINAL_TABLES,
    PlacementScoreTable,
    calculate_placement_score,
    effective_place,
    get_placement_score_table,
    init_placement_score_calculator,
    select_sub_table_name,
)
from wa_points.features.scoring.models import PlacementScoreCalcInput, RoundType
from wa_points.features.scoring.schemas import PlacementScoreDataset


def calc_input(
    discipline=TrackAndFieldEvent.M_100,
    category=CompetitionCategory.OW,
    round_type=RoundType.FINAL,
    place=1,
    qualified_to_final=False,
    size_of_final=8,
):
    return PlacementScoreCalcInput(
        event=Event(discipline),
        competition_category=category,
        round_type=round_type,
        place=place,
        qualified_to_final=qualified_to_final,
        size_of_final=size_of_final,
    )


@pytest.fixture
def table(placement_data):
    return PlacementScoreTable.from_dict(placement_data)


# =============================================================================
# Test Table Selection
# =============================================================================

class TestTableSelection:
    """Tests for select_sub_table_name."""

    def test_every_group_has_final_table(self):
        assert set(FINAL_TABLES) == set(PlacementScoreEventGroup)

    def test_final_tables_exist_in_schema(self):
        assert set(FINAL_TABLES.values()) <= set(PlacementScoreDataset.model_fields)

    def test_track_field_semi_small_final(self):
        name = select_sub_table_name(
            PlacementScoreEventGroup.TRACK_AND_FIELD, RoundType.SEMI_FINAL, 9
        )
        assert name == "track_field_semi_max9"

    def test_track_field_semi_large_final(self):
        name = select_sub_table_name(
            PlacementScoreEventGroup.TRACK_AND_FIELD, RoundType.SEMI_FINAL, 10
        )
        assert name == "track_field_semi_10plus"

    def test_distance_semi(self):
        group = PlacementScoreEventGroup.DISTANCE_5000M_3000M_SC
        assert select_sub_table_name(group, RoundType.SEMI_FINAL, 8) == "distance_5000m_semi_max9"
        assert select_sub_table_name(group, RoundType.SEMI_FINAL, 12) == "distance_5000m_semi_10plus"

    def test_semi_for_other_groups(self):
        """Only track and field and 5000m/3000mSC have semifinal tables."""
        for group in PlacementScoreEventGroup:
            if group in (
                PlacementScoreEventGroup.TRACK_AND_FIELD,
                PlacementScoreEventGroup.DISTANCE_5000M_3000M_SC,
            ):
                continue
            assert select_sub_table_name(group, RoundType.SEMI_FINAL, 8) is None

    def test_other_round(self):
        for group in PlacementScoreEventGroup:
            assert select_sub_table_name(group, RoundType.OTHER, 8) is None


# =============================================================================
# Test Semifinal Qualification
# =============================================================================

class TestEffectivePlace:
    """Qualified semifinalists are scored as place 1."""

    def test_qualified_semifinalist(self):
        data = calc_input(round_type=RoundType.SEMI_FINAL, place=7, qualified_to_final=True)
        assert effective_place(data) == 1

    def test_not_qualified_semifinalist(self):
        data = calc_input(round_type=RoundType.SEMI_FINAL, place=7)
        assert effective_place(data) == 7

    def test_qualified_flag_ignored_in_final(self):
        data = calc_input(round_type=RoundType.FINAL, place=3, qualified_to_final=True)
        assert effective_place(data) == 3


# =============================================================================
# Test Placement Scores
# =============================================================================

class TestPlacementScore:
    """Tests for PlacementScoreTable.calculate_placement_score."""

    def test_final(self, table):
        assert table.calculate_placement_score(calc_input(place=1)) == 375
        assert table.calculate_placement_score(calc_input(place=3)) == 300

    def test_qualified_semi_large_final_same_as_place_1(self, table):
        """Place 11 qualified, final of 11, DF -> same as place 1."""
        qualified = calc_input(
            category=CompetitionCategory.DF,
            round_type=RoundType.SEMI_FINAL,
            place=11,
            qualified_to_final=True,
            size_of_final=11,
        )
        first = calc_input(
            category=CompetitionCategory.DF,
            round_type=RoundType.SEMI_FINAL,
            place=1,
            size_of_final=11,
        )
        assert table.calculate_placement_score(qualified) == 90
        assert table.calculate_placement_score(qualified) == table.calculate_placement_score(first)

    def test_not_qualified_semi_uses_literal_place(self, table):
        data = calc_input(
            category=CompetitionCategory.DF,
            round_type=RoundType.SEMI_FINAL,
            place=11,
            size_of_final=10,
        )
        assert table.calculate_placement_score(data) == 85

    def test_qualified_semi_small_final(self, table):
        data = calc_input(
            round_type=RoundType.SEMI_FINAL,
            place=2,
            qualified_to_final=True,
            size_of_final=8,
        )
        assert table.calculate_placement_score(data) == 140

    def test_size_of_final_boundary(self, table):
        """Final of 9 uses the small table, 10 the large one."""
        base = dict(
            category=CompetitionCategory.DF,
            round_type=RoundType.SEMI_FINAL,
            place=1,
        )
        assert table.calculate_placement_score(calc_input(size_of_final=9, **base)) == 95
        assert table.calculate_placement_score(calc_input(size_of_final=10, **base)) == 90

    def test_distance_semifinal(self, table):
        data = calc_input(
            discipline=TrackAndFieldEvent.M_3000_STEEPLECHASE,
            round_type=RoundType.SEMI_FINAL,
            place=4,
            qualified_to_final=True,
            size_of_final=15,
        )
        assert table.calculate_placement_score(data) == 110

    def test_distance_final(self, table):
        data = calc_input(discipline=TrackAndFieldEvent.M_5000, place=2)
        assert table.calculate_placement_score(data) == 270

    def test_road_10km_final(self, table):
        data = calc_input(discipline=RoadRunningEvent.ROAD_10KM)
        assert table.calculate_placement_score(data) == 95

    def test_race_walk_final(self, table):
        data = calc_input(
            discipline=RaceWalkingEvent.ROAD_35KM_WALK,
            category=CompetitionCategory.A,
        )
        assert table.calculate_placement_score(data) == 100

    def test_other_round(self, table):
        data = calc_input(round_type=RoundType.OTHER)
        assert table.calculate_placement_score(data) is None

    def test_semi_for_group_without_semi_tables(self, table):
        data = calc_input(
            discipline=RoadRunningEvent.ROAD_10KM,
            round_type=RoundType.SEMI_FINAL,
            qualified_to_final=True,
        )
        assert table.calculate_placement_score(data) is None

    def test_missing_category(self, table):
        data = calc_input(category=CompetitionCategory.GW)
        assert table.calculate_placement_score(data) is None

    def test_missing_place(self, table):
        data = calc_input(place=40)
        assert table.calculate_placement_score(data) is None

    def test_empty_sub_table(self, table):
        data = calc_input(discipline=CombinedEvent.DECATHLON)
        assert table.calculate_placement_score(data) is None


# =============================================================================
# Test Dataset Parsing
# =============================================================================

class TestDatasetParsing:
    """Malformed datasets fail with ReferenceDataError."""

    def test_place_keys_are_ints(self, table):
        sub_table = table.sub_table("track_field_final")
        assert sub_table[CompetitionCategory.OW][1] == 375

    def test_missing_sub_table(self, placement_data):
        del placement_data["cross_country_final"]
        with pytest.raises(ReferenceDataError, match="Failed to parse placement score data"):
            PlacementScoreTable.from_dict(placement_data)

    def test_unknown_sub_table(self, make_placement):
        data = make_placement(indoor_final={})
        with pytest.raises(ReferenceDataError):
            PlacementScoreTable.from_dict(data)

    def test_unknown_category(self, make_placement):
        data = make_placement(track_field_final={"XX": {"1": 10}})
        with pytest.raises(ReferenceDataError):
            PlacementScoreTable.from_dict(data)

    def test_non_integer_place(self, make_placement):
        data = make_placement(track_field_final={"OW": {"first": 10}})
        with pytest.raises(ReferenceDataError):
            PlacementScoreTable.from_dict(data)

    def test_invalid_json(self):
        with pytest.raises(ReferenceDataError):
            PlacementScoreTable.from_json("")

    def test_file_not_utf8(self, tmp_path):
        """Undecodable bytes are a dataset error, not UnicodeDecodeError."""
        path = tmp_path / "placement_scores.json"
        path.write_bytes(b"\xff\xfe")
        with pytest.raises(ReferenceDataError, match="Failed to parse placement score data"):
            init_placement_score_calculator(path)


# =============================================================================
# Test Global Table
# =============================================================================

class TestGlobalTable:
    """Tests for init_placement_score_calculator and the module-level lookup."""

    def test_not_initialized_returns_none(self):
        assert get_placement_score_table() is None
        assert calculate_placement_score(calc_input()) is None

    def test_init_and_calculate(self, placement_file):
        init_placement_score_calculator(placement_file)
        assert calculate_placement_score(calc_input()) == 375

    def test_init_twice(self, placement_file):
        init_placement_score_calculator(placement_file)
        with pytest.raises(
            TableAlreadyLoadedError,
            match="Placement score calculator already initialized."
        ):
            init_placement_score_calculator(placement_file)

    def test_bundled_dataset(self):
        init_placement_score_calculator()
        assert calculate_placement_score(calc_input(place=16)) == 80
        qualified = calc_input(
            category=CompetitionCategory.DF,
            round_type=RoundType.SEMI_FINAL,
            place=11,
            qualified_to_final=True,
            size_of_final=11,
        )
        assert calculate_placement_score(qualified) == 90
