"""Tests for the competition leaderboard."""

from baja_scores.analysis.overview import OVERVIEW_COLUMNS, top_teams

from .conftest import CORNELL_KEY, ETS_KEY


class TestTopTeams:
    def test_ranked_by_overall_total(self, dataset):
        frame = top_teams(dataset, "Midwest 2023")
        assert list(frame.columns) == OVERVIEW_COLUMNS
        assert frame["team_key"].tolist()[:2] == [ETS_KEY, CORNELL_KEY]
        assert frame["total"].tolist() == [901.0, 812.5, 655.0]

    def test_team_name_drops_school_prefix(self, dataset):
        frame = top_teams(dataset, "Midwest 2023")
        assert frame.loc[1, "team"] == "Big Red Racing"
        assert frame.loc[1, "school"] == "Cornell University"

    def test_records_without_total_left_out(self, dataset):
        frame = top_teams(dataset, "Midwest 2023")
        assert "Dataless Tech" not in frame["school"].tolist()

    def test_limit(self, dataset):
        frame = top_teams(dataset, "Midwest 2023", limit=2)
        assert len(frame) == 2
        assert list(frame.index) == [0, 1]

    def test_zero_or_negative_limit(self, dataset):
        assert top_teams(dataset, "Midwest 2023", limit=0).empty
        assert top_teams(dataset, "Midwest 2023", limit=-3).empty

    def test_competition_resolved_forgivingly(self, dataset):
        frame = top_teams(dataset, "  california 2019")
        assert frame["total"].tolist() == [700.0, 200.0, 100.0]

    def test_ties_keep_dataset_order(self):
        data = {
            "Comp": {
                "x": {"Overall": {"School": "A", "team_key": "A - One", "Overall (1000)": 500}},
                "y": {"Overall": {"School": "B", "team_key": "B - Two", "Overall (1000)": 500}},
                "z": {"Overall": {"School": "C", "team_key": "C - Three", "Overall (1000)": 600}},
            },
        }
        frame = top_teams(data, "Comp")
        assert frame["team"].tolist() == ["Three", "One", "Two"]

    def test_custom_total_key(self, dataset):
        frame = top_teams(dataset, "California 2019", total_key="Acceleration (75)")
        assert frame["total"].tolist() == [60.0, 20.0, 10.0]

    def test_unknown_competition(self, dataset):
        frame = top_teams(dataset, "Nowhere 2000")
        assert frame.empty
        assert list(frame.columns) == OVERVIEW_COLUMNS

    def test_missing_school(self):
        data = {"Comp": {"x": {"Overall": {"team_key": "Lone - Team", "Overall (1000)": 10}}}}
        frame = top_teams(data, "Comp")
        assert frame.loc[0, "school"] == ""
        assert frame.loc[0, "team"] == "Lone - Team"
