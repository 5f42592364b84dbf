"""Tests for percentage normalization and overflow splitting."""

import pytest

from baja_scores.analysis.extraction import extract_raw_points
from baja_scores.analysis.scoring import (
    ZERO_SCORE,
    NormalizedScore,
    normalize,
    score_team,
    split_percentage,
)
from baja_scores.registry.categories import DEFAULT_REGISTRY


class TestNormalize:
    def test_within_maximum(self):
        result = normalize(60, "Rock Crawl")
        assert result.capped == pytest.approx(80.0)
        assert result.overflow == 0
        assert not result.has_overflow

    def test_above_maximum(self):
        result = normalize(80, "Hill Climb")
        assert result.capped == 100
        assert result.overflow == pytest.approx(6.6667, abs=1e-3)
        assert result.has_overflow

    def test_exactly_maximum(self):
        result = normalize(400, "Endurance")
        assert result == NormalizedScore(capped=100.0, overflow=0.0)

    def test_endurance_uses_400(self):
        assert normalize(100, "Endurance").capped == pytest.approx(25.0)

    def test_zero_points(self):
        assert normalize(0, "Acceleration") == NormalizedScore(0.0, 0.0)

    def test_unknown_category(self):
        assert normalize(0, "Tug of War") == ZERO_SCORE
        assert normalize(50, "Tug of War") == ZERO_SCORE

    def test_no_rounding(self):
        assert normalize(50, "Suspension").capped == 50 / 75 * 100


class TestNormalizeProperties:
    @pytest.mark.parametrize("category", list(DEFAULT_REGISTRY.names))
    @pytest.mark.parametrize("points", [0, 1, 37.5, 74.9, 75, 75.1, 120, 399, 400, 650])
    def test_capped_plus_overflow_is_true_percentage(self, category, points):
        result = normalize(points, category)
        true_percentage = points / DEFAULT_REGISTRY.max_points(category) * 100
        if result.overflow > 0:
            assert result.capped + result.overflow == pytest.approx(true_percentage)
            assert result.capped == 100
        else:
            assert result.capped == pytest.approx(true_percentage)
        assert result.percentage == pytest.approx(true_percentage)
        assert 0 <= result.capped <= 100
        assert result.overflow >= 0

    @pytest.mark.parametrize("category", ["Acceleration", "Endurance"])
    def test_monotonic(self, category):
        points = [0, 10, 50, 74, 75, 76, 150, 399, 400, 401, 800]
        results = [normalize(p, category) for p in points]
        for lower, higher in zip(results, results[1:]):
            assert lower.capped <= higher.capped
            assert lower.overflow <= higher.overflow


class TestSplitPercentage:
    @pytest.mark.parametrize("percentage, capped, overflow", [
        (0.0, 0.0, 0.0),
        (99.9, 99.9, 0.0),
        (100.0, 100.0, 0.0),
        (110.0, 100.0, 10.0),
    ])
    def test_split(self, percentage, capped, overflow):
        result = split_percentage(percentage)
        assert result.capped == pytest.approx(capped)
        assert result.overflow == pytest.approx(overflow)


class TestScoreTeam:
    def test_rock_crawl_section(self):
        record = {"Rock Crawl": {"Score": 60}}
        assert extract_raw_points(record, "Rock Crawl") == 60
        assert score_team(record, "Rock Crawl").capped == pytest.approx(80.0)

    def test_hill_climb_overall_overflow(self):
        record = {"Overall": {"Hill Climb (75)": 80}}
        result = score_team(record, "Hill Climb")
        assert result.capped == 100
        assert result.overflow == pytest.approx(5 / 75 * 100)

    def test_unknown_category_zero(self):
        assert score_team({"Overall": {}}, "Tug of War") == ZERO_SCORE

    def test_missing_record_zero(self):
        assert score_team(None, "Acceleration") == ZERO_SCORE
