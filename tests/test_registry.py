"""Tests for the category registry."""

import json
from dataclasses import FrozenInstanceError

import pytest

from baja_scores.registry.categories import (
    DEFAULT_REGISTRY,
    DISPLAY_CATEGORIES,
    CategoryDefinition,
    CategoryRegistry,
    load_registry,
)


class TestDefaultRegistry:
    def test_display_categories_are_registered(self):
        for name in DISPLAY_CATEGORIES:
            assert name in DEFAULT_REGISTRY

    def test_display_order(self):
        assert DISPLAY_CATEGORIES == (
            "Acceleration",
            "Suspension",
            "Maneuverability",
            "Hill Climb",
            "Rock Crawl",
            "Endurance",
        )

    def test_max_points(self):
        for name in ("Acceleration", "Suspension", "Maneuverability", "Hill Climb", "Rock Crawl"):
            assert DEFAULT_REGISTRY.max_points(name) == 75
        assert DEFAULT_REGISTRY.max_points("Endurance") == 400

    def test_sled_pull_registered_but_not_displayed(self):
        assert DEFAULT_REGISTRY.max_points("Sled Pull") == 75
        assert "Sled Pull" not in DISPLAY_CATEGORIES

    def test_every_max_is_positive(self):
        assert all(d.max_points > 0 for d in DEFAULT_REGISTRY)

    def test_unknown_category(self):
        assert DEFAULT_REGISTRY.get("Tug of War") is None
        assert DEFAULT_REGISTRY.max_points("Tug of War") is None
        assert "Tug of War" not in DEFAULT_REGISTRY

    def test_alias_order_is_specific_first(self):
        endurance = DEFAULT_REGISTRY.get("Endurance")
        assert endurance.score_keys[0] == "Endurance Race Score (400)"
        assert endurance.score_keys[-2:] == ("Score", "score")


class TestCategoryDefinition:
    @pytest.mark.parametrize("bad", [0, -75, float("nan"), float("inf"), "75", None, True])
    def test_rejects_non_positive_max(self, bad):
        with pytest.raises(ValueError):
            CategoryDefinition(name="Broken", max_points=bad)

    def test_rejects_blank_name(self):
        with pytest.raises(ValueError):
            CategoryDefinition(name="  ", max_points=75)

    def test_lists_become_tuples(self):
        definition = CategoryDefinition(
            name="Pull", max_points=75, section_keys=["Pull", "Sled"],
        )
        assert definition.section_keys == ("Pull", "Sled")
        hash(definition)

    def test_frozen(self):
        definition = CategoryDefinition(name="Pull", max_points=75)
        with pytest.raises(FrozenInstanceError):
            definition.max_points = 100


class TestCategoryRegistry:
    def test_duplicate_names_rejected(self):
        with pytest.raises(ValueError):
            CategoryRegistry([
                CategoryDefinition(name="A", max_points=1),
                CategoryDefinition(name="A", max_points=2),
            ])

    def test_iteration_keeps_order(self):
        registry = CategoryRegistry([
            CategoryDefinition(name="B", max_points=1),
            CategoryDefinition(name="A", max_points=2),
        ])
        assert registry.names == ("B", "A")
        assert [d.name for d in registry] == ["B", "A"]
        assert len(registry) == 2

    def test_from_mapping(self):
        registry = CategoryRegistry.from_mapping({
            "Sprint": {
                "max_points": 50,
                "overall_keys": ["Sprint (50)"],
                "section_keys": ["Sprint"],
                "score_keys": ["Score"],
            },
        })
        sprint = registry.get("Sprint")
        assert sprint.max_points == 50
        assert sprint.overall_keys == ("Sprint (50)",)

    @pytest.mark.parametrize("mapping", [
        [],
        {"Sprint": 50},
        {"Sprint": {"section_keys": ["Sprint"]}},
        {"Sprint": {"max_points": 50, "score_keys": "Score"}},
        {"Sprint": {"max_points": 50, "score_keys": ["Score", 3]}},
        {"Sprint": {"max_points": 0}},
    ])
    def test_from_mapping_rejects_malformed(self, mapping):
        with pytest.raises(ValueError):
            CategoryRegistry.from_mapping(mapping)

    def test_load_registry(self, tmp_path):
        path = tmp_path / "categories.json"
        path.write_text(json.dumps({
            "Hill Climb": {"max_points": 100, "section_keys": ["Hill"]},
        }))
        registry = load_registry(path)
        assert registry.names == ("Hill Climb",)
        assert registry.max_points("Hill Climb") == 100
