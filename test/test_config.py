"""Tests for the weight table."""

import dataclasses

import pytest

from hypothesis_semver import DEFAULT_WEIGHTS, U64_MAX, ConfigurationError, NumericMode, WeightTable


class TestDefaults:
    def test_defaults(self, table):
        assert table == DEFAULT_WEIGHTS
        assert table.numeric_mode is NumericMode.BOUNDARY
        assert table.numeric_ceiling == U64_MAX
        assert table.pre_release_probability == 0.5
        assert table.build_metadata_probability == 0.5
        assert table.identifier_min_length == 1
        assert table.max_comparator_count >= 3

    def test_frozen(self, table):
        with pytest.raises(dataclasses.FrozenInstanceError):
            table.invalid_probability = 1.0  # type: ignore[misc]


class TestOverrides:
    def test_override(self, table):
        overridden = table.with_overrides(invalid_probability=0.75, max_identifier_count=1)
        assert overridden.invalid_probability == 0.75
        assert overridden.max_identifier_count == 1
        # The source table is unchanged.
        assert table.invalid_probability == DEFAULT_WEIGHTS.invalid_probability

    def test_unknown_knob(self, table):
        with pytest.raises(ConfigurationError, match="unknown weight table knob"):
            table.with_overrides(probability_of_everything=1.0)

    def test_override_is_validated(self, table):
        with pytest.raises(ConfigurationError):
            table.with_overrides(caret_weight=-1)

    def test_override_numeric_ceiling_alone(self, table):
        overridden = table.with_overrides(numeric_ceiling=50)
        assert overridden.numeric_ceiling == 50
        assert overridden.small_ceiling == table.small_ceiling

    def test_small_ceiling_above_numeric_ceiling(self):
        table = WeightTable(small_ceiling=200, numeric_ceiling=100)
        assert table.small_ceiling == 200


class TestValidation:
    @pytest.mark.parametrize(
        "knobs",
        [
            {"boundary_weight": -1},
            {"pre_release_probability": 1.5},
            {"invalid_probability": -0.1},
            {"identifier_min_length": 0},
            {"identifier_min_length": 5, "identifier_max_length": 4},
            {"max_identifier_count": 0},
            {"max_comparator_count": 0},
            {"numeric_ceiling": 0},
            {"small_ceiling": -1},
            {"boundary_weight": 0, "normal_weight": 0},
            {"full_weight": 0, "major_minor_weight": 0, "major_weight": 0},
            {"operator_weight": 0, "caret_weight": 0, "bare_operator_weight": 0},
            {"numeric_mode": "boundary"},
        ],
    )
    def test_rejected(self, knobs):
        with pytest.raises(ConfigurationError):
            WeightTable(**knobs)

    def test_wildcard_only_partials_rejected(self):
        # Comparator lists never contain `*`, so they need another shape.
        with pytest.raises(ConfigurationError):
            WeightTable(full_weight=0, major_minor_weight=0, major_weight=0, wildcard_weight=5)

    def test_single_group_member_is_enough(self):
        table = WeightTable(normal_weight=0, operator_weight=0, bare_operator_weight=0)
        assert table.boundary_weight > 0
        assert table.caret_weight > 0
