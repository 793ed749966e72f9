from collections import Counter

from hypothesis import find, given

from hypothesis_semver import U64_MAX, NumericMode, WeightTable, numeric_components
from hypothesis_semver._numeric import boundary_weights
from hypothesis_semver._util import weighted_choice

TABLE = WeightTable()
SMALL = WeightTable(numeric_mode=NumericMode.SMALL, small_ceiling=10)
CAPPED = WeightTable(numeric_ceiling=1000, small_ceiling=10)
LOW_CEILING = WeightTable(numeric_mode=NumericMode.SMALL, numeric_ceiling=50)


def _shares(table):
    """Exact share of each `BOUNDARY` option, over every point a weighted draw can take."""
    options = boundary_weights(table)
    total = sum(weight for weight, _ in options)
    picks = Counter(weighted_choice(lambda strategy: point, options) for point in range(total))
    return {value: count / total for value, count in picks.items()}


class TestNumericComponents:
    @given(numeric_components(TABLE))
    def test_boundary_mode_in_range(self, value):
        assert 0 <= value <= U64_MAX

    @given(numeric_components(SMALL))
    def test_small_mode_in_range(self, value):
        assert 0 <= value <= 10

    @given(numeric_components(LOW_CEILING))
    def test_small_mode_capped_by_numeric_ceiling(self, value):
        assert 0 <= value <= 50

    @given(numeric_components(CAPPED, NumericMode.FULL))
    def test_full_mode_respects_ceiling(self, value):
        assert 0 <= value <= 1000

    @given(numeric_components(SMALL, NumericMode.BOUNDARY))
    def test_explicit_mode_overrides_table(self, value):
        assert 0 <= value <= U64_MAX

    @given(numeric_components(CAPPED))
    def test_boundary_mode_respects_ceiling(self, value):
        assert 0 <= value <= 1000

    def test_shrinks_to_zero(self):
        assert find(numeric_components(TABLE), lambda n: True) == 0


class TestBoundaryBias:
    def test_default_shares(self):
        shares = _shares(CAPPED)

        # 2 / (3 + 2 + 2 + 2) each, on top of whatever the uniform draw adds.
        assert shares[0] >= 0.1
        assert shares[1] >= 0.1
        assert shares[1000] >= 0.1
        assert shares[None] == 3 / 9

    def test_boundary_weight_scales_shares(self):
        heavy = _shares(CAPPED.with_overrides(boundary_weight=10))
        assert heavy[1000] > _shares(CAPPED)[1000]

    def test_without_boundary_weight(self):
        shares = _shares(CAPPED.with_overrides(boundary_weight=0))
        assert shares == {None: 1.0}

    def test_without_normal_weight(self):
        shares = _shares(CAPPED.with_overrides(normal_weight=0))
        assert set(shares) == {0, 1, 1000}
        assert shares[0] == shares[1] == shares[1000]

    @given(numeric_components(CAPPED.with_overrides(normal_weight=0)))
    def test_only_boundaries_drawn(self, value):
        assert value in (0, 1, 1000)
