import pytest
from hypothesis import HealthCheck, settings

from hypothesis_semver import NumericMode, WeightTable

# Contract checks make individual draws slower than Hypothesis expects.
settings.register_profile(
    "hypothesis-semver",
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow, HealthCheck.data_too_large],
)
settings.load_profile("hypothesis-semver")


@pytest.fixture
def table():
    return WeightTable()


@pytest.fixture
def small_table():
    # Small numbers and short identifiers keep failure output readable.
    return WeightTable(
        numeric_mode=NumericMode.SMALL,
        identifier_max_length=3,
        max_identifier_count=2,
        max_comparator_count=3,
    )
