"""
Strategies for the numeric MAJOR, MINOR and PATCH components.
"""

from __future__ import annotations

from hypothesis import strategies as st

from hypothesis_semver._config import NumericMode, WeightTable
from hypothesis_semver._util import weighted_choice


def numeric_components(
    table: WeightTable, mode: NumericMode | None = None
) -> st.SearchStrategy[int]:
    """
    Generate a non-negative integer for a version component.

    Args:
        table: The weight table to sample under
        mode: The sampling mode; defaults to `table.numeric_mode`

    Returns:
        A strategy of integers within `[0, table.numeric_ceiling]`
    """
    mode = mode or table.numeric_mode
    if mode is NumericMode.SMALL:
        return st.integers(0, min(table.small_ceiling, table.numeric_ceiling))
    if mode is NumericMode.FULL:
        return st.integers(0, table.numeric_ceiling)
    return _boundary_biased(table)


def boundary_weights(table: WeightTable) -> list[tuple[int, int | None]]:
    """
    The `(weight, value)` options of `BOUNDARY` mode.

    A `None` value stands for a uniform draw over `[0, table.numeric_ceiling]`.
    """
    return [
        (table.normal_weight, None),
        (table.boundary_weight, 0),
        (table.boundary_weight, 1),
        (table.boundary_weight, table.numeric_ceiling),
    ]


@st.composite
def _boundary_biased(draw: st.DrawFn, table: WeightTable) -> int:
    value = weighted_choice(draw, boundary_weights(table))
    if value is None:
        return draw(st.integers(0, table.numeric_ceiling))
    return value
