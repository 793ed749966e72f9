"""
Strategies for single requirement comparators such as `^1.2.3` or `>=2.0`.

The operator and the shape of the partial version are drawn independently.
Two pairings are constrained by the requirement grammar: a bare `*` never
takes an operator, and build metadata only appears under `=` or no operator.
"""

from __future__ import annotations

from dataclasses import replace

from hypothesis import strategies as st

from hypothesis_semver._config import WeightTable
from hypothesis_semver._dotted import identifier_lists
from hypothesis_semver._numeric import numeric_components
from hypothesis_semver._types import (
    BUILD_OPERATORS,
    Comparator,
    Field,
    Full,
    Major,
    MajorMinor,
    Operator,
    Partial,
    Wildcard,
)
from hypothesis_semver._util import draw_probability, weighted_choice

RELATIONAL_OPERATORS = (
    Operator.EQ,
    Operator.GT,
    Operator.GTE,
    Operator.LT,
    Operator.LTE,
    Operator.TILDE,
)


@st.composite
def operators(draw: st.DrawFn, table: WeightTable) -> Operator:
    """
    Generate a comparator operator, `^` and the bare form included.
    """
    options = [(table.caret_weight, Operator.CARET)]
    options += [(table.operator_weight, op) for op in RELATIONAL_OPERATORS]
    options.append((table.bare_operator_weight, Operator.NONE))
    return weighted_choice(draw, options)


@st.composite
def partials(draw: st.DrawFn, table: WeightTable, allow_wildcard: bool = True) -> Partial:
    """
    Generate the partial version of a comparator.

    `Full` partials may carry a pre-release list; build metadata is left to
    `comparators`, which knows the operator.
    """
    shapes = [
        (table.full_weight, Full),
        (table.major_minor_weight, MajorMinor),
        (table.major_weight, Major),
    ]
    if allow_wildcard:
        shapes.append((table.wildcard_weight, Wildcard))
    shape = weighted_choice(draw, shapes)

    if shape is Wildcard:
        return Wildcard()

    numbers = numeric_components(table)
    major = draw(numbers)
    if shape is Major:
        return Major(major, star=draw_probability(draw, table.star_probability))

    minor = draw(numbers)
    if shape is MajorMinor:
        return MajorMinor(major, minor, star=draw_probability(draw, table.star_probability))

    patch = draw(numbers)
    pre_release = ()
    if draw_probability(draw, table.comparator_pre_release_probability):
        pre_release = draw(identifier_lists(table, Field.PRE_RELEASE, min_size=1))
    return Full(major, minor, patch, pre_release)


@st.composite
def comparators(draw: st.DrawFn, table: WeightTable, allow_wildcard: bool = True) -> Comparator:
    """
    Generate one valid comparator.

    Args:
        table: The weight table to sample under
        allow_wildcard: Whether the bare `*` comparator may be produced

    Returns:
        A `Comparator`
    """
    partial = draw(partials(table, allow_wildcard))
    if isinstance(partial, Wildcard):
        return Comparator(Operator.NONE, partial)

    operator = draw(operators(table))
    if (
        isinstance(partial, Full)
        and operator in BUILD_OPERATORS
        and draw_probability(draw, table.comparator_build_probability)
    ):
        build_metadata = draw(identifier_lists(table, Field.BUILD_METADATA, min_size=1))
        partial = replace(partial, build_metadata=build_metadata)
    return Comparator(operator, partial)
