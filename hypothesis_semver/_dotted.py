"""
Strategies for dot-separated identifier lists (pre-release and build
metadata).
"""

from __future__ import annotations

from typing import Iterable

from hypothesis import event
from hypothesis import strategies as st

from hypothesis_semver._config import ConfigurationError, WeightTable
from hypothesis_semver._identifier import invalid_segments, valid_segments
from hypothesis_semver._types import (
    LIST_DEFECTS,
    CandidateString,
    Defect,
    Field,
    IdentifierSegment,
    Validity,
    join_identifiers,
)

__all__ = [
    "identifier_lists",
    "invalid_identifier_lists",
    "join_identifiers",
    "malformed_identifier_lists",
]


def identifier_lists(
    table: WeightTable,
    field: Field = Field.PRE_RELEASE,
    min_size: int = 0,
) -> st.SearchStrategy[tuple[IdentifierSegment, ...]]:
    """
    Generate a well-formed list of 0 to `table.max_identifier_count`
    identifiers.

    An empty list stands for an omitted field, which is always valid.
    """
    return st.lists(
        valid_segments(table, field),
        min_size=min_size,
        max_size=max(min_size, table.max_identifier_count),
    ).map(tuple)


def invalid_identifier_lists(
    table: WeightTable,
    field: Field = Field.PRE_RELEASE,
    violations: Iterable[Defect] | None = None,
) -> st.SearchStrategy[tuple[IdentifierSegment, ...]]:
    """
    Generate a non-empty list in which exactly one identifier is invalid.
    """
    return _invalid_identifier_lists(table, field, invalid_segments(table, field, violations))


@st.composite
def _invalid_identifier_lists(
    draw: st.DrawFn,
    table: WeightTable,
    field: Field,
    bad_segments: st.SearchStrategy[IdentifierSegment],
) -> tuple[IdentifierSegment, ...]:
    segments = list(draw(identifier_lists(table, field, min_size=1)))
    position = draw(st.integers(0, len(segments) - 1))
    segments[position] = draw(bad_segments)
    return tuple(segments)


def malformed_identifier_lists(
    table: WeightTable,
    field: Field = Field.PRE_RELEASE,
    defects: Iterable[Defect] | None = None,
) -> st.SearchStrategy[CandidateString]:
    """
    Render well-formed identifiers with exactly one separator defect: a
    doubled, leading or trailing `.`.

    The result is the field's text only, without its `-` / `+` marker.
    """
    offered = list(defects) if defects is not None else list(LIST_DEFECTS)
    unknown = [d for d in offered if d not in LIST_DEFECTS]
    if unknown or not offered:
        raise ConfigurationError(
            f"not identifier list defects: {', '.join(d.value for d in unknown) or '(none)'}"
        )
    return _malformed_identifier_lists(table, field, offered)


@st.composite
def _malformed_identifier_lists(
    draw: st.DrawFn,
    table: WeightTable,
    field: Field,
    offered: list[Defect],
) -> CandidateString:
    defect = draw(st.sampled_from(offered))
    event(f"list-defect={defect.value}")

    if defect is Defect.DOUBLED_SEPARATOR:
        # Doubling needs a separator to double.
        segments = draw(identifier_lists(table, field, min_size=2))
        position = draw(st.integers(1, len(segments) - 1))
        text = (
            join_identifiers(segments[:position])
            + ".."
            + join_identifiers(segments[position:])
        )
    else:
        text = join_identifiers(draw(identifier_lists(table, field, min_size=1)))
        text = f".{text}" if defect is Defect.LEADING_SEPARATOR else f"{text}."

    return CandidateString(text, Validity.invalid(defect))
