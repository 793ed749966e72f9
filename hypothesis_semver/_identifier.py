"""
Strategies for single pre-release and build-metadata identifiers.

SemVer identifiers are drawn from `[0-9A-Za-z-]`. Purely numeric
pre-release identifiers may not carry a leading zero; build metadata has no
such restriction.
"""

from __future__ import annotations

import string
from typing import Iterable

from hypothesis import event
from hypothesis import strategies as st

from hypothesis_semver._config import ConfigurationError, WeightTable
from hypothesis_semver._types import (
    SEGMENT_DEFECTS,
    Defect,
    Field,
    IdentifierSegment,
    SegmentKind,
    Validity,
)
from hypothesis_semver._util import weighted_choice

DIGITS = string.digits
NON_ZERO_DIGITS = DIGITS[1:]
NON_DIGITS = string.ascii_letters + "-"
IDENTIFIER_ALPHABET = string.ascii_letters + string.digits + "-"

# Printable ASCII outside the identifier alphabet, minus the characters
# that are structural in versions and requirements (`.`, `+`, `,`).
ILLEGAL_CHARACTERS = " !\"#$%&'()*/:;<=>?@[\\]^_`{|}~"


def _lengths(table: WeightTable) -> st.SearchStrategy[int]:
    return st.integers(table.identifier_min_length, table.identifier_max_length)


@st.composite
def numeric_segments(
    draw: st.DrawFn, table: WeightTable, field: Field = Field.PRE_RELEASE
) -> IdentifierSegment:
    """
    Generate a valid, purely numeric identifier.

    Pre-release identifiers never have a leading zero unless they are
    exactly `"0"`; build-metadata identifiers may.
    """
    length = draw(_lengths(table))
    if field is Field.BUILD_METADATA:
        text = draw(st.text(DIGITS, min_size=length, max_size=length))
    elif length == 1:
        text = draw(st.sampled_from(DIGITS))
    else:
        head = draw(st.sampled_from(NON_ZERO_DIGITS))
        text = head + draw(st.text(DIGITS, min_size=length - 1, max_size=length - 1))
    return IdentifierSegment(text, SegmentKind.NUMERIC, field)


@st.composite
def alphanumeric_segments(
    draw: st.DrawFn, table: WeightTable, field: Field = Field.PRE_RELEASE
) -> IdentifierSegment:
    """
    Generate a valid identifier containing at least one non-digit.
    """
    text = draw(
        st.text(
            IDENTIFIER_ALPHABET,
            min_size=table.identifier_min_length,
            max_size=table.identifier_max_length,
        )
    )
    if text.isdigit():
        position = draw(st.integers(0, len(text) - 1))
        text = text[:position] + draw(st.sampled_from(NON_DIGITS)) + text[position + 1 :]
    return IdentifierSegment(text, SegmentKind.ALPHANUMERIC, field)


@st.composite
def valid_segments(
    draw: st.DrawFn, table: WeightTable, field: Field = Field.PRE_RELEASE
) -> IdentifierSegment:
    """
    Generate a valid identifier, numeric or alphanumeric per the table.
    """
    strategy = weighted_choice(
        draw,
        [
            (table.alphanumeric_segment_weight, alphanumeric_segments(table, field)),
            (table.numeric_segment_weight, numeric_segments(table, field)),
        ],
    )
    return draw(strategy)


def segment_violations(field: Field, violations: Iterable[Defect] | None = None) -> list[Defect]:
    """
    The segment violations available for `field`, optionally restricted to
    `violations`.

    Raises `ConfigurationError` if a requested violation is not a segment
    violation, or if none of them applies to `field`.
    """
    requested = list(violations) if violations is not None else list(SEGMENT_DEFECTS)
    unknown = [v for v in requested if v not in SEGMENT_DEFECTS]
    if unknown:
        raise ConfigurationError(f"not identifier violations: {', '.join(v.value for v in unknown)}")

    # A leading zero is perfectly legal in build metadata.
    offered = [
        v for v in requested if field is Field.PRE_RELEASE or v is not Defect.LEADING_ZERO
    ]
    if not offered:
        raise ConfigurationError(f"no identifier violation applies to {field.value}")
    return offered


def invalid_segments(
    table: WeightTable,
    field: Field = Field.PRE_RELEASE,
    violations: Iterable[Defect] | None = None,
) -> st.SearchStrategy[IdentifierSegment]:
    """
    Generate an identifier that breaks exactly one grammar rule.

    Args:
        table: The weight table to sample under
        field: The field the identifier is destined for
        violations: Restrict the rules that may be broken; defaults to all
            that apply to `field`

    Returns:
        A strategy of `IdentifierSegment`s tagged invalid with their violation
    """
    offered = segment_violations(field, violations)
    weights = {
        Defect.ILLEGAL_CHARACTER: table.illegal_character_weight,
        Defect.LEADING_ZERO: table.leading_zero_weight,
        Defect.EMPTY_IDENTIFIER: table.empty_identifier_weight,
    }
    options = [(weights[v], v) for v in offered]
    if not any(weight for weight, _ in options):
        raise ConfigurationError(
            f"every requested identifier violation has zero weight: "
            f"{', '.join(v.value for v in offered)}"
        )
    return _invalid_segments(table, field, options)


@st.composite
def _invalid_segments(
    draw: st.DrawFn,
    table: WeightTable,
    field: Field,
    options: list[tuple[int, Defect]],
) -> IdentifierSegment:
    violation = weighted_choice(draw, options)
    event(f"segment-violation={violation.value}")
    validity = Validity.invalid(violation)

    if violation is Defect.EMPTY_IDENTIFIER:
        return IdentifierSegment("", SegmentKind.ALPHANUMERIC, field, validity)

    if violation is Defect.LEADING_ZERO:
        length = max(2, draw(_lengths(table)))
        rest = draw(st.text(DIGITS, min_size=length - 1, max_size=length - 1))
        return IdentifierSegment(f"0{rest}", SegmentKind.NUMERIC, field, validity)

    base = draw(valid_segments(table, field)).text
    position = draw(st.integers(0, len(base) - 1))
    illegal = draw(st.sampled_from(ILLEGAL_CHARACTERS))
    text = base[:position] + illegal + base[position + 1 :]
    return IdentifierSegment(text, SegmentKind.ALPHANUMERIC, field, validity)
