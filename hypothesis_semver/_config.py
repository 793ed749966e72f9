"""
The weight table: every probability knob and bound consumed by the
generators.

A `WeightTable` is built once per test configuration and is read-only
afterwards, so a single instance can be shared by every strategy (and every
concurrently running test) that needs it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)

# The largest value most SemVer implementations accept for a numeric
# component (an unsigned 64-bit integer).
U64_MAX = 2**64 - 1


class NumericMode(Enum):
    """
    Sampling modes for MAJOR, MINOR and PATCH components.
    """

    SMALL = "small"
    """Uniform over `0..small_ceiling`."""

    BOUNDARY = "boundary"
    """Heavily weights 0, 1 and `numeric_ceiling` against a uniform draw."""

    FULL = "full"
    """Uniform over `0..numeric_ceiling`."""


class ConfigurationError(Exception):
    """
    Raised when a `WeightTable` is constructed with an unknown knob or an
    out-of-range value.
    """

    pass


# Groups of weights where at least one member must be non-zero, otherwise
# the generator consuming the group has nothing to choose from.
_WEIGHT_GROUPS = (
    ("boundary_weight", "normal_weight"),
    ("numeric_segment_weight", "alphanumeric_segment_weight"),
    ("illegal_character_weight", "leading_zero_weight", "empty_identifier_weight"),
    ("operator_weight", "caret_weight", "bare_operator_weight"),
    ("full_weight", "major_minor_weight", "major_weight"),
    ("small_count_weight", "large_count_weight"),
    ("wildcard_requirement_weight", "comparator_list_weight"),
)


@dataclass(frozen=True)
class WeightTable:
    """
    Named probability knobs and bounds for every SemVer generator.

    Weights are non-negative integers compared against the other weights of
    the same choice; probabilities are floats in `[0, 1]`.
    """

    numeric_mode: NumericMode = NumericMode.BOUNDARY
    """The sampling mode used when a generator is not given one explicitly."""

    numeric_ceiling: int = U64_MAX
    """The largest MAJOR, MINOR or PATCH value ever produced."""

    small_ceiling: int = 100
    """The upper bound of `NumericMode.SMALL`, capped at `numeric_ceiling`."""

    boundary_weight: int = 2
    """Weight of each boundary value (0, 1, `numeric_ceiling`) in `BOUNDARY` mode."""

    normal_weight: int = 3
    """Weight of a uniform full-range draw in `BOUNDARY` mode."""

    identifier_min_length: int = 1
    """Shortest identifier segment produced by the valid generators."""

    identifier_max_length: int = 10
    """Longest identifier segment produced by the valid generators."""

    max_identifier_count: int = 4
    """Most segments in a single pre-release or build-metadata list."""

    numeric_segment_weight: int = 1
    """Weight of a purely numeric identifier segment."""

    alphanumeric_segment_weight: int = 2
    """Weight of an alphanumeric identifier segment."""

    illegal_character_weight: int = 1
    """Weight of the "illegal character" segment violation."""

    leading_zero_weight: int = 1
    """Weight of the "leading zero" segment violation (pre-release only)."""

    empty_identifier_weight: int = 1
    """Weight of the "empty identifier" segment violation."""

    pre_release_probability: float = 0.5
    """Probability that a version carries a pre-release list."""

    build_metadata_probability: float = 0.5
    """Probability that a version carries a build-metadata list."""

    invalid_probability: float = 0.1
    """Probability that a mixed strategy yields an invalid candidate."""

    operator_weight: int = 5
    """Weight of each of `=`, `>`, `>=`, `<`, `<=` and `~`."""

    caret_weight: int = 10
    """Weight of `^`, the idiomatic requirement operator."""

    bare_operator_weight: int = 3
    """Weight of a comparator with no operator at all."""

    full_weight: int = 7
    """Weight of a `MAJOR.MINOR.PATCH` partial version."""

    major_minor_weight: int = 1
    """Weight of a `MAJOR.MINOR` partial version."""

    major_weight: int = 1
    """Weight of a `MAJOR` partial version."""

    wildcard_weight: int = 3
    """Weight of a bare `*` partial version, where one is allowed."""

    star_probability: float = 0.5
    """Probability that a short partial is spelled `1.*.*` / `1.2.*` rather than `1` / `1.2`."""

    comparator_pre_release_probability: float = 0.3
    """Probability that a full comparator version carries a pre-release list."""

    comparator_build_probability: float = 0.2
    """Probability that a full `=` or bare comparator version carries build metadata."""

    max_comparator_count: int = 8
    """Most comparators in a single requirement."""

    small_count_weight: int = 3
    """Weight of requirements with one to three comparators."""

    large_count_weight: int = 1
    """Weight of requirements with more than three comparators."""

    wildcard_requirement_weight: int = 1
    """Weight of the lone `*` requirement."""

    comparator_list_weight: int = 14
    """Weight of a requirement made of a list of comparators."""

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name.endswith("_weight") and value < 0:
                raise ConfigurationError(f"{f.name} must not be negative (got {value})")
            if f.name.endswith("_probability") and not 0.0 <= value <= 1.0:
                raise ConfigurationError(f"{f.name} must be within [0, 1] (got {value})")

        for group in _WEIGHT_GROUPS:
            if not any(getattr(self, name) for name in group):
                raise ConfigurationError(f"at least one of {', '.join(group)} must be non-zero")

        if not isinstance(self.numeric_mode, NumericMode):
            raise ConfigurationError(f"unknown numeric mode: {self.numeric_mode!r}")
        if self.numeric_ceiling < 1:
            raise ConfigurationError("numeric_ceiling must be at least 1")
        if self.small_ceiling < 0:
            raise ConfigurationError("small_ceiling must not be negative")
        if not 1 <= self.identifier_min_length <= self.identifier_max_length:
            raise ConfigurationError(
                "identifier lengths must satisfy 1 <= identifier_min_length "
                "<= identifier_max_length"
            )
        if self.max_identifier_count < 1:
            raise ConfigurationError("max_identifier_count must be at least 1")
        if self.max_comparator_count < 1:
            raise ConfigurationError("max_comparator_count must be at least 1")

    def with_overrides(self, **knobs: Any) -> WeightTable:
        """
        Return a copy of this table with the given knobs replaced.

        Raises `ConfigurationError` for unknown knobs or invalid values.
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(knobs) - known)
        if unknown:
            raise ConfigurationError(f"unknown weight table knob(s): {', '.join(unknown)}")

        logger.debug(f"overriding weight table knobs: {knobs}")
        return replace(self, **knobs)


DEFAULT_WEIGHTS = WeightTable()
