"""
Requirement assembly: composes comparators into version requirements such
as `>=1.2.0, <2.0.0`.
"""

from __future__ import annotations

from typing import Iterable

from hypothesis import event
from hypothesis import strategies as st

from hypothesis_semver._comparator import comparators, operators
from hypothesis_semver._config import ConfigurationError, WeightTable
from hypothesis_semver._dotted import invalid_identifier_lists
from hypothesis_semver._numeric import numeric_components
from hypothesis_semver._types import (
    REQUIREMENT_DEFECTS,
    REQUIREMENT_SEPARATOR,
    CandidateString,
    Comparator,
    Defect,
    Field,
    Full,
    Operator,
    RequirementCandidate,
    Validity,
    Wildcard,
)
from hypothesis_semver._util import weighted_choice

# Requirements up to this many comparators are the common case.
_SMALL_COUNT = 3

# Separators that never split a requirement into well-formed comparators.
MALFORMED_SEPARATORS = (";", " ", ",,", "||", " and ")

_EXPLICIT_OPERATORS = [op for op in Operator if op is not Operator.NONE]

WILDCARD_REQUIREMENT = RequirementCandidate((Comparator(Operator.NONE, Wildcard()),))


@st.composite
def comparator_counts(draw: st.DrawFn, table: WeightTable) -> int:
    """
    Generate a comparator count in `[1, table.max_comparator_count]`,
    skewed toward one to three.
    """
    small_max = min(_SMALL_COUNT, table.max_comparator_count)
    options = [(table.small_count_weight, st.integers(1, small_max))]
    if table.max_comparator_count > _SMALL_COUNT:
        options.append(
            (table.large_count_weight, st.integers(_SMALL_COUNT + 1, table.max_comparator_count))
        )
    if not any(weight for weight, _ in options):
        # The large bucket is the only weighted one but lies out of range.
        return draw(options[0][1])
    return draw(weighted_choice(draw, options))


@st.composite
def comparator_lists(
    draw: st.DrawFn, table: WeightTable, min_size: int = 1
) -> tuple[Comparator, ...]:
    """
    Generate a list of non-wildcard comparators.

    A lone `*` is a requirement of its own and is never mixed into a list.
    """
    count = max(min_size, draw(comparator_counts(table)))
    return tuple(draw(comparators(table, allow_wildcard=False)) for _ in range(count))


@st.composite
def requirement_candidates(draw: st.DrawFn, table: WeightTable) -> RequirementCandidate:
    """
    Generate a valid structured requirement: either the lone `*`, or a list
    of comparators.
    """
    wildcard = weighted_choice(
        draw,
        [
            (table.comparator_list_weight, False),
            (table.wildcard_requirement_weight, True),
        ],
    )
    if wildcard:
        return WILDCARD_REQUIREMENT
    return RequirementCandidate(draw(comparator_lists(table)))


@st.composite
def invalid_requirement_candidates(
    draw: st.DrawFn, table: WeightTable
) -> RequirementCandidate:
    """
    Generate a structured requirement in which exactly one full comparator
    carries a pre-release identifier with an illegal character.
    """
    comparators_ = list(draw(comparator_lists(table)))
    numbers = numeric_components(table)
    bad = Comparator(
        draw(operators(table)),
        Full(
            draw(numbers),
            draw(numbers),
            draw(numbers),
            draw(
                invalid_identifier_lists(
                    table, Field.PRE_RELEASE, violations=[Defect.ILLEGAL_CHARACTER]
                )
            ),
        ),
    )
    comparators_[draw(st.integers(0, len(comparators_) - 1))] = bad
    return RequirementCandidate.from_comparators(tuple(comparators_))


def requirement_strings(table: WeightTable) -> st.SearchStrategy[CandidateString]:
    """
    Generate valid requirement strings, each guaranteed to parse.
    """
    return requirement_candidates(table).map(lambda req: CandidateString(str(req)))


def invalid_requirement_strings(
    table: WeightTable, defects: Iterable[Defect] | None = None
) -> st.SearchStrategy[CandidateString]:
    """
    Generate requirement strings that are guaranteed not to parse.

    Args:
        table: The weight table to sample under
        defects: Restrict the corruption axes; defaults to a malformed
            separator, a dangling comma and an operator missing its version

    Returns:
        A strategy of `CandidateString`s, each tagged with its single defect
    """
    offered = list(defects) if defects is not None else list(REQUIREMENT_DEFECTS)
    unsupported = [d for d in offered if d not in REQUIREMENT_DEFECTS]
    if unsupported or not offered:
        raise ConfigurationError(
            f"not requirement defects: {', '.join(d.value for d in unsupported) or '(none)'}"
        )
    return _invalid_requirement_strings(table, offered)


@st.composite
def _invalid_requirement_strings(
    draw: st.DrawFn, table: WeightTable, offered: list[Defect]
) -> CandidateString:
    defect = draw(st.sampled_from(offered))
    event(f"requirement-defect={defect.value}")

    if defect is Defect.MALFORMED_SEPARATOR:
        parts = [str(c) for c in draw(comparator_lists(table, min_size=2))]
        separators = [REQUIREMENT_SEPARATOR] * (len(parts) - 1)
        separators[draw(st.integers(0, len(separators) - 1))] = draw(
            st.sampled_from(MALFORMED_SEPARATORS)
        )
        text = parts[0] + "".join(sep + part for sep, part in zip(separators, parts[1:]))
    elif defect is Defect.DANGLING_COMMA:
        text = str(RequirementCandidate(draw(comparator_lists(table)))) + ","
    else:
        parts = [str(c) for c in draw(comparator_lists(table))]
        position = draw(st.integers(0, len(parts) - 1))
        parts[position] = draw(st.sampled_from(_EXPLICIT_OPERATORS)).value
        text = REQUIREMENT_SEPARATOR.join(parts)

    return CandidateString(text, Validity.invalid(defect))
