"""
Version assembly: combines numeric components and identifier lists into
whole SemVer versions, either as structured `VersionCandidate`s or directly
as strings.

Invalid samples carry exactly one defect, so a failing test can always
attribute the failure to a single cause.
"""

from __future__ import annotations

import string
from typing import Iterable

from hypothesis import event
from hypothesis import strategies as st

from hypothesis_semver._config import ConfigurationError, WeightTable
from hypothesis_semver._dotted import (
    identifier_lists,
    invalid_identifier_lists,
    malformed_identifier_lists,
)
from hypothesis_semver._numeric import numeric_components
from hypothesis_semver._types import (
    CORE_DEFECTS,
    LIST_DEFECTS,
    SEGMENT_DEFECTS,
    CandidateString,
    Defect,
    Field,
    IdentifierSegment,
    Validity,
    VersionCandidate,
    join_identifiers,
)
from hypothesis_semver._util import draw_probability

VERSION_DEFECTS = CORE_DEFECTS + SEGMENT_DEFECTS + LIST_DEFECTS + (Defect.EMPTY_FIELD,)

_LEADING_ZERO_COMPONENTS = {
    Defect.LEADING_ZERO_MAJOR: 0,
    Defect.LEADING_ZERO_MINOR: 1,
    Defect.LEADING_ZERO_PATCH: 2,
}


def _optional_field(
    draw: st.DrawFn, table: WeightTable, field: Field, probability: float
) -> tuple[IdentifierSegment, ...]:
    if not draw_probability(draw, probability):
        return ()
    return draw(identifier_lists(table, field, min_size=1))


@st.composite
def version_candidates(draw: st.DrawFn, table: WeightTable) -> VersionCandidate:
    """
    Generate a valid structured version.

    The pre-release and build-metadata lists are each present with the
    table's probability, so all four present/absent combinations occur.
    """
    numbers = numeric_components(table)
    major, minor, patch = draw(numbers), draw(numbers), draw(numbers)
    pre_release = _optional_field(draw, table, Field.PRE_RELEASE, table.pre_release_probability)
    build_metadata = _optional_field(
        draw, table, Field.BUILD_METADATA, table.build_metadata_probability
    )
    return VersionCandidate(major, minor, patch, pre_release, build_metadata)


@st.composite
def invalid_version_candidates(draw: st.DrawFn, table: WeightTable) -> VersionCandidate:
    """
    Generate a structured version with exactly one invalid identifier, in
    either its pre-release or its build metadata.

    Structured versions cannot express string-level corruption; see
    `invalid_version_strings` for those.
    """
    numbers = numeric_components(table)
    major, minor, patch = draw(numbers), draw(numbers), draw(numbers)

    bad_field = draw(st.sampled_from([Field.PRE_RELEASE, Field.BUILD_METADATA]))
    if bad_field is Field.PRE_RELEASE:
        pre_release = draw(invalid_identifier_lists(table, Field.PRE_RELEASE))
        build_metadata = _optional_field(
            draw, table, Field.BUILD_METADATA, table.build_metadata_probability
        )
    else:
        pre_release = _optional_field(
            draw, table, Field.PRE_RELEASE, table.pre_release_probability
        )
        build_metadata = draw(invalid_identifier_lists(table, Field.BUILD_METADATA))

    candidate = VersionCandidate.from_parts(major, minor, patch, pre_release, build_metadata)
    event(f"version={candidate.validity}")
    return candidate


def version_strings(table: WeightTable) -> st.SearchStrategy[CandidateString]:
    """
    Generate valid version strings, each guaranteed to parse.
    """
    return version_candidates(table).map(lambda version: CandidateString(str(version)))


def invalid_version_strings(
    table: WeightTable, defects: Iterable[Defect] | None = None
) -> st.SearchStrategy[CandidateString]:
    """
    Generate version strings that are guaranteed not to parse.

    Args:
        table: The weight table to sample under
        defects: Restrict the corruption axes; defaults to every axis a
            version string can exhibit

    Returns:
        A strategy of `CandidateString`s, each tagged with its single defect
    """
    offered = list(defects) if defects is not None else list(VERSION_DEFECTS)
    unsupported = [d for d in offered if d not in VERSION_DEFECTS]
    if unsupported or not offered:
        raise ConfigurationError(
            f"not version defects: {', '.join(d.value for d in unsupported) or '(none)'}"
        )
    return _invalid_version_strings(table, offered)


def _render(core: str, pre_release: str | None, build_metadata: str | None) -> str:
    # `None` omits a field; an empty string keeps its marker.
    rendered = core
    if pre_release is not None:
        rendered += f"-{pre_release}"
    if build_metadata is not None:
        rendered += f"+{build_metadata}"
    return rendered


def _corrupt_core(draw: st.DrawFn, table: WeightTable, base: VersionCandidate, defect: Defect) -> str:
    components = [str(base.major), str(base.minor), str(base.patch)]

    if defect is Defect.MISSING_SEPARATOR:
        position = draw(st.integers(0, 1))
        separators = [".", "."]
        separators[position] = ""
        return components[0] + separators[0] + components[1] + separators[1] + components[2]

    if defect is Defect.EXTRA_SEPARATOR:
        position = draw(st.integers(0, 1))
        separators = [".", "."]
        separators[position] = ".."
        return components[0] + separators[0] + components[1] + separators[1] + components[2]

    if defect in _LEADING_ZERO_COMPONENTS:
        index = _LEADING_ZERO_COMPONENTS[defect]
        components[index] = f"0{components[index]}"
        return ".".join(components)

    index = draw(st.integers(0, 2))
    if defect is Defect.NON_NUMERIC_COMPONENT:
        # Letters only: a hyphen in PATCH would turn the tail into a pre-release.
        components[index] = draw(
            st.text(string.ascii_letters, min_size=1, max_size=table.identifier_max_length)
        )
    else:
        components[index] = ""
    return ".".join(components)


@st.composite
def _invalid_version_strings(
    draw: st.DrawFn, table: WeightTable, offered: list[Defect]
) -> CandidateString:
    defect = draw(st.sampled_from(offered))
    event(f"version-defect={defect.value}")

    base = draw(version_candidates(table))
    core = base.core
    fields = {
        Field.PRE_RELEASE: join_identifiers(base.pre_release) if base.pre_release else None,
        Field.BUILD_METADATA: (
            join_identifiers(base.build_metadata) if base.build_metadata else None
        ),
    }

    if defect in CORE_DEFECTS:
        core = _corrupt_core(draw, table, base, defect)
    else:
        # A leading zero is only a defect in the pre-release.
        if defect is Defect.LEADING_ZERO:
            field = Field.PRE_RELEASE
        else:
            field = draw(st.sampled_from([Field.PRE_RELEASE, Field.BUILD_METADATA]))

        if defect in SEGMENT_DEFECTS:
            fields[field] = join_identifiers(
                draw(invalid_identifier_lists(table, field, violations=[defect]))
            )
        elif defect in LIST_DEFECTS:
            fields[field] = draw(malformed_identifier_lists(table, field, defects=[defect])).text
        else:
            fields[field] = ""

    text = _render(core, fields[Field.PRE_RELEASE], fields[Field.BUILD_METADATA])
    return CandidateString(text, Validity.invalid(defect))
