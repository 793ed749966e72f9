"""
Hypothesis strategies for Semantic Versioning 2.0.0 versions and version
requirements, valid and invalid.
"""

from hypothesis_semver._assemble import (
    VERSION_DEFECTS,
    invalid_version_candidates,
    invalid_version_strings,
    version_candidates,
    version_strings,
)
from hypothesis_semver._comparator import comparators, operators, partials
from hypothesis_semver._config import (
    DEFAULT_WEIGHTS,
    U64_MAX,
    ConfigurationError,
    NumericMode,
    WeightTable,
)
from hypothesis_semver._dotted import (
    identifier_lists,
    invalid_identifier_lists,
    join_identifiers,
    malformed_identifier_lists,
)
from hypothesis_semver._grammar import (
    ParsedRequirement,
    SemVerError,
    is_valid_requirement,
    is_valid_version,
    parse_requirement,
    parse_version,
)
from hypothesis_semver._identifier import (
    alphanumeric_segments,
    invalid_segments,
    numeric_segments,
    valid_segments,
)
from hypothesis_semver._numeric import numeric_components
from hypothesis_semver._regex import (
    BUILD_METADATA_REGEX,
    PRE_RELEASE_REGEX,
    SEMVER_REGEX,
    build_metadata_strings,
    pre_release_strings,
    semver_strings,
)
from hypothesis_semver._requirement import (
    comparator_counts,
    comparator_lists,
    invalid_requirement_candidates,
    invalid_requirement_strings,
    requirement_candidates,
    requirement_strings,
)
from hypothesis_semver._route import ROUTES, GenerationRoute, StringRoute, StructuralRoute
from hypothesis_semver._types import (
    VALID,
    CandidateString,
    Comparator,
    Defect,
    Field,
    Full,
    IdentifierSegment,
    Major,
    MajorMinor,
    Operator,
    Partial,
    RequirementCandidate,
    SegmentKind,
    Validity,
    VersionCandidate,
    Wildcard,
)
from hypothesis_semver._util import optional
from hypothesis_semver._version import __version__

__all__ = [
    "BUILD_METADATA_REGEX",
    "DEFAULT_WEIGHTS",
    "PRE_RELEASE_REGEX",
    "ROUTES",
    "SEMVER_REGEX",
    "U64_MAX",
    "VALID",
    "VERSION_DEFECTS",
    "CandidateString",
    "Comparator",
    "ConfigurationError",
    "Defect",
    "Field",
    "Full",
    "GenerationRoute",
    "IdentifierSegment",
    "Major",
    "MajorMinor",
    "NumericMode",
    "Operator",
    "ParsedRequirement",
    "Partial",
    "RequirementCandidate",
    "SegmentKind",
    "SemVerError",
    "StringRoute",
    "StructuralRoute",
    "Validity",
    "VersionCandidate",
    "WeightTable",
    "Wildcard",
    "__version__",
    "alphanumeric_segments",
    "build_metadata_strings",
    "comparator_counts",
    "comparator_lists",
    "comparators",
    "identifier_lists",
    "invalid_identifier_lists",
    "invalid_requirement_candidates",
    "invalid_requirement_strings",
    "invalid_segments",
    "invalid_version_candidates",
    "invalid_version_strings",
    "is_valid_requirement",
    "is_valid_version",
    "join_identifiers",
    "malformed_identifier_lists",
    "numeric_components",
    "numeric_segments",
    "operators",
    "optional",
    "parse_requirement",
    "parse_version",
    "partials",
    "pre_release_strings",
    "requirement_candidates",
    "requirement_strings",
    "semver_strings",
    "valid_segments",
    "version_candidates",
    "version_strings",
]
