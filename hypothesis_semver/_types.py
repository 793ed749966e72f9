"""
Structured SemVer candidates produced by the generators.

Every value here is immutable and carries (directly or through its parts)
a `Validity`: a label asserting whether the candidate is meant to parse
under the SemVer 2.0.0 grammar.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

import icontract

# A single identifier, as allowed in both pre-release and build metadata.
_IDENTIFIER_PATTERN = re.compile(r"[0-9A-Za-z-]+")


class Field(Enum):
    """
    The version fields made of dot-separated identifiers.
    """

    PRE_RELEASE = "pre-release"
    BUILD_METADATA = "build-metadata"

    @property
    def marker(self) -> str:
        """
        The character introducing this field in a version string.
        """
        return "-" if self is Field.PRE_RELEASE else "+"


class SegmentKind(Enum):
    """
    Whether an identifier segment is purely numeric.
    """

    NUMERIC = "numeric"
    ALPHANUMERIC = "alphanumeric"


class Defect(Enum):
    """
    The single corruption axis that makes a candidate invalid.
    """

    # Identifier segments.
    ILLEGAL_CHARACTER = "illegal-character"
    LEADING_ZERO = "leading-zero"
    EMPTY_IDENTIFIER = "empty-identifier"

    # Dot-separated identifier lists.
    DOUBLED_SEPARATOR = "doubled-separator"
    LEADING_SEPARATOR = "leading-separator"
    TRAILING_SEPARATOR = "trailing-separator"
    EMPTY_FIELD = "empty-field"

    # MAJOR.MINOR.PATCH.
    MISSING_SEPARATOR = "missing-separator"
    EXTRA_SEPARATOR = "extra-separator"
    NON_NUMERIC_COMPONENT = "non-numeric-component"
    EMPTY_COMPONENT = "empty-component"
    LEADING_ZERO_MAJOR = "leading-zero-major"
    LEADING_ZERO_MINOR = "leading-zero-minor"
    LEADING_ZERO_PATCH = "leading-zero-patch"

    # Version requirements.
    MALFORMED_SEPARATOR = "malformed-separator"
    DANGLING_COMMA = "dangling-comma"
    MISSING_PARTIAL = "missing-partial"


SEGMENT_DEFECTS = (Defect.ILLEGAL_CHARACTER, Defect.LEADING_ZERO, Defect.EMPTY_IDENTIFIER)
LIST_DEFECTS = (Defect.DOUBLED_SEPARATOR, Defect.LEADING_SEPARATOR, Defect.TRAILING_SEPARATOR)
CORE_DEFECTS = (
    Defect.MISSING_SEPARATOR,
    Defect.EXTRA_SEPARATOR,
    Defect.NON_NUMERIC_COMPONENT,
    Defect.EMPTY_COMPONENT,
    Defect.LEADING_ZERO_MAJOR,
    Defect.LEADING_ZERO_MINOR,
    Defect.LEADING_ZERO_PATCH,
)
REQUIREMENT_DEFECTS = (
    Defect.MALFORMED_SEPARATOR,
    Defect.DANGLING_COMMA,
    Defect.MISSING_PARTIAL,
)


@dataclass(frozen=True)
class Validity:
    """
    Whether a candidate is meant to parse, and if not, why.
    """

    defect: Defect | None = None
    """The corruption applied to the candidate, or `None` if it is valid."""

    @classmethod
    def invalid(cls, defect: Defect) -> Validity:
        return cls(defect)

    @property
    def is_valid(self) -> bool:
        return self.defect is None

    def __str__(self) -> str:
        if self.defect is None:
            return "valid"
        return f"invalid({self.defect.value})"


VALID = Validity()


def has_leading_zero(text: str) -> bool:
    """
    Is `text` a number spelled with a redundant leading zero?
    """
    return len(text) > 1 and text[0] == "0" and text.isdigit()


def _segment_is_well_formed(segment: IdentifierSegment) -> bool:
    if not segment.validity.is_valid:
        return True
    if _IDENTIFIER_PATTERN.fullmatch(segment.text) is None:
        return False
    if segment.kind is SegmentKind.NUMERIC:
        if not segment.text.isdigit():
            return False
        # Leading zeros are legal in build metadata, never in pre-release.
        return segment.field is Field.BUILD_METADATA or not has_leading_zero(segment.text)
    return not segment.text.isdigit()


@icontract.invariant(
    lambda self: _segment_is_well_formed(self),
    "a segment tagged valid obeys the SemVer identifier grammar for its field",
)
@dataclass(frozen=True)
class IdentifierSegment:
    """
    A single pre-release or build-metadata identifier.
    """

    text: str
    """The identifier as it appears in a version string."""

    kind: SegmentKind
    """Whether the identifier is purely numeric."""

    field: Field = Field.PRE_RELEASE
    """The field this identifier belongs to."""

    validity: Validity = VALID
    """Whether this identifier is meant to be accepted."""

    def __str__(self) -> str:
        return self.text


def join_identifiers(segments: tuple[IdentifierSegment, ...]) -> str:
    """
    Render a list of identifier segments in canonical `a.b.c` form.
    """
    return ".".join(segment.text for segment in segments)


def _first_defect(segments: tuple[IdentifierSegment, ...]) -> Defect | None:
    for segment in segments:
        if segment.validity.defect is not None:
            return segment.validity.defect
    return None


@dataclass(frozen=True)
class VersionCandidate:
    """
    A structured `MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]` version.
    """

    major: int
    minor: int
    patch: int

    pre_release: tuple[IdentifierSegment, ...] = ()
    """The pre-release identifiers; empty when the field is omitted."""

    build_metadata: tuple[IdentifierSegment, ...] = ()
    """The build-metadata identifiers; empty when the field is omitted."""

    validity: Validity = VALID
    """Whether this candidate is meant to parse."""

    @classmethod
    def from_parts(
        cls,
        major: int,
        minor: int,
        patch: int,
        pre_release: tuple[IdentifierSegment, ...] = (),
        build_metadata: tuple[IdentifierSegment, ...] = (),
    ) -> VersionCandidate:
        """
        Build a candidate whose validity is derived from its segments.
        """
        defect = _first_defect(pre_release) or _first_defect(build_metadata)
        validity = VALID if defect is None else Validity.invalid(defect)
        return cls(major, minor, patch, pre_release, build_metadata, validity)

    @property
    def core(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def __str__(self) -> str:
        rendered = self.core
        if self.pre_release:
            rendered += f"-{join_identifiers(self.pre_release)}"
        if self.build_metadata:
            rendered += f"+{join_identifiers(self.build_metadata)}"
        return rendered


class Operator(Enum):
    """
    A relational operator at the head of a comparator.
    """

    NONE = ""
    EQ = "="
    GT = ">"
    GTE = ">="
    LT = "<"
    LTE = "<="
    TILDE = "~"
    CARET = "^"


# The operators the external grammar accepts build metadata with.
BUILD_OPERATORS = (Operator.NONE, Operator.EQ)


class Partial(ABC):
    """
    The (possibly partial) version a comparator constrains against.
    """

    @abstractmethod
    def __str__(self) -> str:  # pragma: no cover
        raise NotImplementedError


@dataclass(frozen=True)
class Wildcard(Partial):
    """
    `*`: any version at all.
    """

    def __str__(self) -> str:
        return "*"


@dataclass(frozen=True)
class Major(Partial):
    """
    `MAJOR`, or `MAJOR.*.*` when starred.
    """

    major: int
    star: bool = False

    def __str__(self) -> str:
        return f"{self.major}.*.*" if self.star else str(self.major)


@dataclass(frozen=True)
class MajorMinor(Partial):
    """
    `MAJOR.MINOR`, or `MAJOR.MINOR.*` when starred.
    """

    major: int
    minor: int
    star: bool = False

    def __str__(self) -> str:
        rendered = f"{self.major}.{self.minor}"
        return f"{rendered}.*" if self.star else rendered


@dataclass(frozen=True)
class Full(Partial):
    """
    `MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]`.
    """

    major: int
    minor: int
    patch: int
    pre_release: tuple[IdentifierSegment, ...] = ()
    build_metadata: tuple[IdentifierSegment, ...] = ()

    def __str__(self) -> str:
        rendered = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre_release:
            rendered += f"-{join_identifiers(self.pre_release)}"
        if self.build_metadata:
            rendered += f"+{join_identifiers(self.build_metadata)}"
        return rendered


@dataclass(frozen=True)
class Comparator:
    """
    One operator and partial version clause of a requirement, e.g. `^1.2.3`.
    """

    operator: Operator
    partial: Partial

    @property
    def defect(self) -> Defect | None:
        if isinstance(self.partial, Full):
            return _first_defect(self.partial.pre_release) or _first_defect(
                self.partial.build_metadata
            )
        return None

    def __str__(self) -> str:
        return f"{self.operator.value}{self.partial}"


REQUIREMENT_SEPARATOR = ", "


@dataclass(frozen=True)
class RequirementCandidate:
    """
    An ordered list of comparators, all of which a version must satisfy.
    """

    comparators: tuple[Comparator, ...]

    validity: Validity = VALID
    """Whether this candidate is meant to parse."""

    @classmethod
    def from_comparators(cls, comparators: tuple[Comparator, ...]) -> RequirementCandidate:
        """
        Build a candidate whose validity is derived from its comparators.
        """
        for comparator in comparators:
            if comparator.defect is not None:
                return cls(comparators, Validity.invalid(comparator.defect))
        return cls(comparators)

    def __str__(self) -> str:
        return REQUIREMENT_SEPARATOR.join(str(c) for c in self.comparators)


@dataclass(frozen=True)
class CandidateString:
    """
    A version or requirement produced directly as text.
    """

    text: str
    validity: Validity = VALID

    def __str__(self) -> str:
        return self.text
