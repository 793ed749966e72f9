"""Tests for the structured candidate types."""

import icontract
import pytest

from hypothesis_semver import (
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
    RequirementCandidate,
    SegmentKind,
    Validity,
    VersionCandidate,
    Wildcard,
    parse_requirement,
    parse_version,
)
from hypothesis_semver._types import has_leading_zero


def _alpha(text, field=Field.PRE_RELEASE):
    return IdentifierSegment(text, SegmentKind.ALPHANUMERIC, field)


def _num(text, field=Field.PRE_RELEASE):
    return IdentifierSegment(text, SegmentKind.NUMERIC, field)


class TestValidity:
    def test_valid(self):
        assert VALID.is_valid
        assert str(VALID) == "valid"

    def test_invalid(self):
        validity = Validity.invalid(Defect.LEADING_ZERO)
        assert not validity.is_valid
        assert str(validity) == "invalid(leading-zero)"


class TestField:
    def test_markers(self):
        assert Field.PRE_RELEASE.marker == "-"
        assert Field.BUILD_METADATA.marker == "+"


class TestIdentifierSegment:
    @pytest.mark.parametrize("text", ["0", "1", "10", "123"])
    def test_numeric(self, text):
        assert str(_num(text)) == text

    def test_build_metadata_allows_leading_zero(self):
        assert _num("007", Field.BUILD_METADATA).text == "007"

    @pytest.mark.parametrize(
        ("text", "kind"),
        [
            ("01", SegmentKind.NUMERIC),
            ("1a", SegmentKind.NUMERIC),
            ("123", SegmentKind.ALPHANUMERIC),
            ("", SegmentKind.ALPHANUMERIC),
            ("a_b", SegmentKind.ALPHANUMERIC),
        ],
    )
    def test_malformed_valid_segment_rejected(self, text, kind):
        with pytest.raises(icontract.ViolationError):
            IdentifierSegment(text, kind)

    def test_invalid_segment_may_be_malformed(self):
        segment = IdentifierSegment(
            "01", SegmentKind.NUMERIC, validity=Validity.invalid(Defect.LEADING_ZERO)
        )
        assert segment.text == "01"

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("0", False), ("01", True), ("00", True), ("10", False), ("0a", False)],
    )
    def test_has_leading_zero(self, text, expected):
        assert has_leading_zero(text) is expected


class TestVersionCandidate:
    def test_render_with_pre_release(self):
        version = VersionCandidate(1, 2, 3, (_alpha("alpha"), _num("1")))
        assert str(version) == "1.2.3-alpha.1"
        assert version.core == "1.2.3"

    def test_render_with_build_metadata(self):
        version = VersionCandidate(
            1, 0, 0, (), (_alpha("build", Field.BUILD_METADATA), _num("001", Field.BUILD_METADATA))
        )
        assert str(version) == "1.0.0+build.001"

    def test_render_bare(self):
        assert str(VersionCandidate(0, 0, 0)) == "0.0.0"

    def test_rendered_version_parses(self):
        version = VersionCandidate(
            1, 2, 3, (_alpha("rc"), _num("2")), (_alpha("sha-1", Field.BUILD_METADATA),)
        )
        parsed = parse_version(str(version))
        assert parsed.prerelease == ("rc", "2")
        assert parsed.build == ("sha-1",)

    def test_from_parts_valid(self):
        version = VersionCandidate.from_parts(1, 2, 3, (_alpha("beta"),))
        assert version.validity == VALID

    def test_from_parts_takes_segment_defect(self):
        bad = IdentifierSegment(
            "", SegmentKind.ALPHANUMERIC, validity=Validity.invalid(Defect.EMPTY_IDENTIFIER)
        )
        version = VersionCandidate.from_parts(1, 2, 3, (_alpha("a"), bad))
        assert version.validity.defect is Defect.EMPTY_IDENTIFIER
        assert str(version) == "1.2.3-a."


class TestPartials:
    def test_wildcard(self):
        assert str(Wildcard()) == "*"

    def test_major(self):
        assert str(Major(1)) == "1"
        assert str(Major(1, star=True)) == "1.*.*"

    def test_major_minor(self):
        assert str(MajorMinor(1, 2)) == "1.2"
        assert str(MajorMinor(1, 2, star=True)) == "1.2.*"

    def test_full(self):
        full = Full(1, 2, 3, (_alpha("pre"),), (_alpha("meta", Field.BUILD_METADATA),))
        assert str(full) == "1.2.3-pre+meta"


class TestComparator:
    def test_render(self):
        assert str(Comparator(Operator.GTE, MajorMinor(2, 0))) == ">=2.0"
        assert str(Comparator(Operator.NONE, Major(3))) == "3"

    def test_defect(self):
        assert Comparator(Operator.CARET, Full(1, 2, 3)).defect is None
        bad = IdentifierSegment(
            "a!", SegmentKind.ALPHANUMERIC, validity=Validity.invalid(Defect.ILLEGAL_CHARACTER)
        )
        assert Comparator(Operator.LT, Full(1, 2, 3, (bad,))).defect is Defect.ILLEGAL_CHARACTER


class TestRequirementCandidate:
    def test_single_caret(self):
        requirement = RequirementCandidate((Comparator(Operator.CARET, Full(1, 2, 3)),))
        assert str(requirement) == "^1.2.3"

        parsed = parse_requirement(str(requirement))
        assert parsed.comparators == ("^1.2.3",)

    def test_list(self):
        requirement = RequirementCandidate(
            (
                Comparator(Operator.GTE, Full(1, 2, 0)),
                Comparator(Operator.LT, Major(2)),
            )
        )
        assert str(requirement) == ">=1.2.0, <2"
        assert parse_requirement(str(requirement)).comparators == (">=1.2.0", "<2")

    def test_from_comparators(self):
        bad = IdentifierSegment(
            "x y", SegmentKind.ALPHANUMERIC, validity=Validity.invalid(Defect.ILLEGAL_CHARACTER)
        )
        requirement = RequirementCandidate.from_comparators(
            (Comparator(Operator.NONE, Major(1)), Comparator(Operator.EQ, Full(1, 0, 0, (bad,))))
        )
        assert requirement.validity.defect is Defect.ILLEGAL_CHARACTER


class TestCandidateString:
    def test_defaults_to_valid(self):
        candidate = CandidateString("1.0.0")
        assert candidate.validity.is_valid
        assert str(candidate) == "1.0.0"
