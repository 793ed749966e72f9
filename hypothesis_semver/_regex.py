"""
Strategies driven directly by the SemVer 2.0.0 regular expressions from
<https://semver.org/>.

The patterns differ from the published ones in two ways: they are ASCII
only (`[0-9]` rather than `\\d`), and they carry no `^` / `$` anchors, since
`st.from_regex(..., fullmatch=True)` anchors them itself.

Note that these generate MAJOR, MINOR and PATCH components of arbitrary
length, which many SemVer implementations reject once they exceed an
unsigned 64-bit integer. Prefer the structured strategies when that matters.
"""

from __future__ import annotations

from hypothesis import strategies as st

_NUMBER = r"(?:0|[1-9][0-9]*)"
_PRE_RELEASE_IDENTIFIER = rf"(?:{_NUMBER}|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"
_BUILD_IDENTIFIER = r"[0-9a-zA-Z-]+"

MAJOR_MINOR_PATCH_REGEX = rf"{_NUMBER}\.{_NUMBER}\.{_NUMBER}"
"""`MAJOR.MINOR.PATCH` alone."""

PRE_RELEASE_REGEX = rf"{_PRE_RELEASE_IDENTIFIER}(?:\.{_PRE_RELEASE_IDENTIFIER})*"
"""A pre-release, without its `-` prefix."""

BUILD_METADATA_REGEX = rf"{_BUILD_IDENTIFIER}(?:\.{_BUILD_IDENTIFIER})*"
"""Build metadata, without its `+` prefix."""

SEMVER_REGEX = (
    rf"{MAJOR_MINOR_PATCH_REGEX}(?:-{PRE_RELEASE_REGEX})?(?:\+{BUILD_METADATA_REGEX})?"
)
"""A whole SemVer 2.0.0 version."""


def semver_strings() -> st.SearchStrategy[str]:
    """
    Generate arbitrary SemVer 2.0.0 version strings straight from the
    regular expression.
    """
    return st.from_regex(SEMVER_REGEX, fullmatch=True)


def pre_release_strings() -> st.SearchStrategy[str]:
    """
    Generate pre-release strings (no `-` prefix).
    """
    return st.from_regex(PRE_RELEASE_REGEX, fullmatch=True)


def build_metadata_strings() -> st.SearchStrategy[str]:
    """
    Generate build-metadata strings (no `+` prefix).
    """
    return st.from_regex(BUILD_METADATA_REGEX, fullmatch=True)
