"""
The structural route: candidates are built as native `VersionCandidate` and
`RequirementCandidate` values.

This route is cheaper than the string route, but cannot express
string-level corruption such as a missing separator; its invalid samples
carry a bad identifier instead.
"""

from __future__ import annotations

from hypothesis import strategies as st

from hypothesis_semver._assemble import invalid_version_candidates, version_candidates
from hypothesis_semver._config import WeightTable
from hypothesis_semver._requirement import (
    invalid_requirement_candidates,
    requirement_candidates,
)
from hypothesis_semver._types import RequirementCandidate, VersionCandidate

from .interface import GenerationRoute


class StructuralRoute(GenerationRoute):
    """
    Generates structured candidates.
    """

    name = "structural"

    def valid_versions(self, table: WeightTable) -> st.SearchStrategy[VersionCandidate]:
        return version_candidates(table)

    def invalid_versions(self, table: WeightTable) -> st.SearchStrategy[VersionCandidate]:
        return invalid_version_candidates(table)

    def valid_requirements(self, table: WeightTable) -> st.SearchStrategy[RequirementCandidate]:
        return requirement_candidates(table)

    def invalid_requirements(
        self, table: WeightTable
    ) -> st.SearchStrategy[RequirementCandidate]:
        return invalid_requirement_candidates(table)
