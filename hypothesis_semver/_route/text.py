"""
The string route: candidates are built directly as text, which allows
deliberately malformed output.
"""

from __future__ import annotations

from hypothesis import strategies as st

from hypothesis_semver._assemble import invalid_version_strings, version_strings
from hypothesis_semver._config import WeightTable
from hypothesis_semver._requirement import invalid_requirement_strings, requirement_strings
from hypothesis_semver._types import CandidateString

from .interface import GenerationRoute


class StringRoute(GenerationRoute):
    """
    Generates `CandidateString`s.
    """

    name = "string"

    def valid_versions(self, table: WeightTable) -> st.SearchStrategy[CandidateString]:
        return version_strings(table)

    def invalid_versions(self, table: WeightTable) -> st.SearchStrategy[CandidateString]:
        return invalid_version_strings(table)

    def valid_requirements(self, table: WeightTable) -> st.SearchStrategy[CandidateString]:
        return requirement_strings(table)

    def invalid_requirements(self, table: WeightTable) -> st.SearchStrategy[CandidateString]:
        return invalid_requirement_strings(table)
