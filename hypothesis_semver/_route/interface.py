"""
Interfaces for generation routes, i.e. the two ways of producing SemVer
candidates: as structured values, or directly as strings.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol, TypeVar

from hypothesis import strategies as st

from hypothesis_semver._config import WeightTable
from hypothesis_semver._types import Validity
from hypothesis_semver._util import draw_probability


class Candidate(Protocol):
    """
    Anything a route produces: it renders with `str()` and knows whether it
    is meant to parse.
    """

    validity: Validity

    def __str__(self) -> str:  # pragma: no cover
        ...


C = TypeVar("C")


class GenerationRoute(ABC):
    """
    Represents an abstract route for generating SemVer candidates.

    Both concrete routes produce values with a `validity` label that render
    to strings with `str()`, so assertions can be written once and run
    against either route.
    """

    name: str

    @abstractmethod
    def valid_versions(self, table: WeightTable) -> st.SearchStrategy[Candidate]:  # pragma: no cover
        """
        Return a strategy of versions that are guaranteed to parse.
        """
        raise NotImplementedError

    @abstractmethod
    def invalid_versions(self, table: WeightTable) -> st.SearchStrategy[Candidate]:  # pragma: no cover
        """
        Return a strategy of versions that are guaranteed not to parse.
        """
        raise NotImplementedError

    @abstractmethod
    def valid_requirements(self, table: WeightTable) -> st.SearchStrategy[Candidate]:  # pragma: no cover
        """
        Return a strategy of version requirements that are guaranteed to parse.
        """
        raise NotImplementedError

    @abstractmethod
    def invalid_requirements(self, table: WeightTable) -> st.SearchStrategy[Candidate]:  # pragma: no cover
        """
        Return a strategy of version requirements that are guaranteed not to
        parse.
        """
        raise NotImplementedError

    def versions(self, table: WeightTable) -> st.SearchStrategy[Candidate]:
        """
        Return a strategy of versions, invalid with probability
        `table.invalid_probability`.
        """
        return _mixed(table, self.valid_versions(table), self.invalid_versions(table))

    def requirements(self, table: WeightTable) -> st.SearchStrategy[Candidate]:
        """
        Return a strategy of version requirements, invalid with probability
        `table.invalid_probability`.
        """
        return _mixed(table, self.valid_requirements(table), self.invalid_requirements(table))

    def version_lists(
        self, table: WeightTable, min_size: int = 1, max_size: int = 32
    ) -> st.SearchStrategy[list[Candidate]]:
        """
        Return a strategy of lists of valid versions.
        """
        return st.lists(self.valid_versions(table), min_size=min_size, max_size=max_size)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


@st.composite
def _mixed(
    draw: st.DrawFn,
    table: WeightTable,
    valid: st.SearchStrategy[C],
    invalid: st.SearchStrategy[C],
) -> C:
    if draw_probability(draw, table.invalid_probability):
        return draw(invalid)
    return draw(valid)
