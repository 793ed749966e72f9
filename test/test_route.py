"""Tests that run once per generation route."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from hypothesis_semver import (
    ROUTES,
    CandidateString,
    RequirementCandidate,
    StringRoute,
    StructuralRoute,
    VersionCandidate,
    WeightTable,
    is_valid_requirement,
    is_valid_version,
    parse_version,
)

TABLE = WeightTable()
NEVER_INVALID = WeightTable(invalid_probability=0.0)
ALWAYS_INVALID = WeightTable(invalid_probability=1.0)

routes = pytest.mark.parametrize("route", ROUTES, ids=lambda route: route.name)


class TestRouteTypes:
    def test_names(self):
        assert [route.name for route in ROUTES] == ["structural", "string"]
        assert repr(ROUTES[0]) == "StructuralRoute()"

    @given(st.data())
    def test_structural_types(self, data):
        route = StructuralRoute()
        assert isinstance(data.draw(route.valid_versions(TABLE)), VersionCandidate)
        assert isinstance(data.draw(route.valid_requirements(TABLE)), RequirementCandidate)

    @given(st.data())
    def test_string_types(self, data):
        route = StringRoute()
        assert isinstance(data.draw(route.invalid_versions(TABLE)), CandidateString)
        assert isinstance(data.draw(route.invalid_requirements(TABLE)), CandidateString)


@routes
class TestRoutes:
    @given(data=st.data())
    @settings(max_examples=200)
    def test_versions_agree_with_grammar(self, route, data):
        candidate = data.draw(route.versions(TABLE))
        assert is_valid_version(str(candidate)) == candidate.validity.is_valid, candidate

    @given(data=st.data())
    @settings(max_examples=200)
    def test_requirements_agree_with_grammar(self, route, data):
        candidate = data.draw(route.requirements(TABLE))
        assert is_valid_requirement(str(candidate)) == candidate.validity.is_valid, candidate

    @given(data=st.data())
    def test_never_invalid(self, route, data):
        assert data.draw(route.versions(NEVER_INVALID)).validity.is_valid
        assert data.draw(route.requirements(NEVER_INVALID)).validity.is_valid

    @given(data=st.data())
    def test_always_invalid(self, route, data):
        assert not data.draw(route.versions(ALWAYS_INVALID)).validity.is_valid
        assert not data.draw(route.requirements(ALWAYS_INVALID)).validity.is_valid

    @given(data=st.data())
    def test_version_lists(self, route, data):
        versions = data.draw(route.version_lists(TABLE, min_size=2, max_size=5))
        assert 2 <= len(versions) <= 5
        assert all(parse_version(str(v)) for v in versions)
