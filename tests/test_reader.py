"""Tests for listing variable groups."""

import sys
from pathlib import Path

import pytest
import responses

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from conftest import PROJECTS_URL, groups_url

from azdo_vargroups import TransportError, VariableGroupReader, authenticate


class TestListAll:
    """Tests for list() without a name filter."""

    @responses.activate
    def test_returns_groups_in_service_order(self, session, remote_groups):
        responses.add(responses.GET, groups_url(), json=remote_groups)

        groups = VariableGroupReader(session).list("Proj1")

        assert [g.name for g in groups] == ["Prod", "Dev"]
        assert [g.id for g in groups] == [7, 42]

    @responses.activate
    def test_parses_variables(self, session, remote_groups):
        responses.add(responses.GET, groups_url(), json=remote_groups)

        dev = VariableGroupReader(session).list("Proj1")[1]

        assert dev.variables["API_URL"].value == "https://dev.example.com"
        assert dev.variables["API_URL"].is_secret is False
        assert dev.variables["API_KEY"].value is None
        assert dev.variables["API_KEY"].is_secret is True

    @responses.activate
    def test_single_get_without_query(self, session, remote_groups):
        """One GET on the bare collection URL."""
        responses.add(responses.GET, groups_url(), json=remote_groups)

        VariableGroupReader(session).list("Proj1")

        assert len(responses.calls) == 1
        assert responses.calls[0].request.url == groups_url()

    @responses.activate
    def test_project_name_is_url_encoded(self, session):
        url = groups_url("My%20Project")
        responses.add(responses.GET, url, json={"value": []})

        assert VariableGroupReader(session).list("My Project") == []
        assert responses.calls[0].request.url == url

    @responses.activate
    def test_non_2xx_raises(self, session):
        responses.add(responses.GET, groups_url(), status=500, body="boom")

        with pytest.raises(TransportError) as exc_info:
            VariableGroupReader(session).list("Proj1")

        assert exc_info.value.status_code == 500


class TestListByName:
    """Tests for list() with names."""

    @responses.activate
    def test_results_follow_requested_order(self, session, remote_groups):
        """Order comes from names, not from the service response."""
        responses.add(responses.GET, groups_url(), json=remote_groups)

        groups = VariableGroupReader(session).list("Proj1", ["Dev", "Prod"])

        assert [g.name for g in groups] == ["Dev", "Prod"]

    @responses.activate
    def test_missing_name_is_not_an_error(self, session, dev_group):
        """Only 'A' exists: exactly one group, no error for 'B'."""
        responses.add(responses.GET, groups_url(), json={"value": [dict(dev_group, name="A")]})

        groups = VariableGroupReader(session).list("Proj1", ["A", "B"])

        assert len(groups) == 1
        assert groups[0].name == "A"

    @responses.activate
    def test_name_match_is_whole_name(self, session, dev_group):
        responses.add(
            responses.GET, groups_url(), json={"value": [dict(dev_group, name="Dev-Legacy"), dev_group]}
        )

        groups = VariableGroupReader(session).list("Proj1", ["Dev"])

        assert [g.name for g in groups] == ["Dev"]

    @responses.activate
    def test_name_match_ignores_case(self, session, remote_groups):
        responses.add(responses.GET, groups_url(), json=remote_groups)

        groups = VariableGroupReader(session).list("Proj1", ["dev"])

        assert [g.id for g in groups] == [42]

    @responses.activate
    def test_empty_names_returns_nothing(self, session, remote_groups):
        responses.add(responses.GET, groups_url(), json=remote_groups)

        assert VariableGroupReader(session).list("Proj1", []) == []

    @responses.activate
    def test_find(self, session, remote_groups):
        responses.add(responses.GET, groups_url(), json=remote_groups)
        reader = VariableGroupReader(session)

        assert reader.find("Proj1", "Prod").id == 7
        assert reader.find("Proj1", "Missing") is None


class TestSessionHeader:
    """list() reuses the header produced at authentication."""

    @responses.activate
    def test_list_uses_authenticated_header(self, remote_groups):
        responses.add(responses.GET, PROJECTS_URL, json=[{}])
        responses.add(responses.GET, groups_url(), json=remote_groups)

        session = authenticate("demo", "TOKEN")
        VariableGroupReader(session).list("Proj1")

        probe_header = responses.calls[0].request.headers["Authorization"]
        list_header = responses.calls[1].request.headers["Authorization"]
        assert list_header == probe_header == session.auth_header
