"""Listing variable groups of a project."""

from __future__ import annotations

import logging
import urllib.parse
from typing import Sequence

from azdo_vargroups.client import HttpTransport
from azdo_vargroups.models import VARIABLE_GROUPS_ENDPOINT, ApiRequest, Session, VariableGroup


def collection_url(session: Session, project_name: str) -> str:
    """URL of the variable group collection of a project."""
    project = urllib.parse.quote(project_name, safe="")
    return f"{session.base_url}/{project}{VARIABLE_GROUPS_ENDPOINT}"


class VariableGroupReader:
    """Reads variable groups from a project."""

    def __init__(self, session: Session, transport: HttpTransport | None = None):
        self.session = session
        self.transport = transport or HttpTransport()
        self.logger = logging.getLogger("azdo-vargroups")

    def list(self, project_name: str, names: Sequence[str] | None = None) -> list[VariableGroup]:
        """
        List the variable groups of a project.

        Without ``names`` the groups come back in service order. With ``names``
        the result is ordered by ``names``: the matches for the first name,
        then those for the second, and so on. Names are compared
        case-insensitively, as the service itself does; a name with no match
        contributes nothing.
        """
        request = ApiRequest(method="GET", url=collection_url(self.session, project_name), headers=self.session.headers)
        data = self.transport.send(request) or {}
        groups = [VariableGroup.from_dict(item) for item in data.get("value", [])]
        self.logger.debug(f"Project '{project_name}' has {len(groups)} variable group(s)")

        if names is None:
            return groups

        selected: list[VariableGroup] = []
        for name in names:
            wanted = name.casefold()
            matches = [g for g in groups if g.name.casefold() == wanted]
            if not matches:
                self.logger.debug(f"No variable group named '{name}' in '{project_name}'")
            selected.extend(matches)
        return selected

    def find(self, project_name: str, name: str) -> VariableGroup | None:
        """Return the first group called ``name``, or None."""
        matches = self.list(project_name, [name])
        return matches[0] if matches else None
