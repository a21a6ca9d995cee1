"""Data models and constants for azdo-vargroups."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

DEFAULT_BASE_URL_TEMPLATE = "https://{account}.visualstudio.com"
PROJECTS_ENDPOINT = "/_apis/projects?api-version=4.1"
VARIABLE_GROUPS_ENDPOINT = "/_apis/distributedtask/variablegroups"
WRITE_API_VERSION = "4.1-preview.1"

DEFAULT_TIMEOUT = 30.0  # seconds
ERROR_BODY_LIMIT = 500


# ---------------------------------------------------------------------------
# Data Classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Session:
    """Authenticated connection context for one account."""

    base_url: str
    auth_header: str

    @property
    def headers(self) -> dict[str, str]:
        return {"Authorization": self.auth_header}


@dataclass(frozen=True)
class ApiRequest:
    """A single HTTP call, fully described before it is sent."""

    method: str
    url: str
    headers: dict[str, str]
    body: Any = None


@dataclass
class Variable:
    value: str | None = None
    is_secret: bool = False
    # Other per-variable fields (enabled, contentType, expires on Key Vault groups)
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> Variable:
        if not isinstance(data, dict):
            # Tolerate the shorthand {"NAME": "value"}
            return cls(value=None if data is None else str(data))
        extra = {k: v for k, v in data.items() if k not in ("value", "isSecret")}
        return cls(value=data.get("value"), is_secret=bool(data.get("isSecret", False)), extra=extra)

    def to_dict(self) -> dict:
        d = {"value": self.value, "isSecret": self.is_secret}
        d.update(self.extra)
        return d


@dataclass
class VariableGroup:
    """
    A named, project-scoped collection of variables.

    Fields the service returns beyond id/name/variables (type, description,
    createdBy, ...) are kept in ``extra`` so that exporting and re-reading a
    group loses nothing.
    """

    name: str
    variables: dict[str, Variable] = field(default_factory=dict)
    id: int | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> VariableGroup:
        extra = {k: v for k, v in data.items() if k not in ("id", "name", "variables")}
        variables = {key: Variable.from_dict(val) for key, val in (data.get("variables") or {}).items()}
        return cls(name=data["name"], variables=variables, id=data.get("id"), extra=extra)

    def to_dict(self) -> dict:
        d: dict[str, Any] = {}
        if self.id is not None:
            d["id"] = self.id
        d["name"] = self.name
        d["variables"] = {key: var.to_dict() for key, var in self.variables.items()}
        d.update(self.extra)
        return d


@dataclass
class WriteResult:
    """Result of a single create or update against the service."""

    project: str
    group_name: str
    group_id: int | None
    method: str
    url: str
    action: str  # "created", "updated"
    response: Any = None

    def to_dict(self) -> dict:
        return {
            "project": self.project,
            "group_name": self.group_name,
            "group_id": self.group_id,
            "method": self.method,
            "url": self.url,
            "action": self.action,
        }
