"""Exception types for azdo-vargroups."""

from __future__ import annotations

from pathlib import Path
from typing import Any


class VarGroupError(Exception):
    """Base error for everything raised by azdo-vargroups."""


class AuthError(VarGroupError):
    """The token or account was rejected during authentication."""


class TransportError(VarGroupError):
    """A request failed on the network or came back with a non-2xx status."""

    def __init__(
        self,
        message: str,
        method: str = "",
        url: str = "",
        status_code: int | None = None,
        body: Any = None,
    ):
        super().__init__(message)
        self.method = method
        self.url = url
        self.status_code = status_code
        self.body = body

    def __str__(self) -> str:
        msg = super().__str__()
        if self.body:
            msg = f"{msg}: {self.body}"
        return msg


class VariableGroupNotFoundError(TransportError):
    """An update was requested for a group name the project does not have."""

    def __init__(self, project: str, name: str, url: str = ""):
        super().__init__(
            f"Variable group '{name}' not found in project '{project}'",
            method="PUT",
            url=url,
            status_code=404,
        )
        self.project = project
        self.name = name


class GroupFileError(VarGroupError, OSError):
    """Reading or writing a group file failed."""

    def __init__(self, message: str, path: Path | str | None = None):
        super().__init__(message)
        self.path = path


class ExportWriteError(GroupFileError):
    """One or more files of an export batch could not be written."""

    def __init__(self, failures: list[tuple[Path, Exception]], serialized: list[str]):
        paths = ", ".join(str(p) for p, _ in failures)
        super().__init__(f"Failed to write {len(failures)} export file(s): {paths}")
        self.failures = failures
        self.serialized = serialized


class InvalidGroupError(VarGroupError, ValueError):
    """Input could not be parsed as a variable group."""
