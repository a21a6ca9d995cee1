"""
azdo-vargroups: list, export and import Azure DevOps variable groups.

Authenticates with a Personal Access Token, then moves variable groups between
projects or to and from JSON files on disk.

Environment:
    AZDO_TOKEN   - Personal Access Token (required by the CLI)
    AZDO_ACCOUNT - Account (organization) name
    AZDO_URL     - Service URL (default: https://<account>.visualstudio.com)
"""

from azdo_vargroups.client import HttpTransport, authenticate
from azdo_vargroups.errors import (
    AuthError,
    ExportWriteError,
    GroupFileError,
    InvalidGroupError,
    TransportError,
    VarGroupError,
    VariableGroupNotFoundError,
)
from azdo_vargroups.models import ApiRequest, Session, Variable, VariableGroup, WriteResult
from azdo_vargroups.reader import VariableGroupReader
from azdo_vargroups.writer import VariableGroupWriter

__version__ = "0.1.0"
__all__ = [
    "__version__",
    "authenticate",
    "HttpTransport",
    "Session",
    "ApiRequest",
    "Variable",
    "VariableGroup",
    "WriteResult",
    "VariableGroupReader",
    "VariableGroupWriter",
    "VarGroupError",
    "AuthError",
    "TransportError",
    "VariableGroupNotFoundError",
    "GroupFileError",
    "ExportWriteError",
    "InvalidGroupError",
]
