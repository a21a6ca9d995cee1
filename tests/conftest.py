"""Shared test fixtures for azdo-vargroups tests."""

import sys
from pathlib import Path
from typing import Any

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from azdo_vargroups.client import HttpTransport, encode_auth_header
from azdo_vargroups.models import Session

# Constants for use in tests - pytest makes conftest.py fixtures available,
# but these constants need to be imported directly from tests
MOCK_BASE_URL = "https://demo.visualstudio.com"
MOCK_TOKEN = "test-token"
PROJECTS_URL = f"{MOCK_BASE_URL}/_apis/projects?api-version=4.1"


def groups_url(project: str = "Proj1") -> str:
    return f"{MOCK_BASE_URL}/{project}/_apis/distributedtask/variablegroups"


@pytest.fixture
def session() -> Session:
    """Session as authenticate() would build it for MOCK_TOKEN."""
    return Session(base_url=MOCK_BASE_URL, auth_header=encode_auth_header(MOCK_TOKEN))


@pytest.fixture
def transport() -> HttpTransport:
    return HttpTransport(timeout=5)


@pytest.fixture
def dev_group() -> dict[str, Any]:
    """Variable group as returned by the service."""
    return {
        "id": 42,
        "name": "Dev",
        "type": "Vsts",
        "description": "Development settings",
        "variables": {
            "API_URL": {"value": "https://dev.example.com", "isSecret": False},
            "API_KEY": {"value": None, "isSecret": True},
        },
    }


@pytest.fixture
def prod_group() -> dict[str, Any]:
    return {
        "id": 7,
        "name": "Prod",
        "type": "Vsts",
        "variables": {
            "API_URL": {"value": "https://example.com", "isSecret": False},
        },
    }


@pytest.fixture
def remote_groups(dev_group, prod_group) -> dict[str, Any]:
    """Collection response with Prod first, Dev second."""
    return {"count": 2, "value": [prod_group, dev_group]}
