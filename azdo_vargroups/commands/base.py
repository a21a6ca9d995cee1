"""Base class and registry for CLI commands."""

from __future__ import annotations

import argparse
import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from azdo_vargroups.client import HttpTransport
    from azdo_vargroups.models import Session

# ---------------------------------------------------------------------------
# Command Registry
# ---------------------------------------------------------------------------

_command_registry: dict[str, type[Command]] = {}


def register_command(name: str):
    """Decorator to register a command class under a CLI subcommand name."""

    def decorator(cls):
        _command_registry[name] = cls
        cls.command_name = name
        return cls

    return decorator


def get_command_registry() -> dict[str, type[Command]]:
    """Get the command registry."""
    return _command_registry


# ---------------------------------------------------------------------------
# Command Base Class
# ---------------------------------------------------------------------------


class Command(ABC):
    """Base class for all commands. Each one runs against an authenticated session."""

    command_name: str = ""
    # Commands without a project argument (authenticate) set this to False
    takes_project: bool = True

    def __init__(self, session: Session, transport: HttpTransport, args: argparse.Namespace, out: TextIO):
        self.session = session
        self.transport = transport
        self.args = args
        self.out = out
        self.logger = logging.getLogger("azdo-vargroups")

    @staticmethod
    def add_arguments(parser: argparse.ArgumentParser) -> None:
        """Add command-specific CLI arguments."""

    @abstractmethod
    def run(self) -> int:
        """Run the command and return the process exit code."""
        ...
