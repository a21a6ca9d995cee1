"""Commands for azdo-vargroups."""

# Import all commands to register them
from azdo_vargroups.commands.authenticate import AuthenticateCommand
from azdo_vargroups.commands.base import Command, get_command_registry, register_command
from azdo_vargroups.commands.export_groups import ExportCommand
from azdo_vargroups.commands.import_groups import ImportCommand
from azdo_vargroups.commands.list_groups import ListCommand

__all__ = [
    "Command",
    "register_command",
    "get_command_registry",
    "AuthenticateCommand",
    "ListCommand",
    "ExportCommand",
    "ImportCommand",
]
