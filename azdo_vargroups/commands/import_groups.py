"""Import command."""

from __future__ import annotations

import argparse
import json
import sys

from azdo_vargroups.commands.base import Command, register_command
from azdo_vargroups.errors import InvalidGroupError
from azdo_vargroups.writer import VariableGroupWriter


@register_command("import")
class ImportCommand(Command):
    """Create variable groups from JSON files, or update them with --update."""

    @staticmethod
    def add_arguments(parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "files", nargs="*", help="Exported group files; '-' or none reads a group or a list of groups from stdin"
        )
        parser.add_argument(
            "--update", action="store_true", help="Replace existing groups of the same name instead of creating"
        )

    def run(self) -> int:
        writer = VariableGroupWriter(self.session, self.transport)
        files = self.args.files

        if not files or files == ["-"]:
            results = writer.import_groups(self.args.project, self._read_stdin(), update=self.args.update)
        else:
            results = writer.import_files(self.args.project, files, update=self.args.update)

        verb = "updated" if self.args.update else "created"
        self.logger.info(f"Done: {len(results)} variable group(s) {verb} in '{self.args.project}'")
        return 0

    @staticmethod
    def _read_stdin() -> list:
        try:
            text = sys.stdin.read()
        except UnicodeDecodeError as e:
            raise InvalidGroupError(f"stdin is not valid UTF-8: {e}") from e
        try:
            data = json.loads(text.lstrip("\ufeff"))
        except ValueError as e:
            raise InvalidGroupError(f"stdin is not valid JSON: {e}") from e
        return data if isinstance(data, list) else [data]
