"""List command."""

from __future__ import annotations

import argparse
import json

from azdo_vargroups.commands.base import Command, register_command
from azdo_vargroups.reader import VariableGroupReader


@register_command("list")
class ListCommand(Command):
    """List the variable groups of a project."""

    @staticmethod
    def add_arguments(parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--name", dest="names", action="append", default=None, help="Only this group (repeatable)"
        )
        parser.add_argument("--full", action="store_true", help="Print each group in full instead of a summary")

    def run(self) -> int:
        reader = VariableGroupReader(self.session, self.transport)
        groups = reader.list(self.args.project, self.args.names)
        for group in groups:
            if self.args.full:
                line = group.to_dict()
            else:
                line = {"id": group.id, "name": group.name, "variables": len(group.variables)}
            print(json.dumps(line, ensure_ascii=False), file=self.out)
        self.logger.info(f"{len(groups)} variable group(s) in '{self.args.project}'")
        return 0
