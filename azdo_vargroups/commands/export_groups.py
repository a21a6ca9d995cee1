"""Export command."""

from __future__ import annotations

import argparse
import json

from azdo_vargroups.commands.base import Command, register_command
from azdo_vargroups.writer import VariableGroupWriter


@register_command("export")
class ExportCommand(Command):
    """Export variable groups to JSON files or stdout."""

    @staticmethod
    def add_arguments(parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--name", dest="names", action="append", default=None, help="Only this group (repeatable)"
        )
        parser.add_argument(
            "--out-dir", default=None, help="Write one <name>.json per group here instead of printing to stdout"
        )

    def run(self) -> int:
        writer = VariableGroupWriter(self.session, self.transport)
        serialized = writer.export(self.args.project, names=self.args.names, destination_dir=self.args.out_dir)
        if self.args.out_dir is None:
            print(json.dumps([json.loads(s) for s in serialized], indent=2, ensure_ascii=False), file=self.out)
        self.logger.info(f"Exported {len(serialized)} variable group(s) from '{self.args.project}'")
        return 0
