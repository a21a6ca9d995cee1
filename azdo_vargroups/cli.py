"""CLI entry point for azdo-vargroups."""

from __future__ import annotations

import argparse
import os
import sys

# Ensure all commands are registered by importing the commands package
import azdo_vargroups.commands  # noqa: F401
from azdo_vargroups.client import HttpTransport, authenticate
from azdo_vargroups.commands import get_command_registry
from azdo_vargroups.errors import AuthError, VarGroupError
from azdo_vargroups.logging_utils import setup_logging
from azdo_vargroups.models import DEFAULT_TIMEOUT


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="azdo-vargroups",
        description="List, export and import Azure DevOps variable groups.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment:
    AZDO_TOKEN   - Personal Access Token (required)
    AZDO_ACCOUNT - Account (organization) name, if --account is not given
    AZDO_URL     - Service URL (default: https://<account>.visualstudio.com)

Examples:
    # Check the token
    azdo-vargroups --account myorg authenticate

    # Back up every group of a project
    azdo-vargroups --account myorg export MyProject --out-dir backup/

    # Copy one group to another project
    azdo-vargroups export Proj1 --name Dev --out-dir groups/
    azdo-vargroups import Proj2 groups/Dev.json

    # Push local edits back over the existing group
    azdo-vargroups import Proj1 groups/Dev.json --update
""",
    )
    parser.add_argument(
        "--json", action="store_true", dest="json_output", help="Output log and results as JSON lines (to stderr)"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--account", default=None, help="Account name (default: from AZDO_ACCOUNT env)")
    parser.add_argument(
        "--base-url", default=None, help="Service URL (default: from AZDO_URL env or https://<account>.visualstudio.com)"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f"Request timeout in seconds (default: {DEFAULT_TIMEOUT:g})",
    )

    subparsers = parser.add_subparsers(dest="command", required=True, help="Command to run")

    registry = get_command_registry()
    for name, cmd_cls in sorted(registry.items()):
        sub = subparsers.add_parser(name, help=cmd_cls.__doc__)
        if cmd_cls.takes_project:
            sub.add_argument("project", help="Project name")
        cmd_cls.add_arguments(sub)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    account = args.account or os.environ.get("AZDO_ACCOUNT")
    base_url = args.base_url or os.environ.get("AZDO_URL")
    if not account and not base_url:
        print("ERROR: set --account, AZDO_ACCOUNT or AZDO_URL.", file=sys.stderr)
        return 1

    token = os.environ.get("AZDO_TOKEN")
    if not token:
        print("ERROR: AZDO_TOKEN environment variable is not set.", file=sys.stderr)
        return 1

    logger = setup_logging(json_mode=args.json_output, verbose=args.verbose)
    transport = HttpTransport(timeout=args.timeout)

    try:
        session = authenticate(account or "", token, base_url=base_url, transport=transport)
    except AuthError as e:
        logger.error(f"Authentication failed: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130

    command = get_command_registry()[args.command](session=session, transport=transport, args=args, out=sys.stdout)

    try:
        return command.run()
    except VarGroupError as e:
        logger.error(f"{args.command} failed: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
