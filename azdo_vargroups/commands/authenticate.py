"""Token check command."""

from __future__ import annotations

from azdo_vargroups.commands.base import Command, register_command


@register_command("authenticate")
class AuthenticateCommand(Command):
    """Check that the token can reach the account."""

    takes_project = False

    def run(self) -> int:
        # Authentication already happened before the command was built
        self.logger.info(f"Token is valid for {self.session.base_url}")
        return 0
