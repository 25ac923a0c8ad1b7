"""Main CLI application and entry point.

This module defines the main Typer application and registers the
``servers`` and ``ip`` commands and the ``config`` command group.
"""

import logging
from typing import Annotated

import typer

from scpsl.cli.commands import config as config_commands
from scpsl.cli.commands import ip as ip_commands
from scpsl.cli.commands import servers as servers_commands

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

app = typer.Typer(
    name="scpsl",
    help="Command line client for the SCP: Secret Laboratory API",
    no_args_is_help=True,
    pretty_exceptions_enable=True,
)

app.command("servers")(servers_commands.servers)
app.command("ip")(ip_commands.ip)
app.add_typer(config_commands.app, name="config", help="Configuration utilities")


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """SCP: Secret Laboratory API client.

    Query your servers with `servers`, check your public IP with `ip`,
    and manage configuration files with `config`.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
    )


if __name__ == "__main__":
    app()
