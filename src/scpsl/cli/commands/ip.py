"""The ``ip`` command: show the public IP the API sees."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Annotated

import typer

from scpsl.cli.utils.config_loader import load_client_config
from scpsl.cli.utils.output import console, print_error
from scpsl.client import IPAddress, ScpslHTTPClient
from scpsl.config import ClientConfig
from scpsl.exceptions import ScpslError


def ip(
    url: Annotated[
        str | None,
        typer.Option("--url", help="ip endpoint URL"),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to YAML configuration file",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
) -> None:
    """Show your public IP address as reported by the API.

    Examples:
        scpsl ip
    """
    config = load_client_config(config_path)
    try:
        config = config.with_overrides(ip_url=url)
    except ValueError as e:
        print_error(f"Invalid option: {e}")
        raise typer.Exit(1)

    try:
        address = asyncio.run(_fetch_ip(config))
    except ScpslError as e:
        print_error(f"Request failed: {e}")
        raise typer.Exit(1)

    console.print(str(address))


async def _fetch_ip(config: ClientConfig) -> IPAddress:
    async with ScpslHTTPClient.from_config(config) as client:
        return await client.get_ip(config.ip_url)
