"""The ``servers`` command: query serverinfo for an account."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Annotated

import typer

from scpsl.cli.utils.config_loader import load_client_config
from scpsl.cli.utils.output import (
    console,
    create_server_detail_panel,
    create_servers_table,
    print_error,
)
from scpsl.client import ScpslHTTPClient
from scpsl.config import ClientConfig
from scpsl.exceptions import InvalidRequestError, ScpslError, ScpslHTTPStatusError
from scpsl.models import RawResponse, RequestParameters, response_from_raw


def servers(
    account_id: Annotated[
        int | None,
        typer.Option("--id", help="Account id (default: SCPSL_ACCOUNT_ID or config)"),
    ] = None,
    api_key: Annotated[
        str | None,
        typer.Option("--key", help="API key (default: SCPSL_API_KEY or config)"),
    ] = None,
    url: Annotated[
        str | None,
        typer.Option("--url", help="serverinfo endpoint URL"),
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
    players: Annotated[
        bool, typer.Option("--players", help="Include player counts")
    ] = False,
    player_list: Annotated[
        bool, typer.Option("--list", help="Include the list of connected players")
    ] = False,
    info: Annotated[bool, typer.Option("--info", help="Include server info text")] = False,
    last_online: Annotated[
        bool, typer.Option("--last-online", help="Include last online date")
    ] = False,
    pastebin: Annotated[
        bool, typer.Option("--pastebin", help="Include pastebin id")
    ] = False,
    game_version: Annotated[
        bool, typer.Option("--game-version", help="Include game version")
    ] = False,
    flags: Annotated[
        bool, typer.Option("--flags", help="Include server flags (FF, WL, modded...)")
    ] = False,
    nicknames: Annotated[
        bool, typer.Option("--nicknames", help="Include player nicknames")
    ] = False,
    online: Annotated[
        bool, typer.Option("--online", help="Include online status")
    ] = False,
    output_json: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print the decoded response as JSON in the API's field layout",
        ),
    ] = False,
) -> None:
    """Show info about the servers of an account.

    Examples:
        scpsl servers --id 12345 --key abc --players
        scpsl servers --config scpsl.yaml --players --list --nicknames
        scpsl servers --players --json
    """
    config = load_client_config(config_path)
    try:
        config = config.with_overrides(
            account_id=account_id, api_key=api_key, server_info_url=url
        )
    except ValueError as e:
        print_error(f"Invalid option: {e}")
        raise typer.Exit(1)

    try:
        parameters = (
            config.request_builder()
            .players(players)
            .list(player_list)
            .info(info)
            .last_online(last_online)
            .pastebin(pastebin)
            .version(game_version)
            .flags(flags)
            .nicknames(nicknames)
            .online(online)
            .build()
        )
    except InvalidRequestError as e:
        print_error(str(e))
        console.print(
            "Pass --id and --key, set SCPSL_ACCOUNT_ID and SCPSL_API_KEY, "
            "or use --config"
        )
        raise typer.Exit(1)

    try:
        raw = asyncio.run(_fetch_raw_server_info(config, parameters))
    except ScpslHTTPStatusError as e:
        print_error(f"{e} {e.body}".strip())
        raise typer.Exit(1)
    except ScpslError as e:
        print_error(f"Request failed: {e}")
        raise typer.Exit(1)

    if output_json:
        console.print_json(data=raw.to_wire())

    try:
        response = response_from_raw(raw)
    except ScpslError as e:
        print_error(f"Could not decode response: {e}")
        raise typer.Exit(1)

    if not response.is_success:
        print_error(f"API error: {response.error}")
        raise typer.Exit(1)

    if output_json:
        return

    console.print(create_servers_table(response))

    if player_list or info or pastebin:
        for server in response.servers:
            console.print(create_server_detail_panel(server))

    if players:
        console.print(f"[bold]Total players:[/bold] {response.total_players}")
    console.print(f"[dim]Cooldown: {response.cooldown}s[/dim]")


async def _fetch_raw_server_info(
    config: ClientConfig,
    parameters: RequestParameters,
) -> RawResponse:
    async with ScpslHTTPClient.from_config(config) as client:
        return await client.get_raw_server_info(parameters)
