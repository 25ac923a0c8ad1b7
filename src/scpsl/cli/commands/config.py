"""Config subcommands for configuration management."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich.syntax import Syntax

from scpsl.cli.utils.output import console, print_error, print_success, print_warning
from scpsl.config import ClientConfig

app = typer.Typer(no_args_is_help=True)

REDACTED = "***"


@app.command("validate")
def validate(
    config_path: Annotated[
        Path,
        typer.Argument(
            help="Path to configuration file to validate",
            exists=True,
            dir_okay=False,
        ),
    ],
) -> None:
    """Validate a client configuration file.

    Examples:
        scpsl config validate scpsl.yaml
    """
    try:
        with open(config_path) as f:
            raw_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        print_error(f"Invalid YAML syntax: {e}")
        raise typer.Exit(1)

    if raw_data is None:
        print_error("Configuration file is empty")
        raise typer.Exit(1)

    if not isinstance(raw_data, dict):
        print_error("Configuration must be a YAML mapping (dictionary)")
        raise typer.Exit(1)

    try:
        config = ClientConfig.from_dict(raw_data)
    except TypeError as e:
        print_error(f"Invalid configuration: {e}")
        raise typer.Exit(1)
    except ValueError as e:
        print_error(f"Invalid configuration value: {e}")
        raise typer.Exit(1)

    warnings: list[str] = []
    if config.account_id is None:
        warnings.append("account_id is not set - pass --id or set SCPSL_ACCOUNT_ID")
    if config.api_key is None:
        warnings.append("api_key is not set - pass --key or set SCPSL_API_KEY")
    if config.timeout > 60:
        warnings.append(f"timeout ({config.timeout}s) is unusually long")

    print_success(f"Configuration is valid: {config_path}")

    if warnings:
        console.print()
        for warning in warnings:
            print_warning(warning)


@app.command("generate")
def generate(
    output: Annotated[
        Path,
        typer.Argument(help="Output file path"),
    ],
    account_id: Annotated[
        int | None,
        typer.Option("--id", help="Account id to store in the file"),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite existing file"),
    ] = False,
) -> None:
    """Generate a configuration file with default endpoints.

    The API key is left out on purpose; supply it with SCPSL_API_KEY.

    Examples:
        scpsl config generate scpsl.yaml --id 12345
    """
    if output.exists() and not force:
        print_error(f"File already exists: {output}")
        console.print("Use --force to overwrite")
        raise typer.Exit(1)

    try:
        config = ClientConfig(account_id=account_id)
    except ValueError as e:
        print_error(f"Invalid configuration value: {e}")
        raise typer.Exit(1)

    config.to_yaml(output)
    print_success(f"Generated configuration: {output}")


@app.command("show")
def show(
    config_path: Annotated[
        Path,
        typer.Argument(
            help="Path to configuration file",
            exists=True,
            dir_okay=False,
        ),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format (yaml, json)"),
    ] = "yaml",
) -> None:
    """Display a configuration file with syntax highlighting.

    The API key is masked.

    Examples:
        scpsl config show scpsl.yaml
        scpsl config show scpsl.yaml --format json
    """
    try:
        config = ClientConfig.from_yaml(config_path)
    except Exception as e:
        print_error(f"Failed to load configuration: {e}")
        raise typer.Exit(1)

    data = config.to_dict()
    if data.get("api_key") is not None:
        data["api_key"] = REDACTED

    if output_format == "json":
        syntax = Syntax(json.dumps(data, indent=2), "json", theme="monokai")
    else:
        output = yaml.dump(data, default_flow_style=False, sort_keys=False)
        syntax = Syntax(output, "yaml", theme="monokai")

    console.print(syntax)
