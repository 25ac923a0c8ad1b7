"""Shared configuration loading for CLI commands."""

from collections.abc import Mapping
from pathlib import Path

import typer
import yaml

from scpsl.cli.utils.output import print_error
from scpsl.config import ClientConfig


def load_client_config(
    config_path: Path | None,
    environ: Mapping[str, str] | None = None,
) -> ClientConfig:
    """Load the config file (if any), then apply ``SCPSL_*`` environment variables.

    Exits with code 1 on an unreadable or invalid configuration.
    """
    try:
        config = ClientConfig.from_yaml(config_path) if config_path else ClientConfig()
        return config.with_env(environ)
    except yaml.YAMLError as e:
        print_error(f"Invalid YAML syntax: {e}")
        raise typer.Exit(1)
    except (TypeError, ValueError) as e:
        print_error(f"Invalid configuration: {e}")
        raise typer.Exit(1)
    except OSError as e:
        print_error(f"Failed to read configuration: {e}")
        raise typer.Exit(1)
