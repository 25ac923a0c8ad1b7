"""Command line interface for the SCP: Secret Laboratory API client.

Usage:
    scpsl --help
    scpsl servers --id 12345 --key abc --players
    scpsl ip
    scpsl config generate scpsl.yaml --id 12345
"""

from scpsl.cli.main import app

__all__ = ["app"]
