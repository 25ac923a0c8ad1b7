"""Entry point for running the CLI as a module.

Usage:
    python -m scpsl.cli --help
"""

from scpsl.cli.main import app

if __name__ == "__main__":
    app()
