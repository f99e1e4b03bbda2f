"""CLI application setup using Typer.

Provides the data-validator command-line interface.
"""

from data_validator.cli.main import app

__all__ = ["app"]
