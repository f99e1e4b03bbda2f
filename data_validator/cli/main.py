"""CLI entry point.

Validates one or more YAML collection files against a YAML schema:

    data-validator SCHEMA FILE [FILE...]

Nothing is printed when every file is valid. Otherwise each report is
printed and the exit status is 1.
"""

# Configure logging early before other imports
import data_validator.logging_config  # noqa: F401

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from data_validator.exceptions import SchemaError, ValidationError
from data_validator.logging_config import configure_logging
from data_validator.schema import SchemaValidator

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="data-validator",
    help="Validate YAML files according to a schema (also in YAML).",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

console = Console()


def _print_report(message: str) -> None:
    """Print report text verbatim (YAML brackets are not rich markup)."""
    console.print(message, markup=False, highlight=False, emoji=False, soft_wrap=True)


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        _print_report(str(e))
        raise typer.Exit(code=1) from e


@app.command()
def main(
    schema: Annotated[
        Optional[Path],  # noqa: UP007
        typer.Argument(help="Schema file", show_default=False),
    ] = None,
    files: Annotated[
        Optional[list[Path]],  # noqa: UP007
        typer.Argument(help="Files to validate", show_default=False),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Validate YAML files according to a schema (also in YAML)."""
    if verbose:
        configure_logging("DEBUG")

    if schema is None:
        _print_report("No schema and input file specified")
        raise typer.Exit(code=1)
    if not files:
        _print_report("Both a schema file and at least one input file are required")
        raise typer.Exit(code=1)

    try:
        validator = SchemaValidator(_read(schema))
    except SchemaError as e:
        _print_report(str(e))
        raise typer.Exit(code=1) from e

    failed = 0
    for path in files:
        logger.info("Validating %s against %s", path, schema)
        try:
            validator.validate(_read(path))
        except ValidationError as e:
            failed += 1
            _print_report(str(e))

    if failed:
        logger.debug("%d of %d files failed validation", failed, len(files))
        raise typer.Exit(code=1)
