"""Main Typer CLI application for safename."""

import logging
import sys
from typing import Annotated, Optional

import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from safename import __version__
from safename.config.settings import get_settings, reset_settings

# Create the Typer app
app = typer.Typer(
    name="safename",
    help="Sanitize filenames and pick collision-free names in a directory.",
    no_args_is_help=True,
)

# Console for rich output
console = Console()


# Global state for config
class State:
    debug: bool = False
    logger: logging.Logger = logging.getLogger("safename")


state = State()


def setup_logging(debug: bool) -> logging.Logger:
    """Configure logging based on debug flag."""
    logger = logging.getLogger("safename")
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    if debug:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.WARNING)

    return logger


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"safename {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging"),
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, is_eager=True),
    ] = None,
) -> None:
    """safename CLI - Build valid, unique filenames."""
    # Load .env file and pick up any SAFENAME_* settings from it
    load_dotenv()
    reset_settings()

    try:
        settings = get_settings()
    except ValidationError as e:
        console.print(f"[red]Error:[/red] Invalid configuration: {escape(str(e))}")
        raise typer.Exit(1)

    # Setup logging
    state.debug = debug or settings.debug
    state.logger = setup_logging(state.debug)

    if state.debug:
        state.logger.debug("Debug mode enabled")


# Import and register subcommands
from safename.cli.sanitize import sanitize_cmd
from safename.cli.resolve import create_cmd, resolve_cmd

app.command(name="sanitize")(sanitize_cmd)
app.command(name="resolve")(resolve_cmd)
app.command(name="create")(create_cmd)


if __name__ == "__main__":
    app()
