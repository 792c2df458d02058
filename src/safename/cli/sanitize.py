"""Sanitize command."""

from typing import Annotated, Optional

import typer
from rich.console import Console

from safename.config.settings import get_settings
from safename.utils.filename import sanitize_filename

console = Console()


def sanitize_cmd(
    name: Annotated[str, typer.Argument(help="Name to sanitize")],
    max_length: Annotated[
        Optional[int],
        typer.Option("--max-length", min=1, help="Maximum length in codepoints"),
    ] = None,
) -> None:
    """Print the nearest valid filename for NAME."""
    from safename.cli.main import state

    limit = max_length or get_settings().max_filename_length
    result = sanitize_filename(name, limit)

    if result != name:
        state.logger.info(f"Sanitized {name!r} to {result!r}")

    console.print(result, markup=False, highlight=False, soft_wrap=True)
