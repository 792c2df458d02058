"""Resolve and create commands."""

import json
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from safename.mime.table import MimeTableError
from safename.naming.errors import NameResolutionError
from safename.naming.resolver import Resolution, UniqueNameResolver
from safename.utils.paths import resolve_path
from safename.writers.file_writer import create_unique_file

console = Console()


def _build_resolver() -> UniqueNameResolver:
    try:
        return UniqueNameResolver.from_settings()
    except MimeTableError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def _to_json(resolution: Resolution) -> str:
    return json.dumps(
        {
            "directory": str(resolution.directory),
            "name": resolution.name,
            "path": str(resolution.path),
            "base": resolution.base,
            "extension": resolution.extension,
            "counter": resolution.counter,
        },
        indent=2,
        ensure_ascii=False,
    )


def resolve_cmd(
    directory: Annotated[str, typer.Argument(help="Target directory")],
    name: Annotated[str, typer.Argument(help="Requested display name")],
    mime: Annotated[
        Optional[str],
        typer.Option("--mime", help="MIME type of the content"),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the full resolution as JSON"),
    ] = False,
) -> None:
    """Print a name for NAME that does not exist yet in DIRECTORY."""
    from safename.cli.main import state

    target = resolve_path(directory)
    if target is None:
        console.print("[red]Error:[/red] Directory must not be empty")
        raise typer.Exit(1)

    resolver = _build_resolver()

    state.logger.info(f"Resolving {name!r} in {target} (mime={mime})")
    try:
        resolution = resolver.resolve(target, name, mime)
    except (NameResolutionError, OSError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if as_json:
        console.print(_to_json(resolution), markup=False, highlight=False, soft_wrap=True)
    else:
        console.print(resolution.name, markup=False, highlight=False, soft_wrap=True)


def create_cmd(
    directory: Annotated[str, typer.Argument(help="Target directory")],
    name: Annotated[str, typer.Argument(help="Requested display name")],
    mime: Annotated[
        Optional[str],
        typer.Option("--mime", help="MIME type of the content"),
    ] = None,
) -> None:
    """Create an empty file for NAME in DIRECTORY and print its path."""
    from safename.cli.main import state

    target = resolve_path(directory)
    if target is None:
        console.print("[red]Error:[/red] Directory must not be empty")
        raise typer.Exit(1)

    resolver = _build_resolver()

    try:
        path = create_unique_file(target, name, mime, resolver=resolver)
    except (NameResolutionError, OSError) as e:
        console.print(f"[red]Error:[/red] Failed to create file: {escape(str(e))}")
        raise typer.Exit(1)

    state.logger.info(f"Created {path}")
    console.print(str(path), markup=False, highlight=False, soft_wrap=True)
