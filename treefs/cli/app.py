from __future__ import annotations

from dataclasses import replace
from typing import Annotated

import typer
from result import Err
from rich.console import Console
from rich.markup import escape

from treefs.config.defaults import default_config
from treefs.config.loader import load_config, load_fixture, sample_fixture_json
from treefs.models.errors import TreeFsError
from treefs.services.mock_fs import MockFileSystem
from treefs.services.summary import render_calls, render_index, render_tree

console = Console()


def run(
    fixture: Annotated[str, typer.Argument(help="Path to a JSON fixture file.")] = "",
    index: Annotated[bool, typer.Option("--index", "-i", help="Show the path index as a table.")] = False,
    files_only: Annotated[bool, typer.Option("--files-only", "-f", help="Only list file entries.")] = False,
    read: Annotated[
        list[str] | None,
        typer.Option("--read", "-r", help="Read a path through the mock filesystem (repeatable)."),
    ] = None,
    root: Annotated[
        str | None, typer.Option("--root", help="Root used when the fixture does not set one.")
    ] = None,
    sample_fixture: Annotated[bool, typer.Option("--sample-fixture", help="Print a sample fixture JSON.")] = False,
) -> None:
    if sample_fixture:
        console.print_json(sample_fixture_json())
        raise typer.Exit(0)

    if not fixture:
        console.print("[red]Missing fixture path.[/]")
        raise typer.Exit(1)

    config_result = load_config()
    if isinstance(config_result, Err):
        console.print(f"[yellow]{escape(config_result.unwrap_err())} Using defaults.[/]")
        config = default_config()
    else:
        config = config_result.unwrap()
    if root is not None:
        config = replace(config, root=root)

    tree_result = load_fixture(fixture, config)
    if isinstance(tree_result, Err):
        console.print(f"[red]{escape(tree_result.unwrap_err())}[/]")
        raise typer.Exit(1)
    tree = tree_result.unwrap()

    if index or files_only:
        render_index(console, tree, files_only=files_only)
    else:
        render_tree(console, tree)

    if read:
        fs = MockFileSystem(tree)
        for path in read:
            try:
                content = fs.read_file(path, "utf-8")
            except TreeFsError as exc:
                console.print(f"[red]{escape(str(exc))}[/]")
                raise typer.Exit(1) from exc
            console.rule(f"[bold #8abeb7]{escape(fs.realpath(path))}[/]")
            console.print(content, markup=False, highlight=False)
        render_calls(console, fs)


def cli() -> None:
    typer.run(run)


if __name__ == "__main__":
    cli()
