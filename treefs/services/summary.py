from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree as RichTree

from treefs.models.entry import Directory, Entry
from treefs.services.formatting import content_size, format_bytes, preview
from treefs.services.mock_fs import MockFileSystem
from treefs.services.tree import Tree


def _label(entry: Entry) -> str:
    if isinstance(entry, Directory):
        return f"[bold #81a2be]{escape(entry.name)}/[/]"
    return f"{escape(entry.name)} [#969896]({format_bytes(content_size(entry.content))})[/]"


def _attach(branch: RichTree, entry: Entry) -> None:
    node = branch.add(_label(entry))
    if isinstance(entry, Directory):
        for child in entry.children:
            _attach(node, child)


def build_rich_tree(tree: Tree) -> RichTree:
    root = RichTree(f"[bold #8abeb7]{escape(tree.root)}[/]")
    for child in tree.root_directory.children:
        _attach(root, child)
    return root


def render_tree(console: Console, tree: Tree) -> None:
    console.print(build_rich_tree(tree))


def render_index(console: Console, tree: Tree, *, files_only: bool = False) -> None:
    entries = tree.list_files() if files_only else tree.list_all()
    table = Table(title="Files" if files_only else "Index", header_style="bold cyan")
    table.add_column("Path")
    table.add_column("Type", justify="center")
    table.add_column("Size", justify="right")
    table.add_column("Content")
    for path in sorted(entries):
        entry = entries[path]
        if isinstance(entry, Directory):
            table.add_row(escape(path), "DIR", "", f"{len(entry.children)} children")
        else:
            table.add_row(
                escape(path),
                "FILE",
                format_bytes(content_size(entry.content)),
                escape(preview(entry.content)),
            )
    console.print(table)


def render_calls(console: Console, fs: MockFileSystem) -> None:
    table = Table(title="Recorded Calls", header_style="bold yellow")
    table.add_column("Operation")
    table.add_column("Calls", justify="right")
    table.add_column("Last Arguments")
    for name, spy in fs.spies.items():
        if not spy.called:
            continue
        last = spy.last_call
        args = ", ".join(repr(arg) for arg in last.args) if last is not None else ""
        table.add_row(name, f"{spy.call_count:,}", escape(args))
    console.print(table)
