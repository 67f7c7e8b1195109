"""
Rendering functions for docgit output.

Core functions return data, this module makes it human-readable.
"""

from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.table import Table

console = Console()


def _table(title: Optional[str]) -> Table:
    return Table(
        title=title,
        box=box.ROUNDED,
        show_header=True,
        header_style="bold magenta"
    )


def render_tags_table(tags: List[Dict[str, Any]], title: Optional[str] = "Tags") -> None:
    """
    Render tag listings as a table.

    Args:
        tags: Tag dictionaries with name, kind, sha and commit
    """
    if not tags:
        console.print("[yellow]No tags found.[/yellow]")
        return

    table = _table(title)
    table.add_column("Tag", style="cyan")
    table.add_column("Kind", style="green")
    table.add_column("Tag sha", style="dim")
    table.add_column("Commit", style="yellow")
    table.add_column("Version", style="blue")

    for tag in tags:
        if 'error' in tag:
            table.add_row(tag.get('name', ''), "[red]error[/red]", "", "", tag['error'])
            continue
        table.add_row(
            tag['name'],
            tag.get('kind', ''),
            tag.get('sha', '')[:12],
            tag.get('commit', '')[:12],
            tag.get('version') or "",
        )

    console.print(table)


def render_metadata_table(records: List[Dict[str, Any]]) -> None:
    """Render repository metadata records as a table."""
    if not records:
        console.print("[yellow]No metadata to display.[/yellow]")
        return

    table = _table("Repository Metadata")
    table.add_column("Version", style="cyan")
    table.add_column("URL", style="blue")
    table.add_column("Tag", style="green")
    table.add_column("Tag sha", style="dim")
    table.add_column("Commit", style="yellow")

    for record in records:
        tag = record.get('tag')
        if tag:
            table.add_row(record.get('version', ''), record['url'], tag['name'], tag['sha'][:12], record['commit'][:12])
        else:
            table.add_row(record.get('version', ''), record['url'], "[yellow]not found[/yellow]", "", "")

    console.print(table)
