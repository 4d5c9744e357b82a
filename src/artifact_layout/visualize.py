"""Rich rendering utilities for layout results."""

from __future__ import annotations

from collections import defaultdict

from rich.table import Table
from rich.tree import Tree

from artifact_layout.models import ArtifactCoordinate, ScanResult
from artifact_layout.tasks import IndexingTask


def coordinate_table(coordinate: ArtifactCoordinate, *, title: str | None = None) -> Table:
    """Build a two-column table describing one coordinate."""
    table = Table(title=title, show_header=False)
    table.add_column("field", style="dim")
    table.add_column("value")
    table.add_row("groupId", coordinate.group_id)
    table.add_row("artifactId", coordinate.artifact_id)
    table.add_row("version", coordinate.version or "[dim]-[/dim]")
    table.add_row("classifier", coordinate.classifier or "[dim]-[/dim]")
    table.add_row("type", coordinate.type)
    if coordinate.is_snapshot:
        table.add_row("snapshot", "yes")
    return table


def build_repository_tree(result: ScanResult, *, root_label: str) -> Tree:
    """Build a Rich Tree of group -> artifact -> version -> files.

    Args:
        result: Scan result to render.
        root_label: Label of the tree root, usually the repository path.

    Returns:
        A Rich Tree object for rendering.
    """
    root = Tree(f"[bold]{root_label}[/bold]")
    if not result.artifacts:
        root.add("[dim]No artifacts found[/dim]")
        return root

    grouped: dict[str, dict[str, dict[str, list[str]]]] = defaultdict(
        lambda: defaultdict(lambda: defaultdict(list))
    )
    for scanned in result.artifacts:
        c = scanned.coordinate
        label = c.type if not c.classifier else f"{c.type} ({c.classifier})"
        grouped[c.group_id][c.artifact_id][c.version or "-"].append(f"{scanned.path} [dim]{label}[/dim]")

    for group_id in sorted(grouped):
        group_branch = root.add(f"[bold]{group_id}[/bold]")
        for artifact_id in sorted(grouped[group_id]):
            artifact_branch = group_branch.add(artifact_id)
            for version in sorted(grouped[group_id][artifact_id]):
                version_branch = artifact_branch.add(f"[cyan]{version}[/cyan]")
                for line in grouped[group_id][artifact_id][version]:
                    version_branch.add(line)
    return root


def errors_table(result: ScanResult) -> Table:
    table = Table(title="Unparseable paths")
    table.add_column("#", style="dim", width=6)
    table.add_column("Path")
    table.add_column("Kind", style="red", no_wrap=True)
    table.add_column("Message")
    for i, err in enumerate(result.errors, start=1):
        table.add_row(str(i), err.path, err.kind, err.message)
    return table


def tasks_table(tasks: list[IndexingTask]) -> Table:
    table = Table(title="Indexing tasks")
    table.add_column("#", style="dim", width=6)
    table.add_column("Action")
    table.add_column("Resource")
    for i, task in enumerate(tasks, start=1):
        table.add_row(str(i), task.action.value, task.resource_path or "[dim]-[/dim]")
    return table
