"""Typer CLI entry point for artifact-layout."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from artifact_layout.config import LayoutConfig
from artifact_layout.exceptions import ArtifactLayoutError
from artifact_layout.layout import RepositoryLayout, create_layout
from artifact_layout.models import ArtifactCoordinate, LayoutVariant, ProjectCoordinate
from artifact_layout.scanner import scan_repository
from artifact_layout.tasks import build_indexing_tasks
from artifact_layout.visualize import build_repository_tree, coordinate_table, errors_table, tasks_table

app = typer.Typer(add_completion=False, help="Map artifact coordinates to repository paths and back.")
console = Console()

LayoutOption = Annotated[
    Optional[LayoutVariant],
    typer.Option("--layout", "-l", help="Repository layout (defaults to $ARTIFACT_LAYOUT or 'default')."),
]


def setup_logging(config: LayoutConfig, verbose: bool) -> None:
    level = logging.DEBUG if verbose else config.log_level_value
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def _layout(variant: LayoutVariant | None) -> RepositoryLayout:
    return create_layout(variant, config=LayoutConfig.from_env())


@app.callback()
def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    try:
        config = LayoutConfig.from_env()
        config.validate()
    except ValueError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from None
    setup_logging(config, verbose)


@app.command("to-path")
def to_path(
    group: Annotated[str, typer.Argument(help="groupId, e.g. com.foo")],
    artifact: Annotated[str, typer.Argument(help="artifactId")],
    version: Annotated[Optional[str], typer.Argument(help="Version; omit for the project path.")] = None,
    type_: Annotated[str, typer.Option("--type", "-t", help="Packaging type.")] = "jar",
    classifier: Annotated[Optional[str], typer.Option("--classifier", "-c", help="Classifier.")] = None,
    layout: LayoutOption = None,
) -> None:
    """Print the repository path of an artifact."""
    try:
        coordinate = ArtifactCoordinate(
            group_id=group,
            artifact_id=artifact,
            version=version,
            classifier=classifier,
            type=type_,
        )
        typer.echo(_layout(layout).to_path(coordinate))
    except (ArtifactLayoutError, ValueError) as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=1) from None


@app.command("project-path")
def project_path(
    group: Annotated[str, typer.Argument(help="groupId, e.g. com.foo")],
    artifact: Annotated[str, typer.Argument(help="artifactId")],
    layout: LayoutOption = None,
) -> None:
    """Print the repository path of a project (no version)."""
    try:
        project = ProjectCoordinate(group_id=group, artifact_id=artifact)
        typer.echo(_layout(layout).project_path(project))
    except (ArtifactLayoutError, ValueError) as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=1) from None


@app.command("to-artifact")
def to_artifact(
    path: Annotated[str, typer.Argument(help="Repository-relative artifact path.")],
    layout: LayoutOption = None,
) -> None:
    """Parse a repository path into artifact coordinates."""
    try:
        coordinate = _layout(layout).to_artifact(path)
        console.print(coordinate_table(coordinate, title=path))
    except ArtifactLayoutError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=1) from None


@app.command()
def scan(
    root: Annotated[Path, typer.Argument(help="Repository root directory to scan.")],
    layout: LayoutOption = None,
    use_pom: Annotated[
        bool, typer.Option("--use-pom", help="Refine types from POM <packaging> (default layout).")
    ] = False,
    tasks: Annotated[
        Optional[str], typer.Option("--tasks", help="Also list indexing tasks for this repository id.")
    ] = None,
) -> None:
    """Parse every file in a repository and report coordinates and failures."""
    if not root.exists():
        console.print(f"[bold red]Error:[/bold red] Path not found: {root}")
        raise typer.Exit(code=1)
    if not root.is_dir():
        console.print(f"[bold red]Error:[/bold red] Not a repository directory: {root}")
        raise typer.Exit(code=1)

    try:
        result = scan_repository(root, _layout(layout), use_pom=use_pom)
    except ArtifactLayoutError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=1) from None

    console.print(build_repository_tree(result, root_label=str(root)))
    if tasks:
        console.print(tasks_table(build_indexing_tasks(tasks, result)))
    if result.errors:
        console.print(errors_table(result))
        raise typer.Exit(code=1)
    console.print(f"[green]Parsed[/green] {len(result.artifacts)} artifact(s).")


def main() -> None:
    """Console-script entry point."""
    app()
