from __future__ import annotations

import logging
from pathlib import Path

from artifact_layout.exceptions import LayoutException, PomReadError
from artifact_layout.layout import DefaultLayout, RepositoryLayout
from artifact_layout.models import ArtifactCoordinate, ScanError, ScannedArtifact, ScanResult
from artifact_layout.pom import read_packaging, refine_type


logger = logging.getLogger(__name__)

SIDE_FILE_SUFFIXES = (".sha1", ".md5", ".asc", ".sha256", ".sha512")
METADATA_PREFIX = "maven-metadata"


def find_artifact_files(root: Path) -> list[str]:
    """Find artifact files under root, as `/`-separated paths relative to root.

    Hidden files and directories, repository metadata, checksums and
    signatures are skipped.

    Args:
        root: A repository directory to scan recursively.

    Raises:
        NotADirectoryError: If root is not a directory.

    Returns:
        Sorted list of relative paths.
    """
    if not root.is_dir():
        raise NotADirectoryError(f"Not a repository directory: {root}")

    found: list[str] = []
    for p in root.rglob("*"):
        if not p.is_file():
            continue
        rel = p.relative_to(root)
        if any(part.startswith(".") for part in rel.parts):
            continue
        if p.name.lower().endswith(SIDE_FILE_SUFFIXES):
            continue
        if p.name.startswith(METADATA_PREFIX):
            continue
        found.append(rel.as_posix())
    return sorted(found)


def _with_pom_packaging(
    root: Path,
    rel_path: str,
    coordinate: ArtifactCoordinate,
    layout: DefaultLayout,
) -> ArtifactCoordinate:
    if coordinate.classifier or coordinate.type == "pom":
        return coordinate
    pom = (root / rel_path).parent / f"{coordinate.artifact_id}-{coordinate.version}.pom"
    if not pom.is_file():
        return coordinate
    return refine_type(coordinate, read_packaging(pom), layout.extensions)


def scan_repository(root: Path, layout: RepositoryLayout, *, use_pom: bool = False) -> ScanResult:
    """Parse every artifact file under a repository root.

    Files that fail to parse are collected as errors rather than aborting the scan.

    Args:
        root: Repository root directory.
        layout: Layout the repository is stored in.
        use_pom: Refine main artifact types from the POM next to them (default layout only).

    Returns:
        A `ScanResult` with parsed artifacts and per-file errors.
    """
    result = ScanResult()

    for rel_path in find_artifact_files(root):
        try:
            coordinate = layout.to_artifact(rel_path)
            if use_pom and isinstance(layout, DefaultLayout):
                coordinate = _with_pom_packaging(root, rel_path, coordinate, layout)
        except LayoutException as exc:
            logger.debug("Skipping %s: %s", rel_path, exc)
            result.errors.append(ScanError(path=rel_path, kind=exc.kind.value, message=exc.message))
            continue
        except PomReadError as exc:
            logger.debug("Skipping %s: %s", rel_path, exc)
            result.errors.append(ScanError(path=rel_path, kind="PomRead", message=str(exc)))
            continue
        result.artifacts.append(ScannedArtifact(path=rel_path, coordinate=coordinate))

    return result
