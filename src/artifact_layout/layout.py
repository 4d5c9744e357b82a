"""Bidirectional repository layouts: coordinates <-> storage paths.

Two conventions are supported:

    legacy   <group>/<typeDirectory>/<artifactId>-<version>[-<classifier>].<ext>
    default  <g/r/o/u/p>/<artifactId>/<dirVersion>/<artifactId>-<version>[-<classifier>].<ext>

In the default layout a timestamped snapshot (`2.1-20060822.123456-35`) is
stored under its `2.1-SNAPSHOT` directory while the filename keeps the exact
build. Both layouts are stateless; an instance may be shared freely between
threads.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from artifact_layout.config import LayoutConfig
from artifact_layout.exceptions import (
    ArtifactIdMismatchError,
    DirectoryTypeMismatchError,
    InvalidPathSegmentCountError,
    LayoutException,
    MissingExtensionError,
)
from artifact_layout.extensions import ExtensionTypeTable
from artifact_layout.filenames import decompose
from artifact_layout.models import ArtifactCoordinate, LayoutVariant, ProjectCoordinate
from artifact_layout.snapshots import directory_version, reconcile


logger = logging.getLogger(__name__)

PATH_SEPARATOR = "/"
METADATA_TYPE = "metadata-xml"
METADATA_FILENAME = "maven-metadata.xml"


@runtime_checkable
class RepositoryLayout(Protocol):
    """Capability shared by every layout variant."""

    @property
    def id(self) -> str: ...

    def to_path(self, coordinate: ArtifactCoordinate) -> str: ...

    def project_path(self, project: ProjectCoordinate) -> str: ...

    def to_artifact(self, path: str) -> ArtifactCoordinate: ...

    def to_project(self, path: str) -> ProjectCoordinate: ...


def _split_path(path: str) -> list[str]:
    """Normalize separators and drop empty segments."""
    return [p for p in path.replace("\\", PATH_SEPARATOR).split(PATH_SEPARATOR) if p]


def _filename(coordinate: ArtifactCoordinate, extension: str) -> str:
    name = f"{coordinate.artifact_id}-{coordinate.version}"
    if coordinate.classifier:
        name += f"-{coordinate.classifier}"
    return f"{name}.{extension}"


@dataclass(frozen=True)
class LegacyLayout:
    """Flat layout used by Maven 1.x repositories.

    The type directory must name either the type inferred from the filename or
    its bare extension. Only that directory cross-checks a parsed path, so
    types that share a directory or an extension (`ejb-client`,
    `maven-plugin`, ...) come back as the type inferred from the filename.
    """

    extensions: ExtensionTypeTable = field(default_factory=ExtensionTypeTable)

    @property
    def id(self) -> str:
        return LayoutVariant.LEGACY.value

    def to_path(self, coordinate: ArtifactCoordinate) -> str:
        directory = self.extensions.directory_for(coordinate.classifier, coordinate.type)
        path = f"{coordinate.group_id}/{directory}/"
        if coordinate.version is not None:
            path += _filename(coordinate, self.extensions.extension_of(coordinate.type))
        return path

    def project_path(self, project: ProjectCoordinate) -> str:
        directory = self.extensions.directory_for(None, METADATA_TYPE)
        return f"{project.group_id}/{directory}/"

    def to_artifact(self, path: str) -> ArtifactCoordinate:
        """Parse a legacy artifact path.

        A legacy path always has exactly three parts:

            commons-lang/jars/commons-lang-2.1.jar
            ^group       ^type ^filename

        Raises:
            InvalidPathSegmentCountError: If the path does not have 3 segments.
            MissingExtensionError: If the filename has no extension.
            MissingVersionError: If no version can be found in the filename.
            DirectoryTypeMismatchError: If the type directory does not match the filename.
        """
        parts = _split_path(path)
        if len(parts) != 3:
            raise InvalidPathSegmentCountError(
                f"Legacy paths need exactly 3 segments, got {len(parts)}", path=path
            )

        group_id, type_directory, filename = parts
        try:
            file_parts = decompose(filename, extensions=self.extensions)
        except LayoutException as exc:
            exc.path = path
            raise
        if not file_parts.extension:
            raise MissingExtensionError("Invalid artifact, no extension", path=path)

        type_ = self.extensions.type_of(filename)
        if type_directory != type_ + "s":
            # `zips/foo-1.0.zip`: the bare extension is itself a registered type.
            extension = file_parts.extension.lower()
            if type_directory != extension + "s" or not self.extensions.is_registered(extension):
                raise DirectoryTypeMismatchError(
                    f"Type directory '{type_directory}' does not match type '{type_}'", path=path
                )
            type_ = extension

        coordinate = ArtifactCoordinate(
            group_id=group_id,
            artifact_id=file_parts.artifact_id,
            version=file_parts.version,
            classifier=file_parts.classifier,
            type=type_,
        )
        logger.debug("Parsed legacy path %s as %s", path, coordinate.compact())
        return coordinate

    def to_project(self, path: str) -> ProjectCoordinate:
        return self.to_artifact(path).project()


@dataclass(frozen=True)
class DefaultLayout:
    """Nested layout used by Maven 2+ repositories."""

    extensions: ExtensionTypeTable = field(default_factory=ExtensionTypeTable)

    @property
    def id(self) -> str:
        return LayoutVariant.DEFAULT.value

    def to_path(self, coordinate: ArtifactCoordinate) -> str:
        path = self.project_path(coordinate.project())
        if coordinate.version is None:
            return path
        extension = self.extensions.extension_of(coordinate.type)
        return path + f"{directory_version(coordinate.version)}/" + _filename(coordinate, extension)

    def project_path(self, project: ProjectCoordinate) -> str:
        return f"{project.group_id.replace('.', PATH_SEPARATOR)}/{project.artifact_id}/"

    def to_artifact(self, path: str) -> ArtifactCoordinate:
        """Parse a default-layout artifact path.

        The last three segments are the artifact id, the version directory and
        the filename; everything before them is the group id:

            com/foo/foo-tool/1.0/foo-tool-1.0.jar
            ^group  ^artifact ^version ^filename

        Raises:
            InvalidPathSegmentCountError: If the path has fewer than 4 segments.
            MissingExtensionError: If the filename has no extension.
            ArtifactIdMismatchError: If the filename does not belong to the artifact directory.
            VersionMismatchError: If the filename version does not fit the version directory.
        """
        parts = _split_path(path)
        if len(parts) < 4:
            raise InvalidPathSegmentCountError(
                f"Default paths need at least 4 segments, got {len(parts)}", path=path
            )

        *group_parts, artifact_id, dir_version, filename = parts
        try:
            file_parts = decompose(
                filename,
                artifact_id,
                known_version=dir_version,
                extensions=self.extensions,
            )
        except LayoutException as exc:
            exc.path = path
            raise

        if file_parts.artifact_id != artifact_id:
            raise ArtifactIdMismatchError(
                f"Filename artifact id '{file_parts.artifact_id}' does not match directory '{artifact_id}'",
                path=path,
            )

        reconcile(dir_version, file_parts.version, path=path)

        coordinate = ArtifactCoordinate(
            group_id=".".join(group_parts),
            artifact_id=artifact_id,
            version=file_parts.version,
            classifier=file_parts.classifier,
            type=self.extensions.type_of(filename),
        )
        logger.debug("Parsed default path %s as %s", path, coordinate.compact())
        return coordinate

    def to_project(self, path: str) -> ProjectCoordinate:
        """Parse a project directory (`com/foo/foo-tool/`) or metadata path.

        Any other path is parsed as an artifact and its project returned.
        """
        normalized = path.replace("\\", PATH_SEPARATOR)
        parts = _split_path(normalized)
        is_directory = normalized.endswith(PATH_SEPARATOR)
        if parts and parts[-1] == METADATA_FILENAME:
            parts = parts[:-1]
            is_directory = True

        if not is_directory:
            return self.to_artifact(path).project()

        if len(parts) < 2:
            raise InvalidPathSegmentCountError(
                f"Project paths need at least 2 segments, got {len(parts)}", path=path
            )
        *group_parts, artifact_id = parts
        return ProjectCoordinate(group_id=".".join(group_parts), artifact_id=artifact_id)


def create_layout(
    variant: LayoutVariant | str | None = None,
    *,
    config: LayoutConfig | None = None,
) -> RepositoryLayout:
    """Construct a layout for a variant.

    Args:
        variant: `legacy` or `default`. Defaults to the variant in `config`.
        config: Layout configuration; supplies extra types and the default variant.

    Raises:
        ValueError: If the variant or the configuration is invalid.

    Returns:
        A new layout instance.
    """
    config = config or LayoutConfig()
    config.validate()
    try:
        selected = LayoutVariant(variant if variant is not None else config.variant)
    except ValueError:
        raise ValueError(f"Unsupported layout: {variant}") from None

    extensions = ExtensionTypeTable(config.extra_types)
    if selected is LayoutVariant.LEGACY:
        return LegacyLayout(extensions)
    return DefaultLayout(extensions)
