"""Pydantic models for artifact coordinates and their path decompositions."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from artifact_layout import snapshots


class LayoutVariant(str, Enum):
    """Repository layout conventions."""

    LEGACY = "legacy"
    DEFAULT = "default"


class ProjectCoordinate(BaseModel):
    """Project identity (GroupId, ArtifactId) without version or type."""

    model_config = ConfigDict(frozen=True)

    group_id: str = Field(..., min_length=1)
    artifact_id: str = Field(..., min_length=1)

    def compact(self) -> str:
        """Return a compact string representation.

        Returns:
            A string like `groupId:artifactId`.
        """
        return f"{self.group_id}:{self.artifact_id}"


class ArtifactCoordinate(BaseModel):
    """Full artifact coordinates (GroupId, ArtifactId, Version, Classifier, Type).

    `version` is None only for project-level references. A blank classifier is
    normalized to None so that `""` and "absent" compare equal.
    """

    model_config = ConfigDict(frozen=True)

    group_id: str = Field(..., min_length=1)
    artifact_id: str = Field(..., min_length=1)
    version: str | None = None
    classifier: str | None = None
    type: str = Field(..., min_length=1)

    @field_validator("classifier", mode="before")
    @classmethod
    def _blank_classifier_is_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("version", mode="before")
    @classmethod
    def _blank_version_is_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def is_snapshot(self) -> bool:
        return self.version is not None and snapshots.is_snapshot(self.version)

    def project(self) -> ProjectCoordinate:
        return ProjectCoordinate(group_id=self.group_id, artifact_id=self.artifact_id)

    def compact(self) -> str:
        """Return a compact string representation.

        Returns:
            A string like `groupId:artifactId:version`, with `:classifier`
            appended when one is set.
        """
        parts = [self.group_id, self.artifact_id, self.version or "-"]
        if self.classifier:
            parts.append(self.classifier)
        return ":".join(parts)


class FilenameParts(BaseModel):
    """Pieces of an artifact filename, produced and consumed within one parse."""

    model_config = ConfigDict(frozen=True)

    artifact_id: str
    version: str
    classifier: str | None = None
    extension: str


class ScannedArtifact(BaseModel):
    """A repository file that parsed into a coordinate."""

    path: str
    coordinate: ArtifactCoordinate


class ScanError(BaseModel):
    """A repository file that could not be parsed."""

    path: str
    kind: str
    message: str


class ScanResult(BaseModel):
    """Outcome of parsing every file in a repository directory."""

    artifacts: list[ScannedArtifact] = Field(default_factory=list)
    errors: list[ScanError] = Field(default_factory=list)
