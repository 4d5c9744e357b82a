"""Custom exceptions for artifact-layout."""

from __future__ import annotations

from enum import Enum


class LayoutErrorKind(str, Enum):
    """Kinds of layout failure surfaced to callers."""

    INVALID_PATH_SEGMENT_COUNT = "InvalidPathSegmentCount"
    MISSING_EXTENSION = "MissingExtension"
    DIRECTORY_TYPE_MISMATCH = "DirectoryTypeMismatch"
    ARTIFACT_ID_MISMATCH = "ArtifactIdMismatch"
    VERSION_MISMATCH = "VersionMismatch"
    UNKNOWN_TYPE = "UnknownType"
    MISSING_VERSION = "MissingVersion"
    EMPTY_CLASSIFIER = "EmptyClassifier"


class ArtifactLayoutError(Exception):
    """Base exception for artifact-layout."""


class LayoutException(ArtifactLayoutError):
    """Raised when a coordinate and a repository path cannot be mapped onto each other.

    Every subclass fixes `kind`, so callers can either catch a specific class or
    catch `LayoutException` and branch on `kind`.
    """

    kind: LayoutErrorKind

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.message} (path: {self.path})"


class InvalidPathSegmentCountError(LayoutException):
    """Raised when a path has the wrong number of `/`-delimited segments."""

    kind = LayoutErrorKind.INVALID_PATH_SEGMENT_COUNT


class MissingExtensionError(LayoutException):
    """Raised when a filename has no extractable extension."""

    kind = LayoutErrorKind.MISSING_EXTENSION


class DirectoryTypeMismatchError(LayoutException):
    """Raised when a legacy type directory disagrees with the filename's type."""

    kind = LayoutErrorKind.DIRECTORY_TYPE_MISMATCH


class ArtifactIdMismatchError(LayoutException):
    """Raised when a filename does not start with the expected artifact id."""

    kind = LayoutErrorKind.ARTIFACT_ID_MISMATCH


class VersionMismatchError(LayoutException):
    """Raised when the filename version disagrees with the directory version."""

    kind = LayoutErrorKind.VERSION_MISMATCH


class UnknownTypeError(LayoutException):
    """Raised when a packaging type has no registered extension."""

    kind = LayoutErrorKind.UNKNOWN_TYPE


class MissingVersionError(LayoutException):
    """Raised when no version can be located in a filename."""

    kind = LayoutErrorKind.MISSING_VERSION


class EmptyClassifierError(LayoutException):
    """Raised when a filename ends in a hyphen with no classifier after it."""

    kind = LayoutErrorKind.EMPTY_CLASSIFIER


class PomReadError(ArtifactLayoutError):
    """Raised when a POM used as a packaging hint cannot be read."""
