from __future__ import annotations

import pytest

from artifact_layout.exceptions import (
    ArtifactIdMismatchError,
    DirectoryTypeMismatchError,
    EmptyClassifierError,
    InvalidPathSegmentCountError,
    LayoutErrorKind,
    LayoutException,
    MissingExtensionError,
    MissingVersionError,
)
from artifact_layout.layout import LegacyLayout
from artifact_layout.models import ArtifactCoordinate, ProjectCoordinate


def _coord(
    group_id: str,
    artifact_id: str,
    version: str | None,
    classifier: str | None,
    type_: str,
) -> ArtifactCoordinate:
    return ArtifactCoordinate(
        group_id=group_id,
        artifact_id=artifact_id,
        version=version,
        classifier=classifier,
        type=type_,
    )


def test_layout_id(legacy_layout: LegacyLayout) -> None:
    assert legacy_layout.id == "legacy"


@pytest.mark.parametrize(
    ("artifact", "path"),
    [
        (_coord("com.foo", "foo-tool", "1.0", "", "jar"), "com.foo/jars/foo-tool-1.0.jar"),
        (_coord("com.foo", "foo-client", "1.0", "", "ejb-client"), "com.foo/ejbs/foo-client-1.0.jar"),
        (_coord("com.foo", "foo-tool", "1.0", "sources", "jar"), "com.foo/javadoc.jars/foo-tool-1.0-sources.jar"),
        (_coord("org.example", "dist", "1.2", None, "distribution-tgz"), "org.example/distributions/dist-1.2.tar.gz"),
        (_coord("maven", "maven-model", "1.0-beta-2", None, "pom"), "maven/poms/maven-model-1.0-beta-2.pom"),
    ],
)
def test_to_path(legacy_layout: LegacyLayout, artifact: ArtifactCoordinate, path: str) -> None:
    assert legacy_layout.to_path(artifact) == path


def test_to_path_without_version(legacy_layout: LegacyLayout) -> None:
    assert legacy_layout.to_path(_coord("com.foo", "foo-tool", None, None, "jar")) == "com.foo/jars/"


def test_project_path(legacy_layout: LegacyLayout) -> None:
    project = ProjectCoordinate(group_id="com.foo", artifact_id="foo-tool")
    assert legacy_layout.project_path(project) == "com.foo/metadata-xmls/"


def test_to_artifact_basic(legacy_layout: LegacyLayout) -> None:
    artifact = legacy_layout.to_artifact("commons-lang/jars/commons-lang-2.1.jar")
    assert artifact == _coord("commons-lang", "commons-lang", "2.1", None, "jar")


def test_to_artifact_pom_with_qualified_version(legacy_layout: LegacyLayout) -> None:
    artifact = legacy_layout.to_artifact("maven/poms/maven-model-1.0-beta-2.pom")
    assert artifact == _coord("maven", "maven-model", "1.0-beta-2", None, "pom")


def test_to_artifact_java_source(legacy_layout: LegacyLayout) -> None:
    artifact = legacy_layout.to_artifact("com.foo/java-sources/foo-tool-1.0-sources.jar")
    assert artifact == _coord("com.foo", "foo-tool", "1.0", "sources", "java-source")


def test_to_artifact_timestamped_snapshot(legacy_layout: LegacyLayout) -> None:
    artifact = legacy_layout.to_artifact("com.foo/jars/foo-tool-1.0-20060822.123456-3.jar")
    assert artifact.version == "1.0-20060822.123456-3"
    assert artifact.is_snapshot


@pytest.mark.parametrize(
    ("path", "error", "kind"),
    [
        ("commons-lang/commons-lang-2.1.jar", InvalidPathSegmentCountError, LayoutErrorKind.INVALID_PATH_SEGMENT_COUNT),
        ("com/foo/jars/foo-tool-1.0.jar", InvalidPathSegmentCountError, LayoutErrorKind.INVALID_PATH_SEGMENT_COUNT),
        ("commons-lang/jars/commons-lang-2", MissingExtensionError, LayoutErrorKind.MISSING_EXTENSION),
        ("commons-lang/jars/commons-lang-2.1.war", DirectoryTypeMismatchError, LayoutErrorKind.DIRECTORY_TYPE_MISMATCH),
        ("commons-lang/jars/commons-lang.jar", MissingVersionError, LayoutErrorKind.MISSING_VERSION),
        ("com.foo/jars/-1.0.jar", ArtifactIdMismatchError, LayoutErrorKind.ARTIFACT_ID_MISMATCH),
        ("com.foo/jars/foo-1.0-.jar", EmptyClassifierError, LayoutErrorKind.EMPTY_CLASSIFIER),
        ("com.foo/zips/foo-1.0.jar", DirectoryTypeMismatchError, LayoutErrorKind.DIRECTORY_TYPE_MISMATCH),
    ],
)
def test_to_artifact_rejects_invalid_paths(
    legacy_layout: LegacyLayout,
    path: str,
    error: type[LayoutException],
    kind: LayoutErrorKind,
) -> None:
    with pytest.raises(error) as excinfo:
        legacy_layout.to_artifact(path)
    assert excinfo.value.kind is kind


def test_sources_jar_directory_is_not_recoverable(legacy_layout: LegacyLayout) -> None:
    # `javadoc.jars` is only ever produced, never accepted back.
    path = legacy_layout.to_path(_coord("com.foo", "foo-tool", "1.0", "sources", "jar"))
    with pytest.raises(DirectoryTypeMismatchError):
        legacy_layout.to_artifact(path)


def test_distribution_directory_is_not_recoverable(legacy_layout: LegacyLayout) -> None:
    with pytest.raises(DirectoryTypeMismatchError):
        legacy_layout.to_artifact("org.example/distributions/dist-1.2.zip")


@pytest.mark.parametrize(
    "artifact",
    [
        _coord("commons-lang", "commons-lang", "2.1", None, "jar"),
        _coord("org.example", "app", "3.0", None, "war"),
        _coord("maven", "maven-model", "1.0-beta-2", None, "pom"),
        _coord("com.foo", "foo-tool", "1.0-SNAPSHOT", None, "jar"),
        _coord("com.foo", "foo-tool", "1.0", "sources", "java-source"),
        _coord("com.foo", "foo-tool", "1.0-20060822.123456-3", None, "jar"),
        _coord("com.foo", "foo-tool", "1.0", None, "zip"),
        _coord("com.foo", "foo-tool", "1.0", "bin", "zip"),
    ],
)
def test_round_trip(legacy_layout: LegacyLayout, artifact: ArtifactCoordinate) -> None:
    assert legacy_layout.to_artifact(legacy_layout.to_path(artifact)) == artifact


def test_to_project(legacy_layout: LegacyLayout) -> None:
    project = legacy_layout.to_project("commons-lang/jars/commons-lang-2.1.jar")
    assert project == ProjectCoordinate(group_id="commons-lang", artifact_id="commons-lang")


def test_to_project_rejects_metadata_directory(legacy_layout: LegacyLayout) -> None:
    with pytest.raises(InvalidPathSegmentCountError):
        legacy_layout.to_project("com.foo/metadata-xmls/")


def test_zip_directory_accepts_bare_extension(legacy_layout: LegacyLayout) -> None:
    assert legacy_layout.to_path(_coord("com.foo", "foo-tool", "1.0", None, "zip")) == "com.foo/zips/foo-tool-1.0.zip"
    artifact = legacy_layout.to_artifact("com.foo/zips/foo-tool-1.0.zip")
    assert artifact.type == "zip"


def test_sources_jar_in_jars_directory(legacy_layout: LegacyLayout) -> None:
    artifact = legacy_layout.to_artifact("com.foo/jars/foo-tool-1.0-sources.jar")
    assert artifact == _coord("com.foo", "foo-tool", "1.0", "sources", "jar")
