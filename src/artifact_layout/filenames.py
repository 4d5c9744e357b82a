"""Split artifact filenames into artifact id, version, classifier and extension.

Filenames carry no explicit delimiters: artifact ids, versions and classifiers
are all hyphen-separated free text. The split is resolved deterministically:

  1. The extension comes off first (compound extensions from the type table win).
  2. A known artifact id is stripped as a prefix; without one, the artifact id
     runs up to the first hyphen token that starts with a digit.
  3. Timestamped snapshot versions are matched before anything else, since their
     shape is fixed.
  4. A version known from the directory splits off the classifier verbatim.
  5. Otherwise a trailing token that does not look like part of a version is
     the classifier.
"""

from __future__ import annotations

import logging
import re

from artifact_layout.exceptions import ArtifactIdMismatchError, EmptyClassifierError, MissingVersionError
from artifact_layout.extensions import ExtensionTypeTable
from artifact_layout.models import FilenameParts
from artifact_layout.snapshots import TIMESTAMP_VERSION_RE


logger = logging.getLogger(__name__)

_DEFAULT_EXTENSIONS = ExtensionTypeTable()

# Tokens that continue a version rather than start a classifier.
_VERSION_KEYWORD_RE = re.compile(
    r"^(?:"
    r"[0-9][_.0-9a-z]*"
    r"|snapshot"
    r"|g?[_.0-9ab]*(?:pre|rc|g|m)[_.0-9]*"
    r"|dev[_.0-9]*"
    r"|alpha[_.0-9]*"
    r"|beta[_.0-9]*"
    r"|rc[_.0-9]*"
    r"|debug[_.0-9]*"
    r"|unofficial[_.0-9]*"
    r"|current"
    r"|latest"
    r"|fcs"
    r"|release[_.0-9]*"
    r"|nightly"
    r"|final"
    r"|incubating"
    r"|incubator"
    r"|[ab][_.0-9]+"
    r")$",
    re.IGNORECASE,
)

# `<base>-<yyyyMMdd.HHmmss>-<build>-<classifier>`; the classifier may hold hyphens.
_TIMESTAMP_WITH_CLASSIFIER_RE = re.compile(r"^(?P<version>.+?-\d{8}\.\d{6}-\d+)-(?P<classifier>.+)$")


def is_version_keyword(token: str) -> bool:
    """Return True if a hyphen token reads as part of a version (e.g. `2`, `beta`, `SNAPSHOT`)."""
    return _VERSION_KEYWORD_RE.match(token) is not None


def _split_artifact_id(stem: str, filename: str) -> tuple[str, str]:
    tokens = stem.split("-")
    if not tokens[0]:
        raise ArtifactIdMismatchError(f"Filename '{filename}' does not start with an artifact id")
    for i in range(1, len(tokens)):
        if tokens[i][:1].isdigit():
            return "-".join(tokens[:i]), "-".join(tokens[i:])
    raise MissingVersionError(f"Unable to determine version from filename '{filename}'")


def _split_version(remainder: str, known_version: str | None) -> tuple[str, str | None]:
    if TIMESTAMP_VERSION_RE.match(remainder):
        return remainder, None

    m = _TIMESTAMP_WITH_CLASSIFIER_RE.match(remainder)
    if m:
        return m.group("version"), m.group("classifier")

    if known_version:
        if remainder == known_version:
            return remainder, None
        if remainder.startswith(known_version + "-"):
            return known_version, remainder[len(known_version) + 1 :]

    head, sep, tail = remainder.rpartition("-")
    if sep and head and tail and not is_version_keyword(tail):
        return head, tail
    return remainder, None


def decompose(
    filename: str,
    known_artifact_id: str | None = None,
    *,
    known_version: str | None = None,
    extensions: ExtensionTypeTable | None = None,
) -> FilenameParts:
    """Decompose an artifact filename.

    Args:
        filename: Bare filename, e.g. `foo-lib-2.1-alpha-1-sources.jar`.
        known_artifact_id: Artifact id taken from the path, if the layout has one.
        known_version: Version taken from the version directory, if the layout has one.
        extensions: Type table that defines compound extensions.

    Raises:
        MissingExtensionError: If the filename has no extension.
        ArtifactIdMismatchError: If the filename does not start with `known_artifact_id-`,
            or, without a known id, starts with a hyphen.
        MissingVersionError: If no version can be located.
        EmptyClassifierError: If the stem ends with a dangling hyphen.

    Returns:
        The filename's `FilenameParts`.
    """
    table = extensions or _DEFAULT_EXTENSIONS
    name = filename.strip()
    stem, extension = table.split_extension(name)

    if known_artifact_id is not None:
        prefix = known_artifact_id + "-"
        if not stem.startswith(prefix):
            raise ArtifactIdMismatchError(
                f"Filename '{filename}' does not start with artifact id '{known_artifact_id}'"
            )
        artifact_id = known_artifact_id
        remainder = stem[len(prefix) :]
    else:
        artifact_id, remainder = _split_artifact_id(stem, filename)

    if remainder.endswith("-"):
        raise EmptyClassifierError(f"Filename '{filename}' ends with a hyphen but has no classifier")

    version, classifier = _split_version(remainder, known_version)
    if not version:
        raise MissingVersionError(f"Unable to determine version from filename '{filename}'")

    parts = FilenameParts(
        artifact_id=artifact_id,
        version=version,
        classifier=classifier,
        extension=extension,
    )
    logger.debug("Decomposed %s into %s", filename, parts)
    return parts
