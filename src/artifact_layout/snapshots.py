"""Snapshot version handling.

A snapshot is declared as `<base>-SNAPSHOT`. Each deployed build of it is a
timestamped snapshot, `<base>-<yyyyMMdd>.<HHmmss>-<buildNumber>`, stored in the
`<base>-SNAPSHOT` directory while the filename keeps the exact timestamp.
"""

from __future__ import annotations

import re

from artifact_layout.exceptions import VersionMismatchError


SNAPSHOT = "SNAPSHOT"
SNAPSHOT_SUFFIX = "-" + SNAPSHOT

TIMESTAMP_VERSION_RE = re.compile(r"^(?P<base>.+)-(?P<timestamp>\d{8}\.\d{6})-(?P<build>\d+)$")


def is_timestamped_snapshot(version: str) -> bool:
    return TIMESTAMP_VERSION_RE.match(version) is not None


def is_snapshot(version: str) -> bool:
    """Return True for `-SNAPSHOT` versions and timestamped snapshot builds."""
    return version.endswith(SNAPSHOT) or is_timestamped_snapshot(version)


def base_version(version: str) -> str:
    """Strip a `-SNAPSHOT` or timestamp+build suffix.

    Examples:
        `2.1-SNAPSHOT` -> `2.1`
        `2.1-20060822.123456-35` -> `2.1`
        `2.1` -> `2.1`
    """
    m = TIMESTAMP_VERSION_RE.match(version)
    if m:
        return m.group("base")
    if version.endswith(SNAPSHOT_SUFFIX):
        return version[: -len(SNAPSHOT_SUFFIX)]
    return version


def directory_version(version: str) -> str:
    """Return the version directory name for `version`.

    Timestamped snapshots live under `<base>-SNAPSHOT`; any other version is its
    own directory.
    """
    if is_timestamped_snapshot(version):
        return base_version(version) + SNAPSHOT_SUFFIX
    return version


def reconcile(dir_version: str, file_version: str, *, path: str | None = None) -> None:
    """Check that a filename version may live in a version directory.

    Rules:
      - A timestamped file version requires a `<base>-SNAPSHOT` directory with the same base.
      - Any other file version must equal the directory version exactly.

    Raises:
        VersionMismatchError: If the combination is not allowed.
    """
    if is_timestamped_snapshot(file_version):
        if not dir_version.endswith(SNAPSHOT_SUFFIX):
            raise VersionMismatchError(
                f"Timestamped snapshot {file_version} is not inside a snapshot directory ({dir_version})",
                path=path,
            )
        if base_version(file_version) != base_version(dir_version):
            raise VersionMismatchError(
                f"Timestamped snapshot {file_version} does not belong to {dir_version}",
                path=path,
            )
        return

    if file_version != dir_version:
        if dir_version.endswith(SNAPSHOT_SUFFIX):
            message = f"Non-snapshot version {file_version} inside snapshot directory {dir_version}"
        else:
            message = f"Filename version {file_version} does not match directory version {dir_version}"
        raise VersionMismatchError(message, path=path)
