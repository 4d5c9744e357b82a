"""Tests for the artifact-layout CLI."""
from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from artifact_layout.cli import app

runner = CliRunner()


def _touch(root: Path, rel_path: str) -> None:
    path = root / rel_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("", encoding="utf-8")


def test_to_path_default_layout() -> None:
    result = runner.invoke(app, ["to-path", "com.foo", "foo-tool", "1.0"])
    assert result.exit_code == 0
    assert result.output.strip() == "com/foo/foo-tool/1.0/foo-tool-1.0.jar"


def test_to_path_legacy_layout_with_type() -> None:
    result = runner.invoke(
        app, ["to-path", "com.foo", "foo-client", "1.0", "--type", "ejb-client", "--layout", "legacy"]
    )
    assert result.exit_code == 0
    assert result.output.strip() == "com.foo/ejbs/foo-client-1.0.jar"


def test_to_path_uses_layout_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ARTIFACT_LAYOUT", "legacy")
    result = runner.invoke(app, ["to-path", "com.foo", "foo-tool", "1.0", "-c", "sources", "-t", "java-source"])
    assert result.exit_code == 0
    assert result.output.strip() == "com.foo/java-sources/foo-tool-1.0-sources.jar"


def test_to_path_without_version_prints_project_directory() -> None:
    result = runner.invoke(app, ["to-path", "com.foo", "foo-tool"])
    assert result.exit_code == 0
    assert result.output.strip() == "com/foo/foo-tool/"


def test_to_path_unknown_type() -> None:
    result = runner.invoke(app, ["to-path", "com.foo", "foo-tool", "1.0", "--type", "bogus"])
    assert result.exit_code == 1
    assert "Error" in result.output


def test_project_path() -> None:
    result = runner.invoke(app, ["project-path", "com.foo", "foo-tool", "--layout", "legacy"])
    assert result.exit_code == 0
    assert result.output.strip() == "com.foo/metadata-xmls/"


def test_to_artifact() -> None:
    result = runner.invoke(app, ["to-artifact", "com/foo/foo-connector/2.1-SNAPSHOT/foo-connector-2.1-20060822.123456-35.jar"])
    assert result.exit_code == 0
    assert "foo-connector" in result.output
    assert "2.1-20060822.123456-35" in result.output


def test_to_artifact_invalid_path() -> None:
    result = runner.invoke(app, ["to-artifact", "invalid/invalid-1.0.jar"])
    assert result.exit_code == 1
    assert "Error" in result.output


def test_invalid_layout_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ARTIFACT_LAYOUT", "maven3")
    result = runner.invoke(app, ["to-path", "com.foo", "foo-tool", "1.0"])
    assert result.exit_code == 2


def test_scan_clean_repository(tmp_path: Path) -> None:
    _touch(tmp_path, "com/foo/foo-tool/1.0/foo-tool-1.0.jar")
    result = runner.invoke(app, ["scan", str(tmp_path), "--tasks", "internal"])
    assert result.exit_code == 0
    assert "foo-tool" in result.output
    assert "Indexing tasks" in result.output
    assert "finish" in result.output
    assert "Parsed" in result.output


def test_scan_reports_failures(tmp_path: Path) -> None:
    _touch(tmp_path, "com/foo/foo-tool/1.0/foo-tool-2.0.jar")
    result = runner.invoke(app, ["scan", str(tmp_path)])
    assert result.exit_code == 1
    assert "VersionMismatch" in result.output


def test_scan_missing_root(tmp_path: Path) -> None:
    result = runner.invoke(app, ["scan", str(tmp_path / "nope")])
    assert result.exit_code == 1


def test_scan_rejects_a_single_file(tmp_path: Path) -> None:
    _touch(tmp_path, "com/foo/foo-tool/1.0/foo-tool-1.0.jar")
    result = runner.invoke(app, ["scan", str(tmp_path / "com/foo/foo-tool/1.0/foo-tool-1.0.jar")])
    assert result.exit_code == 1
    assert "Not a repository directory" in result.output


def test_to_artifact_with_leading_hyphen() -> None:
    result = runner.invoke(app, ["to-artifact", "com.foo/jars/-1.0.jar", "--layout", "legacy"])
    assert result.exit_code == 1
    assert "Error:" in result.output
