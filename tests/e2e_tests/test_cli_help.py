"""End-to-end smoke tests for the installed CLI entrypoint."""

from __future__ import annotations

import subprocess
from pathlib import Path

import model_batch_converter


def test_package_import_smoke() -> None:
    """Ensure package can be imported in the test process."""
    assert model_batch_converter.__version__


def test_cli_help_smoke() -> None:
    """Ensure the installed CLI entrypoint responds to --help."""
    result = subprocess.run(
        ["convert-models", "--help"],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 0, result.stderr
    assert "Batch-convert 3D model files" in result.stdout


def test_missing_default_input_directory_exits_with_one(tmp_path: Path) -> None:
    """With no ./assets/fbx_files the bare command fails before converting."""
    result = subprocess.run(
        ["convert-models"],
        capture_output=True,
        text=True,
        check=False,
        cwd=tmp_path,
    )

    assert result.returncode == 1
    assert "Could not list the directory" in result.stderr
    assert result.stdout == ""


def test_empty_default_input_directory_exits_with_zero(tmp_path: Path) -> None:
    """An empty ./assets/fbx_files converts nothing and succeeds."""
    (tmp_path / "assets" / "fbx_files").mkdir(parents=True)
    (tmp_path / "assets" / "alt_models").mkdir(parents=True)

    result = subprocess.run(
        ["convert-models"],
        capture_output=True,
        text=True,
        check=False,
        cwd=tmp_path,
    )

    assert result.returncode == 0, result.stderr
    assert list((tmp_path / "assets" / "alt_models").iterdir()) == []
