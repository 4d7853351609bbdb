"""Unit tests for the package.json patch (start_kit.manifest)."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from start_kit.errors import ManifestError
from start_kit.manifest import patch_manifest_name


@pytest.mark.unit
def test_rewrites_name_only(tmp_path: Path):
    manifest = tmp_path / "package.json"
    manifest.write_text(
        '{"name": "old", "version": "1.2.3", "scripts": {"dev": "vite", "build": "vite build"}, "private": true}',
        encoding="utf-8",
    )

    assert patch_manifest_name(tmp_path, "demo") is True

    text = manifest.read_text(encoding="utf-8")
    assert text == (
        "{\n"
        '  "name": "demo",\n'
        '  "version": "1.2.3",\n'
        '  "scripts": {\n'
        '    "dev": "vite",\n'
        '    "build": "vite build"\n'
        "  },\n"
        '  "private": true\n'
        "}\n"
    )


@pytest.mark.unit
def test_adds_missing_name(tmp_path: Path):
    (tmp_path / "package.json").write_text('{"version": "0.1.0"}', encoding="utf-8")
    patch_manifest_name(tmp_path, "demo")
    data = json.loads((tmp_path / "package.json").read_text(encoding="utf-8"))
    assert data == {"version": "0.1.0", "name": "demo"}


@pytest.mark.unit
def test_no_manifest_is_skipped(tmp_path: Path):
    assert patch_manifest_name(tmp_path, "demo") is False
    assert not (tmp_path / "package.json").exists()


@pytest.mark.unit
def test_non_object_manifest(tmp_path: Path):
    (tmp_path / "package.json").write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ManifestError, match="JSON object"):
        patch_manifest_name(tmp_path, "demo")


@pytest.mark.unit
def test_invalid_json(tmp_path: Path):
    (tmp_path / "package.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ManifestError, match="Failed reading"):
        patch_manifest_name(tmp_path, "demo")
