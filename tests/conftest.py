"""Shared pytest fixtures for the create-start-kit test suite."""

from __future__ import annotations

import io
import logging
from pathlib import Path

import pytest
from rich.console import Console

from start_kit.catalog import builtin_catalog
from start_kit.options import ProjectOptions
from start_kit.package_managers import PackageManager


@pytest.fixture
def console() -> Console:
    """A console writing to memory, wide enough that messages never wrap."""
    return Console(file=io.StringIO(), width=200, color_system=None)


def console_text(console: Console) -> str:
    return console.file.getvalue()


@pytest.fixture
def catalog():
    return builtin_catalog()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An empty current working directory for the test."""
    cwd = tmp_path / "work"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


@pytest.fixture
def make_options():
    def _make(**overrides) -> ProjectOptions:
        values = {
            "project_name": "demo",
            "template_key": "start-kit",
            "package_manager": PackageManager.NPM,
            "install_dependencies": False,
            "initialize_version_control": False,
        }
        values.update(overrides)
        return ProjectOptions(**values)

    return _make


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo the CLI's logging setup so caplog sees records in every test."""
    yield
    package_logger = logging.getLogger("start_kit")
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
