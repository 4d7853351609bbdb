"""Unit tests for the next-steps guide (start_kit.report)."""

from __future__ import annotations

import pytest

from start_kit.package_managers import PackageManager
from start_kit.report import next_steps, render_next_steps


@pytest.mark.unit
def test_render_without_install():
    assert render_next_steps("demo", PackageManager.PNPM, installed=False) == (
        "Next steps:\n  cd demo\n  pnpm install\n  pnpm dev\n"
    )


@pytest.mark.unit
def test_render_after_install():
    assert render_next_steps("demo", PackageManager.NPM, installed=True) == "Next steps:\n  cd demo\n  npm run dev\n"


@pytest.mark.unit
@pytest.mark.parametrize(
    "pm, expected",
    [
        (PackageManager.NPM, ["cd app", "npm install", "npm run dev"]),
        (PackageManager.YARN, ["cd app", "yarn", "yarn dev"]),
        (PackageManager.PNPM, ["cd app", "pnpm install", "pnpm dev"]),
        (PackageManager.BUN, ["cd app", "bun install", "bun dev"]),
    ],
)
def test_next_steps_per_package_manager(pm, expected):
    assert next_steps("app", pm, installed=False) == expected


@pytest.mark.unit
def test_unknown_package_manager_uses_npm_commands():
    assert next_steps("app", PackageManager.parse("cargo"), installed=False) == ["cd app", "npm install", "npm run dev"]
