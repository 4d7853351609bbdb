"""
package_managers.py

Responsibility: The closed set of supported package managers and the shell
commands the workflow runs or suggests for each of them.

Unrecognized names fall back to npm through `PackageManager.parse`; every other
function here is total over the enum.
"""

from __future__ import annotations

import logging
import shlex
from enum import Enum

logger = logging.getLogger(__name__)


class PackageManager(str, Enum):
    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"
    BUN = "bun"

    @classmethod
    def parse(cls, value: str | None) -> PackageManager:
        """
        Map a user-supplied name onto a package manager, defaulting to npm.
        """
        normalized = (value or "").strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        logger.warning("Unknown package manager %r, falling back to %s", value, cls.NPM.value)
        return cls.NPM

    @property
    def install_command(self) -> str:
        return _INSTALL_COMMANDS[self]

    @property
    def run_command(self) -> str:
        return _RUN_COMMANDS[self]

    @property
    def install_argv(self) -> list[str]:
        return shlex.split(self.install_command)


DEFAULT_PACKAGE_MANAGER = PackageManager.NPM

_INSTALL_COMMANDS: dict[PackageManager, str] = {
    PackageManager.NPM: "npm install",
    PackageManager.YARN: "yarn",
    PackageManager.PNPM: "pnpm install",
    PackageManager.BUN: "bun install",
}

_RUN_COMMANDS: dict[PackageManager, str] = {
    PackageManager.NPM: "npm run dev",
    PackageManager.YARN: "yarn dev",
    PackageManager.PNPM: "pnpm dev",
    PackageManager.BUN: "bun dev",
}
