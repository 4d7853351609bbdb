"""
scaffolder.py

Responsibility: Create a project directory from resolved `ProjectOptions`.

Workflow (strictly sequential):
1) Look up the template (unknown key -> `TemplateNotFoundError`, nothing touched)
2) Check for an existing target directory; ask before overwriting it
3) Clone the template and strip its `.git` directory (failure -> `RetrievalError`)
4) Patch `package.json`'s `name`
5) Install dependencies (optional; failure is reported, not raised)
6) Initialize a fresh git repository (optional; failure is reported, not raised)
7) Print the next-steps guide

Best-effort steps return a `StepResult`. The driver only looks at it to decide
what to report; every later step still runs.
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from start_kit.catalog import TemplateCatalog, TemplateDescriptor
from start_kit.errors import InstallError, RetrievalError, StartKitError, VersionControlInitError
from start_kit.manifest import patch_manifest_name
from start_kit.options import ProjectOptions
from start_kit.oracle import Oracle
from start_kit.report import next_steps, render_next_steps
from start_kit.runner import CommandRunner

logger = logging.getLogger(__name__)

INITIAL_COMMIT_MESSAGE = "Initial commit"


class ScaffoldOutcome(str, Enum):
    DONE = "done"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class StepResult:
    name: str
    ok: bool
    reason: StartKitError | None = None

    @classmethod
    def success(cls, name: str) -> StepResult:
        return cls(name=name, ok=True)

    @classmethod
    def failed(cls, name: str, reason: StartKitError) -> StepResult:
        return cls(name=name, ok=False, reason=reason)


@dataclass(frozen=True)
class ScaffoldReport:
    outcome: ScaffoldOutcome
    target_dir: Path
    steps: list[StepResult] = field(default_factory=list)
    next_steps: list[str] = field(default_factory=list)

    def step(self, name: str) -> StepResult | None:
        for result in self.steps:
            if result.name == name:
                return result
        return None


def _remove_path(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()


class Scaffolder:
    def __init__(
        self,
        *,
        catalog: TemplateCatalog,
        oracle: Oracle,
        runner: CommandRunner,
        console: Console | None = None,
        cwd: str | Path | None = None,
    ) -> None:
        self._catalog = catalog
        self._oracle = oracle
        self._runner = runner
        self._console = console or Console()
        self._cwd = Path(cwd) if cwd is not None else None

    def scaffold(self, options: ProjectOptions) -> ScaffoldReport:
        template = self._catalog.require(options.template_key)
        base_dir = self._cwd if self._cwd is not None else Path.cwd()
        # Resolve the parent only; an existing symlink at the target is replaced, not followed.
        target_dir = base_dir.resolve() / options.project_name

        if target_dir.exists() or target_dir.is_symlink():
            overwrite = self._oracle.ask_confirm(
                f'Directory "{options.project_name}" already exists. Overwrite?',
                default=False,
            )
            if not overwrite:
                self._console.print("[yellow]Operation cancelled.[/yellow]")
                return ScaffoldReport(outcome=ScaffoldOutcome.CANCELLED, target_dir=target_dir)
            logger.info("Removing existing %s", target_dir)
            _remove_path(target_dir)

        self._console.print(
            f'\n[blue]Creating project "{options.project_name}" using {escape(template.display_name)}...[/blue]\n'
        )

        self._retrieve(template, target_dir)
        if patch_manifest_name(target_dir, options.project_name):
            logger.debug("Set package name to %s", options.project_name)

        steps: list[StepResult] = []
        if options.install_dependencies:
            steps.append(self._install(options, target_dir))
        if options.initialize_version_control:
            steps.append(self._init_version_control(target_dir))

        guide = self._complete(options)
        return ScaffoldReport(
            outcome=ScaffoldOutcome.DONE,
            target_dir=target_dir,
            steps=steps,
            next_steps=guide,
        )

    def _retrieve(self, template: TemplateDescriptor, target_dir: Path) -> None:
        self._console.print("Downloading template...")
        result = self._runner.run(
            ["git", "clone", "--depth", "1", template.source_location, str(target_dir)],
            cwd=target_dir.parent,
        )
        if not result.ok:
            self._console.print("[red]✗ Failed to download template[/red]")
            raise RetrievalError(f"Failed to download template {template.key}: {result.describe_failure()}")

        git_dir = target_dir / ".git"
        if git_dir.exists():
            _remove_path(git_dir)
        self._console.print("[green]✓[/green] Template downloaded successfully")

    def _install(self, options: ProjectOptions, target_dir: Path) -> StepResult:
        pm = options.package_manager
        self._console.print(f"Installing dependencies with {pm.value}...")
        result = self._runner.run(pm.install_argv, cwd=target_dir)
        if result.ok:
            self._console.print("[green]✓[/green] Dependencies installed successfully")
            return StepResult.success("install")

        error = InstallError(f"Failed to install dependencies with {pm.value}: {result.describe_failure()}")
        logger.warning("%s", error)
        self._console.print(f"[red]✗ Failed to install dependencies with {pm.value}[/red]")
        self._console.print(f"[yellow]You can install them manually later with: {pm.install_command}[/yellow]")
        return StepResult.failed("install", error)

    def _init_version_control(self, target_dir: Path) -> StepResult:
        self._console.print("Initializing git repository...")
        for argv in (
            ["git", "init"],
            ["git", "add", "."],
            ["git", "commit", "-m", INITIAL_COMMIT_MESSAGE],
        ):
            result = self._runner.run(argv, cwd=target_dir)
            if not result.ok:
                error = VersionControlInitError(f"Failed to initialize git repository: {result.describe_failure()}")
                logger.warning("%s", error)
                self._console.print("[red]✗ Failed to initialize git repository[/red]")
                self._console.print("[yellow]You can initialize git manually later[/yellow]")
                return StepResult.failed("git", error)

        self._console.print("[green]✓[/green] Git repository initialized")
        return StepResult.success("git")

    def _complete(self, options: ProjectOptions) -> list[str]:
        # A failed install has already printed its own manual hint.
        installed = options.install_dependencies
        self._console.print("\n[bold green]Project created successfully![/bold green]\n")
        guide = render_next_steps(options.project_name, options.package_manager, installed=installed)
        self._console.print(guide, markup=False, highlight=False)
        self._console.print("[dim]Happy coding![/dim]\n")
        return next_steps(options.project_name, options.package_manager, installed=installed)
