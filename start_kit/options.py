"""
options.py

Responsibility: Turn command-line values plus interactive answers into one
complete `ProjectOptions`.

Resolution runs in two phases:
1) gather: start from the `RawOptions` supplied on the command line and ask the
   oracle for every field that is missing
2) validate: a single pass over the gathered values that either yields a
   `ProjectOptions` or raises `ResolutionError` listing every problem

The template key is intentionally not checked against the catalog here; the
scaffolder reports unknown keys as `TemplateNotFoundError` before touching the
filesystem.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from start_kit.catalog import TemplateCatalog
from start_kit.errors import ResolutionError, ValidationError
from start_kit.oracle import Choice, Oracle
from start_kit.package_managers import DEFAULT_PACKAGE_MANAGER, PackageManager

PROJECT_NAME_PATTERN = re.compile(r"[A-Za-z0-9_-]+")
DEFAULT_PROJECT_NAME = "my-project"


@dataclass(frozen=True)
class RawOptions:
    """Values as supplied on the command line; `None` or empty means "ask"."""

    project_name: str | None = None
    template: str | None = None
    package_manager: str | None = None
    install: bool = True
    git: bool = True


@dataclass(frozen=True)
class ProjectOptions:
    project_name: str
    template_key: str
    package_manager: PackageManager
    install_dependencies: bool
    initialize_version_control: bool


def validate_project_name(value: str) -> str:
    """
    Return the project name unchanged, or raise `ValidationError`.
    """
    if not value.strip():
        raise ValidationError("Project name is required")
    if not PROJECT_NAME_PATTERN.fullmatch(value):
        raise ValidationError("Project name can only contain letters, numbers, hyphens, and underscores")
    return value


@dataclass
class _Gathered:
    project_name: str
    template: str
    package_manager: str
    install: bool
    git: bool


class OptionResolver:
    def __init__(self, catalog: TemplateCatalog, oracle: Oracle) -> None:
        self._catalog = catalog
        self._oracle = oracle

    def resolve(self, raw: RawOptions) -> ProjectOptions:
        return self._validate(self._gather(raw))

    def _gather(self, raw: RawOptions) -> _Gathered:
        project_name = raw.project_name or self._ask_project_name()
        template = raw.template or self._ask_template()
        package_manager = raw.package_manager or self._ask_package_manager()

        # Always confirmed; the flags only change the suggested answer.
        install = self._oracle.ask_confirm("Install dependencies?", default=raw.install)
        git = self._oracle.ask_confirm("Initialize git repository?", default=raw.git)

        return _Gathered(
            project_name=project_name,
            template=template,
            package_manager=package_manager,
            install=install,
            git=git,
        )

    def _validate(self, gathered: _Gathered) -> ProjectOptions:
        errors: list[str] = []
        try:
            validate_project_name(gathered.project_name)
        except ValidationError as e:
            errors.append(f"Invalid project name {gathered.project_name!r}: {e}")

        if not gathered.template.strip():
            errors.append("Template is required")

        if errors:
            raise ResolutionError(errors)

        return ProjectOptions(
            project_name=gathered.project_name,
            template_key=gathered.template,
            package_manager=PackageManager.parse(gathered.package_manager),
            install_dependencies=gathered.install,
            initialize_version_control=gathered.git,
        )

    def _ask_project_name(self) -> str:
        while True:
            answer = self._oracle.ask_text("What is your project name?", default=DEFAULT_PROJECT_NAME)
            try:
                return validate_project_name(answer)
            except ValidationError as e:
                self._oracle.warn(str(e))

    def _ask_template(self) -> str:
        choices = [Choice(label=descriptor.label, value=key) for key, descriptor in self._catalog.items()]
        return self._oracle.ask_choice("Which template would you like to use?", choices)

    def _ask_package_manager(self) -> str:
        choices = [Choice(label=pm.value, value=pm.value) for pm in PackageManager]
        return self._oracle.ask_choice(
            "Which package manager would you like to use?",
            choices,
            default=DEFAULT_PACKAGE_MANAGER.value,
        )
