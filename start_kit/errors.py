"""
errors.py

Exception taxonomy for create-start-kit.

Fatal errors (`TemplateNotFoundError`, `RetrievalError`, ...) unwind to the CLI,
which reports them and exits non-zero. `InstallError` and
`VersionControlInitError` are non-fatal: the scaffolder catches them at the step
boundary and carries them as the reason of a failed step.
"""

from __future__ import annotations


class StartKitError(RuntimeError):
    pass


class ValidationError(StartKitError, ValueError):
    """Invalid interactive input; the caller re-asks."""


class ResolutionError(StartKitError):
    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class ConfigError(StartKitError):
    pass


class CatalogError(StartKitError):
    pass


class TemplateNotFoundError(StartKitError):
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f'Template "{key}" not found')


class RetrievalError(StartKitError):
    pass


class ManifestError(StartKitError):
    pass


class InstallError(StartKitError):
    pass


class VersionControlInitError(StartKitError):
    pass
