"""
catalog.py

Responsibility: Load the template catalog into an immutable, typed mapping.

The built-in templates ship as package data (`catalog.yaml`). An optional overlay
file with the same schema can add entries or replace built-in ones by key:

    templates:
      <key>:
        name: <display name>
        repo: <git repository address>
        description: <one line>

The catalog is built once at process start and handed to the resolver and the
scaffolder; nothing mutates it afterwards.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from start_kit.errors import CatalogError, TemplateNotFoundError


@dataclass(frozen=True)
class TemplateDescriptor:
    """A remote template that a project can be created from."""

    key: str
    display_name: str
    source_location: str
    description: str = ""

    @property
    def label(self) -> str:
        return f"{self.display_name} - {self.description}"


class TemplateCatalog(Mapping[str, TemplateDescriptor]):
    """Read-only mapping of template key -> `TemplateDescriptor`, in file order."""

    def __init__(self, descriptors: list[TemplateDescriptor] | tuple[TemplateDescriptor, ...]) -> None:
        entries: dict[str, TemplateDescriptor] = {}
        for descriptor in descriptors:
            entries[descriptor.key] = descriptor
        self._entries = MappingProxyType(entries)

    def __getitem__(self, key: str) -> TemplateDescriptor:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def require(self, key: str) -> TemplateDescriptor:
        try:
            return self._entries[key]
        except KeyError:
            raise TemplateNotFoundError(key) from None

    def merged_with(self, other: TemplateCatalog) -> TemplateCatalog:
        """
        Return a new catalog with `other`'s entries layered on top.
        Replaced keys keep their original position; new keys are appended.
        """
        combined = dict(self._entries)
        combined.update(other._entries)
        return TemplateCatalog(list(combined.values()))


def _parse_entry(key: Any, raw: Any, source: str) -> TemplateDescriptor:
    if not isinstance(raw, dict):
        raise CatalogError(f"{source}: template `{key}` must be a mapping.")
    name = str(raw.get("name") or "").strip()
    repo = str(raw.get("repo") or "").strip()
    if not name:
        raise CatalogError(f"{source}: template `{key}` must define `name`.")
    if not repo:
        raise CatalogError(f"{source}: template `{key}` must define `repo`.")
    return TemplateDescriptor(
        key=str(key),
        display_name=name,
        source_location=repo,
        description=str(raw.get("description") or "").strip(),
    )


def parse_catalog(text: str, *, source: str = "<catalog>") -> TemplateCatalog:
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise CatalogError(f"{source}: invalid YAML: {e}") from e
    if not isinstance(data, dict):
        raise CatalogError(f"{source}: catalog must be a mapping at the top level.")

    templates = data.get("templates") or {}
    if not isinstance(templates, dict):
        raise CatalogError(f"{source}: `templates` must be a mapping of key -> template.")

    return TemplateCatalog([_parse_entry(key, raw, source) for key, raw in templates.items()])


def builtin_catalog() -> TemplateCatalog:
    text = resources.files("start_kit").joinpath("catalog.yaml").read_text(encoding="utf-8")
    return parse_catalog(text, source="catalog.yaml")


def load_catalog(extra_path: str | Path | None = None) -> TemplateCatalog:
    """
    Build the catalog used for one run: built-ins, then the optional overlay file.
    """
    catalog = builtin_catalog()
    if extra_path is None:
        return catalog

    path = Path(extra_path)
    if not path.is_file():
        raise CatalogError(f"Catalog file does not exist: {path}")
    overlay = parse_catalog(path.read_text(encoding="utf-8"), source=str(path))
    return catalog.merged_with(overlay)
