"""
start_kit package

This package implements the `create-start-kit` scaffolding CLI.

Key responsibilities are split across modules:
- `catalog.py`: the immutable template catalog (built-ins plus optional YAML overlay)
- `package_managers.py`: the closed set of package managers and their commands
- `options.py`: two-phase resolution of CLI flags and interactive answers
- `oracle.py`: the interactive question/answer surface
- `runner.py`: synchronous external command execution
- `manifest.py`: `package.json` metadata patch
- `report.py`: completion report rendering
- `scaffolder.py`: the side-effecting project creation workflow
- `cli.py`: CLI entrypoint and wiring (settings -> catalog -> resolve -> scaffold)
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "1.0.0"
