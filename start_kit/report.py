"""
report.py

Responsibility: Render the "next steps" guide printed after a project is created.

The output is deterministic for a given project name, package manager and
install outcome.
"""

from __future__ import annotations

from jinja2 import Environment, StrictUndefined

from start_kit.package_managers import PackageManager

NEXT_STEPS_TEMPLATE = """\
Next steps:
  cd {{ project_name }}
{% if not installed %}
  {{ install_command }}
{% endif %}
  {{ run_command }}
"""

_env = Environment(
    autoescape=False,
    undefined=StrictUndefined,
    keep_trailing_newline=True,
    trim_blocks=True,
)


def render_next_steps(project_name: str, package_manager: PackageManager, *, installed: bool) -> str:
    template = _env.from_string(NEXT_STEPS_TEMPLATE)
    return template.render(
        project_name=project_name,
        installed=installed,
        install_command=package_manager.install_command,
        run_command=package_manager.run_command,
    )


def next_steps(project_name: str, package_manager: PackageManager, *, installed: bool) -> list[str]:
    """
    The individual instructions of the guide, without the heading.
    """
    rendered = render_next_steps(project_name, package_manager, installed=installed)
    return [line.strip() for line in rendered.splitlines()[1:] if line.strip()]
