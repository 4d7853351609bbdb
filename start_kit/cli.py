"""
cli.py

Responsibility: CLI entrypoint for create-start-kit.

High-level flow:
1) Read settings from the environment, load the template catalog
2) Resolve CLI values + interactive answers -> `ProjectOptions`
3) Scaffold the project

Fatal errors are reported here and turned into a non-zero exit status. A
declined overwrite is a normal exit.
"""

from __future__ import annotations

import argparse
import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from start_kit import __version__
from start_kit.catalog import load_catalog
from start_kit.config import Settings
from start_kit.errors import StartKitError
from start_kit.options import OptionResolver, RawOptions
from start_kit.oracle import Oracle, RichOracle
from start_kit.runner import CommandRunner, SubprocessRunner
from start_kit.scaffolder import Scaffolder

logger = logging.getLogger("start_kit")

EXIT_INTERRUPTED = 130


def _configure_logging(level: int, console: Console) -> None:
    handler = RichHandler(console=console, show_time=False, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(level)
    logger.propagate = False


def _raw_options(args: argparse.Namespace) -> RawOptions:
    return RawOptions(
        project_name=args.project_name,
        template=args.template,
        package_manager=args.package_manager,
        install=bool(args.install),
        git=bool(args.git),
    )


def create_project(
    args: argparse.Namespace,
    *,
    settings: Settings,
    console: Console,
    oracle: Oracle | None = None,
    runner: CommandRunner | None = None,
) -> int:
    catalog = load_catalog(settings.catalog_path)
    oracle = oracle or RichOracle(console)
    runner = runner or SubprocessRunner(timeout=settings.command_timeout)

    options = OptionResolver(catalog, oracle).resolve(_raw_options(args))
    logger.debug("Resolved options: %s", options)

    Scaffolder(catalog=catalog, oracle=oracle, runner=runner, console=console).scaffold(options)
    return 0


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="create-start-kit",
        description="CLI tool to create projects from start-kit templates",
    )
    p.add_argument("project_name", nargs="?", default=None, metavar="project-name", help="Name of the project")
    p.add_argument("-t", "--template", default=None, help="Template to use")
    p.add_argument(
        "-p",
        "--package-manager",
        dest="package_manager",
        default=None,
        metavar="manager",
        help="Package manager to use (npm, yarn, pnpm, bun)",
    )
    p.add_argument("--no-install", dest="install", action="store_false", default=True, help="Skip dependency installation")
    p.add_argument("--no-git", dest="git", action="store_false", default=True, help="Skip git initialization")
    p.add_argument("-v", "--verbose", action="store_true", help="Log every external command")
    p.add_argument("--version", action="version", version=__version__)
    return p


def main(
    argv: list[str] | None = None,
    *,
    console: Console | None = None,
    oracle: Oracle | None = None,
    runner: CommandRunner | None = None,
) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    console = console or Console()

    try:
        settings = Settings.from_env()
    except StartKitError as e:
        console.print(f"[red]Error creating project:[/red] {escape(str(e))}")
        return 1
    _configure_logging(logging.DEBUG if args.verbose else settings.log_level_number, console)

    console.print("\n[bold blue]Welcome to Start-Kit Generator![/bold blue]\n")
    try:
        return create_project(args, settings=settings, console=console, oracle=oracle, runner=runner)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted.[/yellow]")
        return EXIT_INTERRUPTED
    except (StartKitError, OSError, EOFError) as e:
        # Printed, not logged: the log level must not hide a fatal error.
        logger.debug("Fatal error", exc_info=True)
        console.print(f"[red]Error creating project:[/red] {escape(str(e) or type(e).__name__)}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
