"""Align command - Install libraries and align the host's dependencies with them."""
from pathlib import Path
from typing import List, Optional

import typer
from rich.table import Table

from depalign_common import (
    DEPALIGN_VERSION,
    AlignConfig,
    InstallerInvocationError,
    SupportedValues,
    configure_logging,
)
from depalign_sdk import AlignResult, DependencyAligner

from .utils import console, error, handle_error, info, success, warning


def _version_callback(value: bool):
    if value:
        typer.echo(f"depalign {DEPALIGN_VERSION}")
        raise typer.Exit()


def _log_level_callback(value: Optional[str]):
    if value is not None and value.lower() not in SupportedValues.LOG_LEVELS:
        raise typer.BadParameter(
            f"'{value}' is not one of: {', '.join(SupportedValues.LOG_LEVELS)}"
        )
    return value.lower() if value else value


def render_result(result: AlignResult) -> None:
    """Print the per-library reconciliation and the installer commands."""
    table = Table(title="Dependency alignment", show_header=True, header_style="bold cyan")
    table.add_column("Library", style="cyan", no_wrap=True)
    table.add_column("Dev adopted", style="green")
    table.add_column("Prod aligned", style="green")
    table.add_column("Not in host", style="dim")

    for library, rec in zip(result.libraries, result.reconciliations):
        table.add_row(
            library,
            ", ".join(rec.dev_targets) or "-",
            ", ".join(rec.prod_targets) or "-",
            ", ".join(rec.skipped) or "-",
        )
    console.print(table)

    if result.dry_run:
        console.print("\n[bold]Commands that would run:[/bold]")
        for step in result.steps:
            console.print(f"  [cyan]{step.command_line}[/cyan]")


def align(
    libraries: Optional[List[str]] = typer.Argument(
        None,
        help="Libraries to install and align (e.g. my-lib or my-lib@1.2.0)",
        show_default=False,
    ),
    fix_only: bool = typer.Option(
        False,
        "--fix-only", "-f",
        help="Skip installing the libraries, only fix dependencies",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Print installer commands instead of running them",
    ),
    installer: Optional[str] = typer.Option(
        None,
        "--installer", "-i",
        help="Package manager to drive: npm, yarn or pnpm (default: npm)",
    ),
    host_dir: Optional[Path] = typer.Option(
        None,
        "--host-dir",
        help="Host project directory (default: current directory)",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        callback=_log_level_callback,
        help="Log level: debug, info, warning, error",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Show detailed output",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """
    Install libraries into the current project and align dependencies.

    For each library, in order:
    - install it (as library@latest unless a version is given)
    - install all of its devDependencies as dev dependencies
    - re-install its dependencies that this project already depends on,
      at the library's versions

    A final bare install runs once at the end.

    Examples:
        depalign
        depalign my-lib
        depalign my-lib@2.1.0 other-lib --installer yarn
        depalign --fix-only my-lib
        depalign --dry-run my-lib
    """
    try:
        config = AlignConfig.create(
            host_dir=host_dir,
            installer=installer,
            skip_install=fix_only or None,
            dry_run=dry_run or None,
            log_level=log_level,
        )
        configure_logging("debug" if verbose else config.log_level)

        requested = libraries or [config.default_library]
        if config.skip_install:
            info("Skipping library install, fixing dependencies only")
        if config.dry_run:
            warning("Dry run: no installer commands will be executed")
        info(f"Aligning [bold]{', '.join(requested)}[/bold] into {config.host_dir}")

        result = DependencyAligner(config).align(requested)

        console.print()
        render_result(result)
        console.print()
        success(f"Aligned {len(result.libraries)} librar{'y' if len(result.libraries) == 1 else 'ies'}")

    except typer.Exit:
        raise
    except KeyboardInterrupt:
        info("\nAlignment cancelled by user")
        raise typer.Exit(130)
    except InstallerInvocationError as e:
        error(e.message)
        raise typer.Exit(e.exit_code)
    except Exception as e:
        handle_error(e, verbose)
        raise typer.Exit(1)
