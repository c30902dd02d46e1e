"""
Package Manager Utilities
=========================

Runs the external installer (npm, yarn or pnpm). Every call blocks until
the installer exits and inherits this process's stdin/stdout/stderr, so the
installer's progress and errors reach the terminal unbuffered.
"""

import subprocess
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence

from depalign_common.constants import InstallerCommands
from depalign_common.errors import InstallerInvocationError
from depalign_common.logger import get_logger

from ..dependencies.spec import with_latest_marker

logger = get_logger(__name__)


class InstallAction(str, Enum):
    """What an installer invocation records in the manifest."""

    LIBRARY = "library"  # The requested library itself, as a prod dependency
    DEV = "dev"  # Dev-dependency adoption
    PROD = "prod"  # Prod-dependency alignment
    ALL = "all"  # Bare install from the manifest


@dataclass
class InstallStep:
    """One installer invocation, executed or (in dry-run mode) only planned."""

    action: InstallAction
    command: List[str]
    targets: List[str] = field(default_factory=list)
    executed: bool = True

    @property
    def command_line(self) -> str:
        return " ".join(self.command)


class PackageInstaller:
    """
    Issues installer commands against a host directory.

    Args:
        installer: npm, yarn or pnpm
        cwd: Directory the installer runs in (the host project)
        dry_run: Record and log commands without running them
    """

    def __init__(self, installer: str = "npm", cwd: Optional[Path] = None, dry_run: bool = False):
        self.installer = installer.lower()
        self.commands = InstallerCommands.for_installer(self.installer)
        self.cwd = Path(cwd) if cwd else None
        self.dry_run = dry_run
        self.history: List[InstallStep] = []

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def install_library(self, library_request: str) -> InstallStep:
        """Install a requested library as a prod dependency (``@latest`` unless pinned)."""
        target = with_latest_marker(library_request)
        return self._run(InstallAction.LIBRARY, self.commands["prod"], [target])

    def install_dev_dependencies(self, refs: Sequence[str]) -> Optional[InstallStep]:
        """Install refs as dev dependencies in one call; no call for an empty list."""
        if not refs:
            logger.debug("No dev dependencies to install")
            return None
        return self._run(InstallAction.DEV, self.commands["dev"], list(refs))

    def install_prod_dependencies(self, refs: Sequence[str]) -> Optional[InstallStep]:
        """Install refs as prod dependencies in one call; no call for an empty list."""
        if not refs:
            logger.debug("No prod dependencies to align")
            return None
        return self._run(InstallAction.PROD, self.commands["prod"], list(refs))

    def install_all(self) -> InstallStep:
        """Install everything the host manifest declares."""
        return self._run(InstallAction.ALL, self.commands["all"], [])

    # ------------------------------------------------------------------
    # Process execution
    # ------------------------------------------------------------------

    def _run(self, action: InstallAction, base: List[str], targets: List[str]) -> InstallStep:
        command = list(base) + targets
        step = InstallStep(action=action, command=command, targets=targets, executed=not self.dry_run)
        self.history.append(step)

        if self.dry_run:
            logger.info("Dry run, not executing", command=step.command_line)
            return step

        logger.info("Running installer", action=action.value, command=step.command_line)
        execute(command, cwd=self.cwd)
        return step


def execute(command: List[str], cwd: Optional[Path] = None) -> None:
    """
    Run a command to completion with inherited standard streams.

    Raises:
        InstallerInvocationError: If the command cannot be spawned or exits non-zero
    """
    try:
        subprocess.run(command, cwd=cwd, check=True)
    except FileNotFoundError as e:
        raise InstallerInvocationError(
            f"Installer not found: {command[0]}. Is it installed and on PATH?",
            command=command,
        ) from e
    except subprocess.CalledProcessError as e:
        raise InstallerInvocationError(
            f"Installer exited with status {e.returncode}: {' '.join(command)}",
            command=command,
            returncode=e.returncode,
        ) from e
    except OSError as e:
        raise InstallerInvocationError(
            f"Failed to start installer: {e}",
            command=command,
        ) from e


__all__ = [
    "InstallAction",
    "InstallStep",
    "PackageInstaller",
    "execute",
]
