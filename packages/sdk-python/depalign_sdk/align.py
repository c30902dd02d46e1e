"""
depalign Alignment Module
=========================

Drives a full alignment run:
- Install each requested library (unless skipped)
- Load its manifest
- Adopt its dev dependencies and align shared prod dependencies
- Finish with one bare install so the dependency tree matches the manifest

The host manifest is read once, before the first library, and every
reconciliation in the run is made against that snapshot even though the
installs rewrite the file on disk.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from depalign_common.config import AlignConfig
from depalign_common.logger import get_logger

from .dependencies.manifest import Manifest
from .dependencies.reconciler import DependencyReconciler, ReconciliationResult
from .dependencies.spec import split_library_request
from .utils.package_manager import InstallStep, PackageInstaller
from .utils.workspace import PackageResolver, load_host_manifest, load_manifest

logger = get_logger(__name__)


@dataclass
class AlignResult:
    """Summary of an alignment run."""

    libraries: List[str]

    # Per-library reconciliation, parallel to libraries (repeated requests keep their own entry)
    reconciliations: List[ReconciliationResult] = field(default_factory=list)

    # Installer invocations in the order they were issued
    steps: List[InstallStep] = field(default_factory=list)

    dry_run: bool = False


class DependencyAligner:
    """
    Sequences locate -> reconcile -> install for a list of libraries.

    Args:
        config: Run configuration
        installer: Installer to drive (built from config when omitted)
        resolver: Package-name -> entry-directory lookup for the locator
    """

    def __init__(
        self,
        config: Optional[AlignConfig] = None,
        installer: Optional[PackageInstaller] = None,
        resolver: Optional[PackageResolver] = None,
    ):
        self.config = config or AlignConfig()
        self.installer = installer or PackageInstaller(
            installer=self.config.installer,
            cwd=self.config.host_dir,
            dry_run=self.config.dry_run,
        )
        self.resolver = resolver

    def align(self, libraries: Optional[Sequence[str]] = None, host: Optional[Manifest] = None) -> AlignResult:
        """
        Align every requested library into the host.

        Args:
            libraries: Library requests; defaults to the configured default library
            host: Host manifest snapshot; loaded from config.host_dir when omitted

        Returns:
            AlignResult with reconciliations and installer steps

        Raises:
            ManifestNotFoundError: A manifest could not be located
            ManifestParseError: A manifest is malformed
            InstallerInvocationError: The installer failed; later steps are not run
        """
        requests = list(libraries) if libraries else [self.config.default_library]
        snapshot = host if host is not None else load_host_manifest(self.config)
        reconciler = DependencyReconciler(snapshot)
        history_start = len(self.installer.history)

        result = AlignResult(libraries=requests, dry_run=self.config.dry_run)
        logger.info(
            "Starting alignment",
            libraries=",".join(requests),
            installer=self.config.installer,
            skip_install=self.config.skip_install,
        )

        for request in requests:
            result.reconciliations.append(self._align_library(request, reconciler))

        self.installer.install_all()
        result.steps = self.installer.history[history_start:]

        logger.info("Alignment finished", libraries=len(requests), steps=len(result.steps))
        return result

    def _align_library(self, request: str, reconciler: DependencyReconciler) -> ReconciliationResult:
        name, _ = split_library_request(request)

        if not self.config.skip_install:
            self.installer.install_library(request)

        donor = load_manifest(name, self.config, self.resolver)
        reconciliation = reconciler.reconcile(donor, donor_name=name)

        self.installer.install_dev_dependencies(reconciliation.dev_targets)
        self.installer.install_prod_dependencies(reconciliation.prod_targets)
        return reconciliation


def align_libraries(
    libraries: Optional[Sequence[str]] = None,
    config: Optional[AlignConfig] = None,
    installer: Optional[PackageInstaller] = None,
    resolver: Optional[PackageResolver] = None,
) -> AlignResult:
    """
    Convenience function to run an alignment.

    Args:
        libraries: Library requests (default: config.default_library)
        config: Run configuration
        installer: Installer override (mainly for tests)
        resolver: Package resolver override

    Returns:
        AlignResult
    """
    aligner = DependencyAligner(config=config, installer=installer, resolver=resolver)
    return aligner.align(libraries)
