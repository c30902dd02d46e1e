"""
Dependency Reconciliation
=========================

Decides what to install when a donor library is aligned into a host project.

Reconciliation Rules:
1. Dev dependencies: every donor devDependency is adopted, whatever the host
   currently has, so the host builds and tests with the donor's toolchain.
2. Prod dependencies: only donor dependencies the host already lists under
   "dependencies" are re-aligned. New production dependencies are never
   introduced. Host devDependencies are not consulted.

Both rules are pure functions of the two manifests.
"""

from dataclasses import dataclass, field
from typing import List

from depalign_common.logger import get_logger

from .manifest import Manifest
from .spec import to_target_package_ref, to_target_package_refs

logger = get_logger(__name__)


@dataclass
class ReconciliationResult:
    """Outcome of reconciling one donor against the host snapshot."""

    donor: str

    # Targets for the dev-dependency install, in donor order
    dev_targets: List[str] = field(default_factory=list)

    # Targets for the prod-dependency install, in donor order
    prod_targets: List[str] = field(default_factory=list)

    # Donor prod dependencies the host does not declare
    skipped: List[str] = field(default_factory=list)

    @property
    def is_noop(self) -> bool:
        return not self.dev_targets and not self.prod_targets


def adopt_dev_dependencies(donor: Manifest) -> List[str]:
    """
    Targets for every donor devDependency.

    Args:
        donor: The library's manifest

    Returns:
        Installable references, in the donor's key order
    """
    return to_target_package_refs(donor.dev_dependencies)


def align_prod_dependencies(donor: Manifest, host: Manifest) -> List[str]:
    """
    Targets for donor dependencies the host already depends on.

    Args:
        donor: The library's manifest
        host: The consuming project's manifest snapshot

    Returns:
        Installable references, in the donor's key order
    """
    return [
        to_target_package_ref(entry)
        for entry in donor.entries("dependencies")
        if host.declares(entry.name)
    ]


class DependencyReconciler:
    """
    Reconciles donors against a fixed host snapshot.

    The host manifest is captured once; reconcile() never re-reads it, so
    every donor processed in a run is compared with the same dependency set.
    """

    def __init__(self, host: Manifest):
        self.host = host

    def reconcile(self, donor: Manifest, donor_name: str = "") -> ReconciliationResult:
        name = donor_name or donor.name or "<unnamed>"
        result = ReconciliationResult(
            donor=name,
            dev_targets=adopt_dev_dependencies(donor),
            prod_targets=align_prod_dependencies(donor, self.host),
            skipped=[pkg for pkg in donor.dependencies if not self.host.declares(pkg)],
        )

        if result.skipped:
            logger.debug(
                "Host does not declare donor dependencies; not adding them",
                donor=name,
                skipped=",".join(result.skipped),
            )
        logger.debug(
            "Reconciled donor",
            donor=name,
            dev=len(result.dev_targets),
            prod=len(result.prod_targets),
        )
        return result
