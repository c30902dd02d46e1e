"""depalign SDK - align a host project's dependencies with a library's.

This package provides tools for:
- Translating manifest version specs into installer targets
- Locating and loading package manifests
- Reconciling donor and host dependency sets
- Driving npm/yarn/pnpm installs in a fixed order

Example:
    >>> from depalign_sdk import AlignConfig, align_libraries
    >>> config = AlignConfig(host_dir=Path("."), skip_install=True)
    >>> result = align_libraries(["eslint-config-acme"], config=config)

Package Structure:
    depalign_sdk/
    ├── dependencies/   - Spec translation, manifest model, reconciliation
    ├── utils/          - Manifest search, package manager invocation
    └── align.py        - Orchestration driver
"""

from depalign_common.config import AlignConfig

# Orchestration
from .align import AlignResult, DependencyAligner, align_libraries

# Dependencies
from .dependencies import (
    DependencyReconciler,
    Manifest,
    ManifestEntry,
    ReconciliationResult,
    adopt_dev_dependencies,
    align_prod_dependencies,
    parse_manifest_string,
    read_manifest,
    split_library_request,
    to_target_package_ref,
    to_target_package_refs,
    with_latest_marker,
)

# Utilities
from .utils import (
    InstallAction,
    InstallStep,
    NodeModuleResolver,
    PackageInstaller,
    find_manifest_path,
    load_host_manifest,
    load_manifest,
)

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "AlignConfig",
    # Orchestration
    "AlignResult",
    "DependencyAligner",
    "align_libraries",
    # Dependencies
    "ManifestEntry",
    "Manifest",
    "parse_manifest_string",
    "read_manifest",
    "to_target_package_ref",
    "to_target_package_refs",
    "split_library_request",
    "with_latest_marker",
    "DependencyReconciler",
    "ReconciliationResult",
    "adopt_dev_dependencies",
    "align_prod_dependencies",
    # Utilities
    "NodeModuleResolver",
    "find_manifest_path",
    "load_manifest",
    "load_host_manifest",
    "InstallAction",
    "InstallStep",
    "PackageInstaller",
]
