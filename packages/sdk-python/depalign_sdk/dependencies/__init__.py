"""
depalign Dependency Handling
============================

Provides utilities for:
- Translating manifest version specs into installer targets
- Reading package manifests
- Reconciling a donor library's dependencies against a host project

The reconciliation functions are pure; installing happens elsewhere.
"""

from .manifest import Manifest, parse_manifest_string, read_manifest
from .reconciler import (
    DependencyReconciler,
    ReconciliationResult,
    adopt_dev_dependencies,
    align_prod_dependencies,
)
from .spec import (
    ManifestEntry,
    has_version_marker,
    is_uri_spec,
    split_library_request,
    to_target_package_ref,
    to_target_package_refs,
    with_latest_marker,
)

__all__ = [
    # Translation
    "ManifestEntry",
    "is_uri_spec",
    "to_target_package_ref",
    "to_target_package_refs",
    "has_version_marker",
    "split_library_request",
    "with_latest_marker",
    # Manifests
    "Manifest",
    "parse_manifest_string",
    "read_manifest",
    # Reconciliation
    "DependencyReconciler",
    "ReconciliationResult",
    "adopt_dev_dependencies",
    "align_prod_dependencies",
]
