"""
Utilities Module
================

Shared utilities for the depalign SDK:
- Package resolution and upward manifest search
- Package manager invocation (npm/yarn/pnpm)
"""

from .package_manager import (
    InstallAction,
    InstallStep,
    PackageInstaller,
    execute,
)
from .workspace import (
    NodeModuleResolver,
    PackageResolver,
    find_manifest_path,
    load_host_manifest,
    load_manifest,
    resolve_package_dir,
)

__all__ = [
    # Workspace / manifest search
    "PackageResolver",
    "NodeModuleResolver",
    "find_manifest_path",
    "resolve_package_dir",
    "load_manifest",
    "load_host_manifest",
    # Package manager
    "InstallAction",
    "InstallStep",
    "PackageInstaller",
    "execute",
]
