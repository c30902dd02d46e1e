"""
Workspace Utilities Module
==========================

Provides utilities for finding package manifests on disk:
- Resolving a package name to the directory of its entry file
- Walking up from that directory to the owning package.json
- Loading the host project's manifest
"""

import json
from pathlib import Path
from typing import Callable, List, Optional, Union

from depalign_common.config import AlignConfig
from depalign_common.constants import Defaults
from depalign_common.errors import ManifestNotFoundError
from depalign_common.logger import get_logger

from ..dependencies.manifest import Manifest, read_manifest
from ..dependencies.spec import split_library_request

logger = get_logger(__name__)

PackageResolver = Callable[[str], Path]
"""Maps a package name to the directory containing its entry file."""


# ============================================================================
# Package Resolution
# ============================================================================


class NodeModuleResolver:
    """
    Resolve packages the way Node's ``require.resolve`` does for bare names.

    Walks up from ``base_dir`` looking for ``node_modules/<name>``. The entry
    file is the package's ``main`` field (``index.js`` when absent) and the
    directory containing it is returned. That directory may sit below the
    package root (e.g. ``lib/``), which the manifest search recovers from.
    """

    def __init__(self, base_dir: Path, modules_dirname: str = Defaults.MODULES_DIRNAME):
        self.base_dir = Path(base_dir)
        self.modules_dirname = modules_dirname

    def __call__(self, name: str) -> Path:
        current = self.base_dir.resolve()
        for parent in [current] + list(current.parents):
            package_dir = parent / self.modules_dirname / name
            if package_dir.is_dir():
                entry = package_dir / self._entry_file(package_dir)
                logger.debug("Resolved package", package=name, entry=str(entry))
                return entry.parent

        raise ManifestNotFoundError(
            f"Cannot resolve package '{name}' from {self.base_dir}",
            package=name,
        )

    @staticmethod
    def _entry_file(package_dir: Path) -> str:
        manifest_path = package_dir / Defaults.MANIFEST_FILENAME
        if manifest_path.is_file():
            return read_manifest_main(manifest_path) or Defaults.ENTRY_FILENAME
        return Defaults.ENTRY_FILENAME


def read_manifest_main(manifest_path: Path) -> Optional[str]:
    """Return the ``main`` field of a package.json, or None if unusable."""
    try:
        data = json.loads(manifest_path.read_text(encoding="utf-8-sig"))
    except ValueError:
        return None
    main = data.get("main") if isinstance(data, dict) else None
    return main if isinstance(main, str) and main else None


# ============================================================================
# Manifest Search
# ============================================================================


def find_manifest_path(
    start_dir: Path,
    manifest_filename: str = Defaults.MANIFEST_FILENAME,
    max_depth: int = Defaults.MAX_SEARCH_DEPTH,
    package: Optional[str] = None,
) -> Path:
    """
    Find the nearest manifest at or above ``start_dir``.

    Stops when the parent of the current directory is the directory itself
    (filesystem root) or after ``max_depth`` directories.

    Raises:
        ManifestNotFoundError: If no manifest is found
    """
    current = Path(start_dir).resolve()
    if not current.is_dir():
        raise ManifestNotFoundError(
            f"Package directory does not exist: {current}",
            package=package,
            searched=[str(current)],
        )

    searched: List[str] = []
    for _ in range(max_depth):
        searched.append(str(current))
        if manifest_filename in {entry.name for entry in current.iterdir()}:
            found = current / manifest_filename
            logger.debug("Found manifest", path=str(found))
            return found

        parent = current.parent
        if parent == current:
            raise ManifestNotFoundError(
                f"No {manifest_filename} found in {start_dir} or any parent directory",
                package=package,
                searched=searched,
            )
        current = parent

    raise ManifestNotFoundError(
        f"No {manifest_filename} found within {max_depth} directories of {start_dir}",
        package=package,
        searched=searched,
    )


def resolve_package_dir(
    package_name: str,
    config: AlignConfig,
    resolver: Optional[PackageResolver] = None,
) -> Path:
    """
    Directory to start the manifest search from.

    The configured default library lives at a fixed path; everything else
    goes through the resolver.
    """
    if package_name == config.default_library:
        return config.resolved_default_library_dir
    resolve = resolver or NodeModuleResolver(config.host_dir)
    return Path(resolve(package_name))


def load_manifest(
    package_name: str,
    config: Optional[AlignConfig] = None,
    resolver: Optional[PackageResolver] = None,
) -> Manifest:
    """
    Locate and load a package's manifest.

    Args:
        package_name: Package name; a trailing ``@version`` is ignored
        config: Run configuration (defaults to AlignConfig())
        resolver: Package-name -> entry-directory lookup

    Raises:
        ManifestNotFoundError: If the package or its manifest cannot be found
        ManifestParseError: If the manifest is malformed
    """
    config = config or AlignConfig()
    name, _ = split_library_request(package_name)
    start_dir = resolve_package_dir(name, config, resolver)
    manifest_path = find_manifest_path(
        start_dir,
        manifest_filename=config.manifest_filename,
        max_depth=config.max_search_depth,
        package=name,
    )
    logger.info("Loading manifest", package=name, path=str(manifest_path))
    return read_manifest(manifest_path)


def load_host_manifest(config_or_dir: Union[AlignConfig, Path, str]) -> Manifest:
    """
    Load the host project's manifest from its directory.

    Raises:
        ManifestNotFoundError: If the host has no manifest
        ManifestParseError: If it is malformed
    """
    if isinstance(config_or_dir, AlignConfig):
        manifest_path = config_or_dir.host_manifest_path
    else:
        manifest_path = Path(config_or_dir) / Defaults.MANIFEST_FILENAME

    if not manifest_path.is_file():
        raise ManifestNotFoundError(
            f"Host manifest not found: {manifest_path}",
            searched=[str(manifest_path.parent)],
        )
    return read_manifest(manifest_path)


__all__ = [
    "PackageResolver",
    "NodeModuleResolver",
    "read_manifest_main",
    "find_manifest_path",
    "resolve_package_dir",
    "load_manifest",
    "load_host_manifest",
]
