"""
Version Spec Translation
========================

Turns a manifest dependency entry (name + version spec) into the target
string handed to the installer:

- URI specs (git+https://..., file://..., https://...) are used as-is
- Caret/tilde ranges are pinned to their floor: ^1.2.3 -> name@1.2.3
- Anything else becomes name@spec

Also parses library requests such as "lodash@4.17.0" or "@scope/pkg".
"""

import re
from dataclasses import dataclass
from typing import List, Mapping, Optional, Tuple

from depalign_common.constants import Defaults, Patterns

_URI_SPEC = re.compile(Patterns.URI_VERSION_SPEC)


@dataclass(frozen=True)
class ManifestEntry:
    """A single dependency declaration read from a manifest."""

    name: str
    version_spec: str

    def __str__(self) -> str:
        return f"{self.name}: {self.version_spec}"


def is_uri_spec(version_spec: str) -> bool:
    """True when the spec is already a fetchable reference."""
    return bool(_URI_SPEC.match(version_spec))


def to_target_package_ref(entry: ManifestEntry) -> str:
    """
    Convert a manifest entry into an installable package reference.

    Args:
        entry: Dependency name and version spec

    Returns:
        Either the raw URI or ``name@version``

    Examples:
        >>> to_target_package_ref(ManifestEntry("pkg", "^1.2.3"))
        'pkg@1.2.3'
        >>> to_target_package_ref(ManifestEntry("pkg", "https://example.com/a.tgz"))
        'https://example.com/a.tgz'
    """
    spec = entry.version_spec
    if is_uri_spec(spec):
        return spec
    if spec.startswith(Patterns.RANGE_PREFIXES):
        return f"{entry.name}@{spec[1:]}"
    return f"{entry.name}@{spec}"


def to_target_package_refs(dependencies: Optional[Mapping[str, str]]) -> List[str]:
    """Translate a name -> spec mapping, keeping its key order."""
    if not dependencies:
        return []
    return [to_target_package_ref(ManifestEntry(name, spec)) for name, spec in dependencies.items()]


def has_version_marker(request: str) -> bool:
    """
    True when a library request already names a version.

    The leading "@" of a scoped package does not count.
    """
    return "@" in request[1:]


def split_library_request(request: str) -> Tuple[str, Optional[str]]:
    """
    Split a library request into (package name, version).

    Examples:
        >>> split_library_request("lodash@4.17.0")
        ('lodash', '4.17.0')
        >>> split_library_request("@scope/pkg")
        ('@scope/pkg', None)
    """
    request = request.strip()
    if not has_version_marker(request):
        return request, None
    idx = request.rindex("@")
    return request[:idx], request[idx + 1:] or None


def with_latest_marker(request: str) -> str:
    """Append ``@latest`` unless the request already carries a version."""
    if has_version_marker(request):
        return request
    return f"{request}@{Defaults.LATEST_TAG}"
