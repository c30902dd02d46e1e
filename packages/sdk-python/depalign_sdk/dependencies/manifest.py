"""
Package Manifest Model
======================

Pydantic model for the subset of package.json that reconciliation reads,
plus helpers to parse it from a string or a file.
"""

import json
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from depalign_common.errors import ManifestParseError

from .spec import ManifestEntry


class Manifest(BaseModel):
    """
    Parsed package manifest.

    Only the fields depalign consults are modelled; anything else in the
    file is ignored. Dependency mappings keep the order they had in the file.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    name: Optional[str] = None
    version: Optional[str] = None
    dependencies: Dict[str, str] = Field(default_factory=dict)
    dev_dependencies: Dict[str, str] = Field(default_factory=dict, alias="devDependencies")
    path: Optional[Path] = Field(default=None, exclude=True)

    def entries(self, category: str = "dependencies") -> List[ManifestEntry]:
        """Return the entries of one dependency category."""
        if category == "dependencies":
            mapping = self.dependencies
        elif category in ("devDependencies", "dev_dependencies"):
            mapping = self.dev_dependencies
        else:
            raise ValueError(f"Unknown dependency category: {category}")
        return [ManifestEntry(name, spec) for name, spec in mapping.items()]

    def declares(self, package_name: str) -> bool:
        """True if the package is a production dependency."""
        return package_name in self.dependencies


def parse_manifest_string(content: str, path: Optional[Path] = None) -> Manifest:
    """
    Parse manifest JSON.

    Raises:
        ManifestParseError: If the content is not a JSON object or a
            dependency field has the wrong shape
    """
    where = f" in {path}" if path else ""
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ManifestParseError(f"Invalid JSON{where}: {e}", path=str(path) if path else None)

    if not isinstance(data, dict):
        raise ManifestParseError(
            f"Manifest{where} must be a JSON object, got {type(data).__name__}",
            path=str(path) if path else None,
        )

    # "dependencies": null is treated like an absent field
    for key in ("dependencies", "devDependencies"):
        if key in data and data[key] is None:
            del data[key]

    try:
        manifest = Manifest.model_validate(data)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ManifestParseError(f"Malformed manifest{where}: {details}", path=str(path) if path else None)

    if path is not None:
        manifest = manifest.model_copy(update={"path": path})
    return manifest


def read_manifest(path: Path) -> Manifest:
    """
    Load a manifest file.

    Raises:
        FileNotFoundError: If the file does not exist
        ManifestParseError: If the file cannot be parsed
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise ManifestParseError(f"Manifest at {path} is not valid UTF-8: {e}", path=str(path))
    return parse_manifest_string(content, path=path)
