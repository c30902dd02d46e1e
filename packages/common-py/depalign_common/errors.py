"""
depalign Error Classes

Every error raised by depalign packages derives from DepAlignError so callers
(the CLI in particular) can catch a single base class and still get a stable
machine-readable code.

Usage:
    from depalign_common.errors import ManifestNotFoundError

    raise ManifestNotFoundError("No package.json found", package="lodash")
"""

from typing import Any, Dict, List, Optional


class DepAlignError(Exception):
    """
    Base class for all depalign errors.

    Attributes:
        message: Human readable description
        code: Stable error code (e.g. MANIFEST_NOT_FOUND)
    """

    default_code = "DEPALIGN_ERROR"

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the error for JSON output."""
        return {
            "error": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
        }

    def __str__(self) -> str:
        return self.message


class ConfigurationError(DepAlignError):
    """Raised when configuration values are invalid."""

    default_code = "CONFIGURATION_ERROR"


class ManifestNotFoundError(DepAlignError):
    """
    Raised when a package manifest cannot be located.

    Covers an upward search that reached the filesystem root, a package name
    the resolver could not map to a directory, and a missing host manifest.
    """

    default_code = "MANIFEST_NOT_FOUND"

    def __init__(
        self,
        message: str,
        package: Optional[str] = None,
        searched: Optional[List[str]] = None,
    ):
        self.package = package
        self.searched = searched or []
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["package"] = self.package
        data["searched"] = self.searched
        return data


class ManifestParseError(DepAlignError):
    """Raised when a manifest file is not valid JSON or has malformed fields."""

    default_code = "MANIFEST_PARSE_ERROR"

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["path"] = self.path
        return data


class InstallerInvocationError(DepAlignError):
    """
    Raised when the external installer exits non-zero or cannot be spawned.

    Attributes:
        command: The argv that was executed
        returncode: Installer exit status, or None if the process never started
    """

    default_code = "INSTALLER_ERROR"

    def __init__(
        self,
        message: str,
        command: Optional[List[str]] = None,
        returncode: Optional[int] = None,
    ):
        self.command = command or []
        self.returncode = returncode
        super().__init__(message)

    @property
    def exit_code(self) -> int:
        """
        Exit status to propagate to the shell.

        1 when the spawn failed; 128 + N when the installer was killed by signal N.
        """
        if self.returncode is None or self.returncode == 0:
            return 1
        if self.returncode < 0:
            return 128 - self.returncode
        return self.returncode

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["command"] = self.command
        data["returncode"] = self.returncode
        return data


__all__ = [
    "DepAlignError",
    "ConfigurationError",
    "ManifestNotFoundError",
    "ManifestParseError",
    "InstallerInvocationError",
]
