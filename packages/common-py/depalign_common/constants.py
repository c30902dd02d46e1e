"""
depalign Shared Constants

This module defines constants used across the depalign packages.
It serves as the single source of truth for supported values and defaults.

Usage:
    from depalign_common.constants import Defaults, InstallerCommands

    depth = Defaults.MAX_SEARCH_DEPTH
    argv = InstallerCommands.for_installer("npm")["dev"]
"""

from typing import Dict, List


# =============================================================================
# VERSION INFORMATION
# =============================================================================


class VersionInfo:
    """depalign version information."""

    DEPALIGN_VERSION = "0.1.0"


# =============================================================================
# SUPPORTED VALUES
# =============================================================================


class SupportedValues:
    """Values accepted by configuration and CLI options."""

    INSTALLERS = ["npm", "yarn", "pnpm"]
    """Package managers depalign knows how to drive"""

    LOG_LEVELS = ["debug", "info", "warning", "error"]
    """Valid log levels"""


# =============================================================================
# DEFAULT VALUES
# =============================================================================


class Defaults:
    """Default configuration values."""

    DEFAULT_LIBRARY = "depalign-preset"
    """Library installed and aligned when none is requested"""

    INSTALLER = "npm"

    MANIFEST_FILENAME = "package.json"

    MODULES_DIRNAME = "node_modules"

    ENTRY_FILENAME = "index.js"
    """Entry file assumed when a manifest has no "main" field"""

    LATEST_TAG = "latest"

    MAX_SEARCH_DEPTH = 64
    """Upper bound on directories visited by the upward manifest search"""

    LOG_LEVEL = "info"


# =============================================================================
# INSTALLER COMMANDS
# =============================================================================


class InstallerCommands:
    """
    Base argv per installer and action.

    Actions:
        prod: install targets and record them as production dependencies
        dev:  install targets and record them as development dependencies
        all:  install everything the manifest declares
    """

    NPM: Dict[str, List[str]] = {
        "prod": ["npm", "install", "--save"],
        "dev": ["npm", "install", "--save-dev"],
        "all": ["npm", "install"],
    }

    YARN: Dict[str, List[str]] = {
        "prod": ["yarn", "add"],
        "dev": ["yarn", "add", "--dev"],
        "all": ["yarn", "install"],
    }

    PNPM: Dict[str, List[str]] = {
        "prod": ["pnpm", "add"],
        "dev": ["pnpm", "add", "--save-dev"],
        "all": ["pnpm", "install"],
    }

    @classmethod
    def for_installer(cls, installer: str) -> Dict[str, List[str]]:
        """Return the command table for an installer name."""
        table = {"npm": cls.NPM, "yarn": cls.YARN, "pnpm": cls.PNPM}
        return table[installer.lower()]


# =============================================================================
# ENVIRONMENT VARIABLE NAMES
# =============================================================================


class EnvVars:
    """Environment variables read by AlignConfig (prefix + upper-cased field name)."""

    PREFIX = "DEPALIGN_"

    DEFAULT_LIBRARY = "DEPALIGN_DEFAULT_LIBRARY"
    INSTALLER = "DEPALIGN_INSTALLER"
    LOG_LEVEL = "DEPALIGN_LOG_LEVEL"
    MAX_SEARCH_DEPTH = "DEPALIGN_MAX_SEARCH_DEPTH"


# =============================================================================
# PATTERNS
# =============================================================================


class Patterns:
    """Regex patterns shared across packages."""

    URI_VERSION_SPEC = r"^(git\+)?(file|https)://"
    """Version specs that are already fetchable references"""

    RANGE_PREFIXES = ("^", "~")
    """Range operators stripped to install the floor version"""


# Convenience aliases
DEPALIGN_VERSION = VersionInfo.DEPALIGN_VERSION
SUPPORTED_INSTALLERS = SupportedValues.INSTALLERS
LOG_LEVELS = SupportedValues.LOG_LEVELS
