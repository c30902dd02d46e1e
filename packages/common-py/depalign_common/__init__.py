"""
depalign Common Package

Shared utilities and primitives used across all depalign packages.

This package provides:
- Exception classes for consistent error handling
- Constants for supported values and defaults (namespaced)
- Run configuration (AlignConfig)
- Structured logging

Usage:
    from depalign_common import AlignConfig, ManifestNotFoundError
    from depalign_common import Defaults, InstallerCommands, get_logger

    config = AlignConfig.create(host_dir=Path("."))
"""

# Error classes
from .errors import (
    DepAlignError,
    ConfigurationError,
    ManifestNotFoundError,
    ManifestParseError,
    InstallerInvocationError,
)

# Constants - Namespaced classes (recommended)
from .constants import (
    VersionInfo,
    SupportedValues,
    Defaults,
    InstallerCommands,
    EnvVars,
    Patterns,
    # Convenience aliases
    DEPALIGN_VERSION,
    SUPPORTED_INSTALLERS,
    LOG_LEVELS,
)

# Configuration
from .config import AlignConfig

# Logger
from .logger import (
    DepAlignLogger,
    get_logger,
    configure_logging,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "DepAlignError",
    "ConfigurationError",
    "ManifestNotFoundError",
    "ManifestParseError",
    "InstallerInvocationError",
    # Namespaced constants (recommended)
    "VersionInfo",
    "SupportedValues",
    "Defaults",
    "InstallerCommands",
    "EnvVars",
    "Patterns",
    # Convenience aliases
    "DEPALIGN_VERSION",
    "SUPPORTED_INSTALLERS",
    "LOG_LEVELS",
    # Configuration
    "AlignConfig",
    # Logger
    "DepAlignLogger",
    "get_logger",
    "configure_logging",
]
