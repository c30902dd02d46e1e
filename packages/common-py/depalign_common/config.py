"""
depalign Configuration

AlignConfig carries every run-wide setting, including the default library
name, so nothing depends on hidden module state.

Environment variables (DEPALIGN_ prefix + field name):
    DEPALIGN_DEFAULT_LIBRARY: Library used when none is requested
    DEPALIGN_INSTALLER: npm, yarn or pnpm
    DEPALIGN_LOG_LEVEL: debug, info, warning or error
    DEPALIGN_MAX_SEARCH_DEPTH: Bound on the upward manifest search
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import Defaults, EnvVars, SupportedValues
from .errors import ConfigurationError


class AlignConfig(BaseSettings):
    """
    Settings for one depalign run.

    Values come from keyword arguments first, then DEPALIGN_* environment
    variables, then the defaults below.

    Attributes:
        host_dir: Directory of the consuming project (holds its package.json)
        default_library: Library used when no library is requested
        default_library_dir: Fixed location of the default library; defaults
            to ``<host_dir>/node_modules/<default_library>``
        installer: npm, yarn or pnpm
        skip_install: Do not install the requested libraries themselves
        dry_run: Record installer commands without executing them
        max_search_depth: Bound on the upward manifest search
        manifest_filename: Manifest file name looked for at each level
        log_level: Logging level for the run
    """

    model_config = SettingsConfigDict(
        env_prefix=EnvVars.PREFIX,
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    host_dir: Path = Field(default_factory=Path.cwd)
    default_library: str = Defaults.DEFAULT_LIBRARY
    default_library_dir: Optional[Path] = None
    installer: str = Defaults.INSTALLER
    skip_install: bool = False
    dry_run: bool = False
    max_search_depth: int = Defaults.MAX_SEARCH_DEPTH
    manifest_filename: str = Defaults.MANIFEST_FILENAME
    log_level: str = Defaults.LOG_LEVEL

    @field_validator("installer")
    @classmethod
    def _check_installer(cls, v: str) -> str:
        v = v.lower()
        if v not in SupportedValues.INSTALLERS:
            raise ValueError(
                f"Unsupported installer '{v}'. Expected one of: {', '.join(SupportedValues.INSTALLERS)}"
            )
        return v

    @field_validator("max_search_depth")
    @classmethod
    def _check_depth(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"max_search_depth must be positive. Got: {v}")
        return v

    @field_validator("default_library")
    @classmethod
    def _check_default_library(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("default_library cannot be empty")
        return v.strip()

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, v: str) -> str:
        v = v.lower()
        if v not in SupportedValues.LOG_LEVELS:
            raise ValueError(
                f"Invalid log level '{v}'. Expected one of: {', '.join(SupportedValues.LOG_LEVELS)}"
            )
        return v

    @property
    def resolved_default_library_dir(self) -> Path:
        """Directory the default library resolves to."""
        if self.default_library_dir is not None:
            return Path(self.default_library_dir)
        return Path(self.host_dir) / Defaults.MODULES_DIRNAME / self.default_library

    @property
    def host_manifest_path(self) -> Path:
        return Path(self.host_dir) / self.manifest_filename

    @classmethod
    def create(cls, **values) -> "AlignConfig":
        """
        Build a config, converting pydantic validation errors to ConfigurationError.

        None values are dropped so unset CLI options fall through to the
        environment and the defaults.
        """
        try:
            return cls(**{k: v for k, v in values.items() if v is not None})
        except ValidationError as e:
            messages = "; ".join(err["msg"] for err in e.errors())
            raise ConfigurationError(f"Invalid configuration: {messages}") from e
