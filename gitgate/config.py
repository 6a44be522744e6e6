"""gitgate configuration management using Pydantic."""

import os
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, Field, ValidationError, field_validator

from gitgate.constants import (
    CONFIG_PATH_ENV,
    DEFAULT_CONFIG_PATH,
    DEFAULT_EXECUTABLE,
    DEFAULT_PROTECTED_BRANCHES,
)
from gitgate.exceptions import ConfigurationError


class PolicyConfig(BaseModel):
    """Branch policy configuration."""

    protected_branches: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PROTECTED_BRANCHES)
    )

    @field_validator("protected_branches")
    @classmethod
    def validate_branch_names(cls, value: list[str]) -> list[str]:
        if any(not name.strip() for name in value):
            raise ValueError("protected branch names must not be blank")
        return value


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="warning", pattern="^(debug|info|warning|error)$")
    directory: str | None = None


class GitGateConfig(BaseModel):
    """Complete gitgate configuration."""

    executable: str = Field(default=DEFAULT_EXECUTABLE, min_length=1)
    policy: PolicyConfig = Field(default_factory=PolicyConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @staticmethod
    def default_path() -> Path:
        """Return the config path, honoring GITGATE_CONFIG."""
        return Path(os.environ.get(CONFIG_PATH_ENV, DEFAULT_CONFIG_PATH)).expanduser()

    @classmethod
    def load(cls, config_path: str | Path | None = None) -> "GitGateConfig":
        """Load configuration from YAML file.

        Args:
            config_path: Path to config file. Defaults to ``default_path()``

        Returns:
            GitGateConfig instance; defaults when the file does not exist

        Raises:
            ConfigurationError: If the file is not valid YAML or fails validation
        """
        config_path = cls.default_path() if config_path is None else Path(config_path)

        if not config_path.exists():
            return cls()

        try:
            with open(config_path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in {config_path}", details={"error": str(e)}
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Config root must be a mapping: {config_path}")

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GitGateConfig":
        """Create configuration from dictionary.

        Args:
            data: Configuration dictionary

        Returns:
            GitGateConfig instance
        """
        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigurationError(
                "Invalid gitgate configuration", details={"errors": e.error_count()}
            ) from e

    def save(self, config_path: str | Path | None = None) -> None:
        """Save configuration to YAML file.

        Args:
            config_path: Path to save config. Defaults to ``default_path()``
        """
        config_path = self.default_path() if config_path is None else Path(config_path)

        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump()
