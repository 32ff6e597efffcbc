"""Configuration defaults for prefixer.

Configuration file location priority:
1. Explicit path passed to ConfigLoader (``--config``)
2. PREFIXER_CONFIG environment variable
3. Standard location: ~/.prefixer/config.yml
4. Built-in defaults (if no config file found)

Example config file:
```yaml
pattern: "*.go"
with_line_end: true
encoding: utf-8
log_level: INFO
```

Command-line flags always override values from the file. PREFIXER_LOG_LEVEL
overrides ``log_level`` from the file.
"""

from __future__ import annotations

import codecs
import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .engine.exceptions import ConfigError

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
DEFAULT_LOG_LEVEL = "WARNING"


class PrefixerConfig(BaseModel):
    """Defaults applied when the matching command-line flag is not given."""

    model_config = ConfigDict(extra="forbid")

    pattern: str = Field(default="*", min_length=1, description="Default file name glob")
    with_line_end: bool = Field(default=False, description="Default for -e/--with-line-end")
    encoding: str = Field(default="utf-8", description="Encoding for prefix text")
    log_level: str = Field(default=DEFAULT_LOG_LEVEL, description="Logging level name")

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Reject codec names Python does not know."""
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {v}") from e
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise and validate the level name."""
        level = v.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level '{v}'. Valid levels: {', '.join(sorted(VALID_LOG_LEVELS))}"
            )
        return level


class ConfigLoader:
    """Loader for prefixer configuration from a YAML file.

    Usage:
        ```python
        loader = ConfigLoader()
        config = loader.load_config()
        pattern = args.pattern or config.pattern
        ```
    """

    def __init__(self, config_path: str | Path | None = None):
        """Initialize config loader with optional explicit path.

        Args:
            config_path: Explicit path to config file (optional).
                If not provided, uses environment variable or standard location.
        """
        self._config: PrefixerConfig | None = None
        self._explicit_path = Path(config_path).expanduser() if config_path else None

    def get_config_path(self) -> Path | None:
        """Determine config file path using priority order.

        Returns:
            Path to config file, or None if no file applies
        """
        if self._explicit_path:
            if self._explicit_path.exists():
                return self._explicit_path
            logger.warning(f"Config path does not exist: {self._explicit_path}")
            return None

        env_path_str = os.getenv("PREFIXER_CONFIG")
        if env_path_str:
            env_path = Path(env_path_str).expanduser()
            if env_path.exists():
                return env_path
            logger.warning(f"PREFIXER_CONFIG path does not exist: {env_path}")
            return None

        standard_path = Path.home() / ".prefixer" / "config.yml"
        if standard_path.exists():
            return standard_path

        return None

    def load_config(self) -> PrefixerConfig:
        """Load and validate configuration, caching the result.

        Returns:
            Validated PrefixerConfig (built-in defaults if no file found)

        Raises:
            ConfigError: File is not valid YAML or fails validation
        """
        if self._config is not None:
            return self._config

        config_path = self.get_config_path()
        if config_path is None:
            logger.debug("No config file found, using built-in defaults")
            data: dict = {}
        else:
            data = self._read_yaml(config_path)
            logger.debug(f"Loaded config from {config_path}")

        env_level = os.getenv("PREFIXER_LOG_LEVEL")
        if env_level:
            if env_level.upper() in VALID_LOG_LEVELS:
                data["log_level"] = env_level.upper()
            else:
                logger.warning(
                    f"Invalid PREFIXER_LOG_LEVEL '{env_level}'. "
                    f"Valid levels: {', '.join(sorted(VALID_LOG_LEVELS))}. Ignoring."
                )

        try:
            self._config = PrefixerConfig(**data)
        except ValidationError as e:
            raise ConfigError(config_path or Path("<environment>"), str(e)) from e

        return self._config

    @staticmethod
    def _read_yaml(path: Path) -> dict:
        try:
            raw = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigError(path, f"invalid YAML: {e}") from e
        except OSError as e:
            raise ConfigError(path, f"cannot read file: {e}") from e

        if raw is None:
            return {}
        if not isinstance(raw, dict):
            raise ConfigError(path, f"expected a mapping, got {type(raw).__name__}")
        return raw
