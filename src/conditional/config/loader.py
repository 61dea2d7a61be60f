"""Configuration loading from YAML/JSON files with environment substitution."""

from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml

from conditional.exceptions import (
    ConfigFileNotFoundError,
    ConfigurationError,
    ConfigValidationError,
    EnvironmentVariableError,
)

from conditional.logging.error_logger import log_error

from .models import ComparatorConfig
from .validator import ConfigValidator

__all__ = ["ConfigLoader", "load_config"]

logger = logging.getLogger(__name__)

ROOT_KEY = "conditional"

# ${VAR} or ${VAR:-default}
_ENV_VAR_RE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::-([^}]*))?\}")


class ConfigLoader:
    """Load ComparatorConfig from files or mappings."""

    def __init__(self, env_vars: dict[str, str] | None = None) -> None:
        self.env_vars = dict(os.environ) if env_vars is None else env_vars

    def _substitute_env_vars(self, text: str) -> str:
        def replace(match: re.Match[str]) -> str:
            name, default = match.group(1), match.group(2)
            if name in self.env_vars:
                return self.env_vars[name]
            if default is not None:
                return default
            raise EnvironmentVariableError(name)

        return _ENV_VAR_RE.sub(replace, text)

    def load_from_file(self, path: str | Path) -> ComparatorConfig:
        """Load configuration from a .yaml, .yml or .json file."""
        path = Path(path)
        if not path.exists():
            raise ConfigFileNotFoundError(str(path))

        suffix = path.suffix.lower()
        if suffix not in {".yaml", ".yml", ".json"}:
            msg = f"Unsupported file format: {suffix}"
            raise ValueError(msg)

        text = self._substitute_env_vars(path.read_text(encoding="utf-8"))
        try:
            if suffix == ".json":
                data = json.loads(text)
            else:
                data = yaml.safe_load(text)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            msg = f"Failed to parse configuration file {path}"
            raise ConfigurationError(
                msg, context={"file_path": str(path)}, cause=e
            ) from e

        logger.debug("Loaded configuration from %s", path)
        return self.load_from_dict(data or {})

    def load_from_dict(self, data: dict[str, Any]) -> ComparatorConfig:
        """Build configuration from a mapping, unwrapping a ``conditional:`` key."""
        if not isinstance(data, dict):
            msg = f"Configuration must be a mapping, got {type(data).__name__}"
            raise ConfigurationError(msg)
        if isinstance(data.get(ROOT_KEY), dict):
            data = data[ROOT_KEY]
        return ComparatorConfig.from_dict(data)


def load_config(
    path: str | Path | None = None, env_vars: dict[str, str] | None = None
) -> ComparatorConfig:
    """
    Load and validate configuration.

    With no path, returns the defaults.

    Raises:
        ConfigValidationError: If the configuration has errors.
    """
    loader = ConfigLoader(env_vars=env_vars)
    config = loader.load_from_file(path) if path is not None else ComparatorConfig()

    is_valid, errors, _warnings = ConfigValidator().validate(config)
    if not is_valid:
        msg = "Configuration validation failed"
        error = ConfigValidationError(msg, errors=errors)
        log_error(error, file_path=str(path) if path is not None else None)
        raise error
    return config
