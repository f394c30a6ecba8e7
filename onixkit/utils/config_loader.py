"""YAML configuration loading for onixkit settings files."""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from onixkit.utils.logger import LoggerManager
from onixkit.utils.task_paths import TaskPaths

CONFIG_ENV_VAR = "ONIXKIT_CONFIG"


class ConfigLoader:
    """
    Loads a YAML mapping and gives dot-notation access to it.

    Example file (config/product.yaml):

        product:
          version_threshold: "3.0"
          cardinality:
            ProductIdentifier:
              min: 1
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self.config = self._load()

    @classmethod
    def from_env(cls, env_var: str = CONFIG_ENV_VAR) -> Optional["ConfigLoader"]:
        """Load the file named by `env_var`, or return None when it is unset."""
        value = os.environ.get(env_var)
        if not value:
            return None
        return cls(value)

    def _get_logger(self):
        return LoggerManager.get_logger(
            name="config", task_paths=TaskPaths(), use_json=True
        )

    def _load(self) -> Dict[str, Any]:
        log = self._get_logger()
        path = self.path
        if not path.exists():
            log.error("config.missing", extra={"extra_data": {"path": str(path)}})
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            log.error("config.load.fail", extra={"extra_data": {"path": str(path), "error": str(e)}}, exc_info=True)
            raise

        # An empty file is an empty mapping
        if data is None:
            data = {}
        if not isinstance(data, dict):
            log.error("config.invalid_type", extra={"extra_data": {"path": str(path)}})
            raise ValueError(f"Invalid config (expected mapping) at {path}")

        log.info("config.loaded", extra={"extra_data": {"path": str(path), "keys": sorted(data)}})
        return data

    def get(self, key: str, default: Any = None) -> Any:
        """Supports dot notation for nested access."""
        val = self.config
        for part in key.split("."):
            if isinstance(val, dict) and part in val:
                val = val[part]
            else:
                return default
        return val

    def section(self, key: str) -> Dict[str, Any]:
        """Return the mapping stored under `key` ({} when absent).

        Raises:
            ValueError: if the key holds something other than a mapping
        """
        val = self.get(key, {})
        if val is None:
            return {}
        if not isinstance(val, dict):
            raise ValueError(f"Config section '{key}' in {self.path} is not a mapping")
        return val

    def as_dict(self) -> dict:
        return self.config
