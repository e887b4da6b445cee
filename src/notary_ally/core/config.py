"""
Layered settings for Notary Ally.

Three layers, later ones overriding earlier ones key by key:

    built-in defaults  <  config file (.yaml/.yml/.json)  <  NOTARY_ALLY_* env vars

Env var names map onto nested keys with a double underscore, and their values
are read as YAML scalars, so ``NOTARY_ALLY_STORAGE__QUOTA_BYTES=1024`` sets
``storage.quota_bytes`` to the integer 1024.

Usage:
    config = Config(config_file="~/.notary-ally/config.yaml")
    config.get("llm.model")
    config.get("paths.export_dir")
"""

import json
import os
from typing import Any

import yaml

ENV_PREFIX = "NOTARY_ALLY_"
DATA_DIR = os.path.join("~", ".notary-ally")

# Browsers typically cap local storage around 5 MiB per origin.
DEFAULT_STORAGE_QUOTA_BYTES = 5 * 1024 * 1024


def default_settings(data_dir: str) -> dict[str, Any]:
    """The built-in settings tree, with every path rooted at data_dir."""
    root = os.path.expanduser(data_dir)
    return {
        "paths": {
            "data_dir": root,
            "storage_dir": os.path.join(root, "storage"),
            "export_dir": os.path.join(root, "exports"),
            "log_dir": os.path.join(root, "logs"),
        },
        "storage": {"namespace": "notary_ally", "quota_bytes": DEFAULT_STORAGE_QUOTA_BYTES},
        "llm": {"model": "gemini/gemini-2.5-flash", "api_key": "", "temperature": 0.0, "timeout": None},
        "logging": {"level": "WARNING"},
    }


def merge_settings(base: dict, overlay: dict) -> dict:
    """Deep-merge overlay into base in place and return base."""
    for key, value in overlay.items():
        current = base.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merge_settings(current, value)
        else:
            base[key] = value
    return base


def read_settings_file(path: str) -> dict[str, Any]:
    """Parse a YAML or JSON settings file. Other extensions yield nothing."""
    suffix = os.path.splitext(path)[1].lower()
    with open(path) as f:
        if suffix in (".yaml", ".yml"):
            return yaml.safe_load(f) or {}
        if suffix == ".json":
            return json.load(f)
    return {}


def _env_scalar(raw: str) -> Any:
    try:
        value = yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw
    return raw if isinstance(value, dict | list) else value


class Config:
    """
    Settings for one run of the application.

    Env vars use double-underscore nesting:
    NOTARY_ALLY_LLM__MODEL=gpt-4o-mini -> config["llm"]["model"] = "gpt-4o-mini"
    """

    def __init__(
        self,
        config_file: str | None = None,
        env_prefix: str = ENV_PREFIX,
        data_dir: str | None = None,
        defaults: dict[str, Any] | None = None,
    ):
        """
        Args:
            config_file: YAML or JSON settings file; a missing file is ignored.
            env_prefix: Env var prefix for overrides; empty disables them.
            data_dir: Root for storage, exports and logs. Defaults to ~/.notary-ally.
            defaults: Extra defaults merged over the built-in ones.
        """
        self.config_file = os.path.expanduser(config_file) if config_file else None
        self.env_prefix = env_prefix or ""
        self.data_dir = data_dir or DATA_DIR
        self.config_data: dict[str, Any] = merge_settings(default_settings(self.data_dir), defaults or {})

        if self.config_file and os.path.exists(self.config_file):
            merge_settings(self.config_data, read_settings_file(self.config_file))
        self._apply_env_overrides()

    def _apply_env_overrides(self) -> None:
        if not self.env_prefix:
            return
        for name, raw in os.environ.items():
            if not name.startswith(self.env_prefix):
                continue
            *parents, leaf = name[len(self.env_prefix) :].lower().split("__")
            node = self.config_data
            for part in parents:
                if not isinstance(node.get(part), dict):
                    node[part] = {}
                node = node[part]
            node[leaf] = _env_scalar(raw)

    def get(self, key_path: str, default: Any = None) -> Any:
        """Look up a dotted key such as "paths.storage_dir"; default when absent."""
        node: Any = self.config_data
        for part in key_path.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def set(self, key_path: str, value: Any) -> None:
        *parents, leaf = key_path.split(".")
        node = self.config_data
        for part in parents:
            node = node.setdefault(part, {})
        node[leaf] = value

    def get_data_dir(self) -> str:
        return os.path.expanduser(self.get("paths.data_dir", self.data_dir))

    def get_int(self, key_path: str, default: int | None = None) -> int | None:
        """A dotted key as an int, or default when it is unset or not numeric."""
        value = self.get(key_path)
        if value is None or value == "":
            return default
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def ensure_directories(self) -> None:
        """Create every directory under ``paths``."""
        for value in self.get("paths", {}).values():
            if isinstance(value, str):
                os.makedirs(os.path.expanduser(value), exist_ok=True)

