"""
Credential lookup for the completion service.

A ``SecretsManager`` asks each provider in turn for a dotted key such as
``llm.api_key`` and takes the first answer. The application wires env vars
first, then ``<data_dir>/secrets.yaml``:

    llm:
      api_key: "..."
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

import yaml
from loguru import logger

from .exceptions import SecretNotFoundError


@runtime_checkable
class SecretProvider(Protocol):
    def get(self, key_path: str) -> str | None:
        """The secret under a dotted key, or None if this provider lacks it."""
        ...


class EnvProvider:
    """Secrets from env vars: ``llm.api_key`` is read from ``<prefix>LLM__API_KEY``."""

    def __init__(self, prefix: str = "NOTARY_ALLY_"):
        self.prefix = prefix

    def env_name(self, key_path: str) -> str:
        return self.prefix + "__".join(part.upper() for part in key_path.split("."))

    def get(self, key_path: str) -> str | None:
        return os.environ.get(self.env_name(key_path)) or None


class YamlFileProvider:
    """Secrets from a nested YAML mapping, read lazily and cached until ``reload``."""

    def __init__(self, path: str | Path):
        self.path = Path(path).expanduser()
        self._tree: dict[str, Any] | None = None

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path) as f:
                tree = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Ignoring unreadable secrets file {self.path}: {e}")
            return {}
        return tree if isinstance(tree, dict) else {}

    def get(self, key_path: str) -> str | None:
        if self._tree is None:
            self._tree = self._read()
        node: Any = self._tree
        for part in key_path.split("."):
            if not isinstance(node, dict):
                return None
            node = node.get(part)
        return None if node is None or node == "" else str(node)

    def reload(self) -> None:
        self._tree = None


class SecretsManager:
    """Ordered chain of providers; the first one with an answer wins."""

    def __init__(self, providers: list[SecretProvider] | None = None):
        self.providers: list[SecretProvider] = [EnvProvider()] if providers is None else list(providers)

    def get(self, key_path: str, default: str | None = None) -> str | None:
        for provider in self.providers:
            value = provider.get(key_path)
            if value is not None:
                return value
        return default

    def require(self, key_path: str) -> str:
        """Like get(), but a missing secret raises SecretNotFoundError."""
        value = self.get(key_path)
        if value is None:
            searched = ", ".join(type(p).__name__ for p in self.providers)
            raise SecretNotFoundError(f"Secret '{key_path}' not found (searched: {searched})")
        return value
