"""Shared setup and helpers for CLI commands."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from functools import wraps
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from notary_ally.core.exceptions import NotaryAllyError

if TYPE_CHECKING:
    from notary_ally.app import AppContext

NOTARY_DIR = Path.home() / ".notary-ally"
CONFIG_PATH = NOTARY_DIR / "config.yaml"


class LazyContext:
    """Builds the AppContext on first use, so ``--help`` never touches storage."""

    def __init__(self, factory: Callable[[], AppContext]):
        self._factory = factory
        self._ctx: AppContext | None = None

    def get(self) -> AppContext:
        if self._ctx is None:
            self._ctx = self._factory()
        return self._ctx


def build_context(config_file: str | None = None, data_dir: str | None = None) -> LazyContext:
    def factory() -> AppContext:
        from notary_ally.app import create_app_context
        from notary_ally.core.config import Config
        from notary_ally.core.utils.logging import setup_logging

        path = config_file or (str(CONFIG_PATH) if CONFIG_PATH.exists() else None)
        config = Config(config_file=path, data_dir=data_dir or str(NOTARY_DIR))
        config.ensure_directories()
        setup_logging(
            level=str(config.get("logging.level", "WARNING")).upper(),
            log_file=os.path.join(config.get("paths.log_dir"), "notary-ally.log"),
        )
        return create_app_context(config)

    return LazyContext(factory)


def app_context(ctx: click.Context) -> AppContext:
    """Return the AppContext, whether ctx.obj holds it directly or lazily."""
    obj = ctx.find_root().obj
    return obj.get() if isinstance(obj, LazyContext) else obj


def handle_errors(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Print NotaryAllyError messages and exit 1 instead of showing a traceback."""

    @wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return fn(*args, **kwargs)
        except NotaryAllyError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

    return wrapper


def export_dir(ctx: click.Context, output: str | None) -> str:
    return output or app_context(ctx).config.get("paths.export_dir")
