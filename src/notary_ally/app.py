"""Application context: everything a front end needs, built once at startup.

Usage:
    ctx = create_app_context(Config(config_file="~/.notary-ally/config.yaml"))
    ctx.appointments.add(AppointmentDraft(...))
    workflow = ctx.mileage_workflow()
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from loguru import logger

from .core.config import Config
from .core.llm.config import PROVIDER_ENV_MAP, infer_provider
from .core.secrets import EnvProvider, SecretsManager, YamlFileProvider
from .core.storage import LocalStorage, StorageBackend
from .core.store import KeyValueStore, PersistedValue
from .location import GeolocationProvider, LocationFinder
from .records.collections import (
    DARK_MODE_KEY,
    AppointmentCollection,
    JournalCollection,
    MileageCollection,
)
from .records.ids import IdGenerator
from .services.lookup import LookupService
from .workflows import AppointmentEditor, JournalForm, MileageWorkflow


def default_secrets(config: Config) -> SecretsManager:
    """Env vars first, then ``<data_dir>/secrets.yaml``."""
    return SecretsManager(
        providers=[
            EnvProvider("NOTARY_ALLY_"),
            YamlFileProvider(os.path.join(config.get_data_dir(), "secrets.yaml")),
        ]
    )


def credential_resolver(config: Config, secrets: SecretsManager):
    """Build a zero-arg callable returning the LLM API key, looked up at call time.

    Order: secrets ``llm.api_key``, config ``llm.api_key``, the provider's
    standard env var (e.g. GEMINI_API_KEY), then ``API_KEY``.
    """

    def resolve() -> str | None:
        env_var = PROVIDER_ENV_MAP.get(infer_provider(config.get("llm.model") or ""))
        configured = config.get("llm.api_key")
        return (
            secrets.get("llm.api_key")
            or (str(configured) if configured else None)
            or (os.environ.get(env_var) if env_var else None)
            or os.environ.get("API_KEY")
        )

    return resolve


@dataclass
class AppContext:
    config: Config
    store: KeyValueStore
    lookup: LookupService
    appointments: AppointmentCollection
    mileage: MileageCollection
    journal: JournalCollection
    dark_mode: PersistedValue[bool]
    ids: IdGenerator = field(default_factory=IdGenerator)

    def mileage_workflow(self, date: str | None = None) -> MileageWorkflow:
        return MileageWorkflow(self.mileage, self.lookup, date=date)

    def appointment_editor(self) -> AppointmentEditor:
        return AppointmentEditor(self.appointments)

    def journal_form(self) -> JournalForm:
        return JournalForm(self.journal)

    def location_finder(self, geolocation: GeolocationProvider) -> LocationFinder:
        return LocationFinder(geolocation, self.lookup)


def create_app_context(
    config: Config | None = None,
    secrets: SecretsManager | None = None,
    backend: StorageBackend | None = None,
    lookup: LookupService | None = None,
) -> AppContext:
    """Wire the store, collections and lookup service from configuration."""
    config = config or Config()
    secrets = secrets or default_secrets(config)

    if backend is None:
        backend = LocalStorage(
            base_path=config.get("paths.storage_dir"),
            quota_bytes=config.get_int("storage.quota_bytes"),
        )
    store = KeyValueStore(backend, namespace=config.get("storage.namespace", ""))

    if lookup is None:
        timeout = config.get("llm.timeout")
        lookup = LookupService(
            credential=credential_resolver(config, secrets),
            model=config.get("llm.model"),
            temperature=float(config.get("llm.temperature", 0.0) or 0.0),
            timeout=float(timeout) if timeout not in (None, "") else None,
        )

    ids = IdGenerator()
    ctx = AppContext(
        config=config,
        store=store,
        lookup=lookup,
        appointments=AppointmentCollection(store, ids),
        mileage=MileageCollection(store, ids),
        journal=JournalCollection(store, ids),
        dark_mode=PersistedValue(store, DARK_MODE_KEY, False),
        ids=ids,
    )
    logger.debug(
        f"App context ready: {len(ctx.appointments)} appointments, "
        f"{len(ctx.mileage)} mileage entries, {len(ctx.journal)} journal entries"
    )
    return ctx
