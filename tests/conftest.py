"""Shared test fixtures for notary_ally."""

import base64
import io
import os
import tempfile

import pytest
from PIL import Image, ImageDraw

from notary_ally.app import create_app_context
from notary_ally.core.config import Config
from notary_ally.core.secrets import SecretsManager
from notary_ally.core.storage import MemoryStorage
from notary_ally.core.store import KeyValueStore
from notary_ally.services.lookup import LookupService


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def tmp_config_file(tmp_dir):
    """Create a temporary YAML config file."""
    import yaml

    config_data = {
        "paths": {
            "data_dir": os.path.join(tmp_dir, "data"),
            "storage_dir": os.path.join(tmp_dir, "data", "storage"),
        },
        "llm": {"model": "gemini/gemini-2.5-flash"},
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path


@pytest.fixture
def backend():
    return MemoryStorage()


@pytest.fixture
def store(backend):
    return KeyValueStore(backend, namespace="test")


class FakeLookup(LookupService):
    """LookupService that answers from canned values instead of calling a model."""

    def __init__(self, distance=None, county=None, error=None):
        super().__init__(credential="test-key")
        self.distance = distance
        self.county = county
        self.error = error
        self.calls = []

    def resolve_distance(self, start, end):
        self.calls.append(("distance", start, end))
        if self.error:
            raise self.error
        return self.distance

    async def aresolve_distance(self, start, end):
        return self.resolve_distance(start, end)

    def resolve_county(self, lat, lon):
        self.calls.append(("county", lat, lon))
        if self.error:
            raise self.error
        return self.county

    async def aresolve_county(self, lat, lon):
        return self.resolve_county(lat, lon)


@pytest.fixture
def fake_lookup():
    return FakeLookup(distance=12.5, county="Travis County")


@pytest.fixture
def app_ctx(tmp_dir, backend, fake_lookup, monkeypatch):
    """An AppContext over in-memory storage with a canned lookup service."""
    for var in list(os.environ):
        if var.startswith("NOTARY_ALLY_"):
            monkeypatch.delenv(var, raising=False)
    config = Config(data_dir=tmp_dir)
    return create_app_context(config, secrets=SecretsManager(providers=[]), backend=backend, lookup=fake_lookup)


def _png_data_url(draw_ink: bool) -> str:
    image = Image.new("RGBA", (40, 20), (0, 0, 0, 0))
    if draw_ink:
        ImageDraw.Draw(image).line([(2, 10), (38, 10)], fill="black", width=2)
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return "data:image/png;base64," + base64.b64encode(buffer.getvalue()).decode("ascii")


@pytest.fixture
def signature_data_url():
    return _png_data_url(draw_ink=True)


@pytest.fixture
def blank_signature_data_url():
    return _png_data_url(draw_ink=False)


@pytest.fixture
def lookup_factory():
    """Build FakeLookup instances with custom answers or errors."""
    return FakeLookup
