"""Tests for notary_ally.core.config."""

import os

import pytest
import yaml

from notary_ally.core.config import DEFAULT_STORAGE_QUOTA_BYTES, Config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Drop stray env overrides between tests."""
    for var in list(os.environ):
        if var.startswith("NOTARY_ALLY_"):
            monkeypatch.delenv(var, raising=False)


class TestConfig:
    def test_defaults(self):
        config = Config()
        assert config.get("paths.data_dir").endswith(".notary-ally")
        assert config.get("llm.model") == "gemini/gemini-2.5-flash"
        assert config.get("storage.namespace") == "notary_ally"
        assert config.get("storage.quota_bytes") == DEFAULT_STORAGE_QUOTA_BYTES

    def test_custom_data_dir(self, tmp_dir):
        config = Config(data_dir=tmp_dir)
        assert config.get("paths.data_dir") == tmp_dir
        assert config.get("paths.storage_dir") == os.path.join(tmp_dir, "storage")
        assert config.get("paths.export_dir") == os.path.join(tmp_dir, "exports")

    def test_yaml_config_file(self, tmp_config_file, tmp_dir):
        config = Config(config_file=tmp_config_file, data_dir=tmp_dir)
        assert config.get("paths.storage_dir") == os.path.join(tmp_dir, "data", "storage")

    def test_json_config_file(self, tmp_dir):
        path = os.path.join(tmp_dir, "config.json")
        with open(path, "w") as f:
            f.write('{"llm": {"model": "gpt-4o-mini"}}')
        assert Config(config_file=path, data_dir=tmp_dir).get("llm.model") == "gpt-4o-mini"

    def test_env_overrides_file(self, tmp_dir, monkeypatch):
        config_path = os.path.join(tmp_dir, "config.yaml")
        with open(config_path, "w") as f:
            yaml.dump({"llm": {"model": "gpt-4o-mini"}}, f)

        monkeypatch.setenv("NOTARY_ALLY_LLM__MODEL", "anthropic/claude-sonnet-4-20250514")
        config = Config(config_file=config_path, data_dir=tmp_dir)
        assert config.get("llm.model") == "anthropic/claude-sonnet-4-20250514"

    def test_env_values_are_yaml_scalars(self, tmp_dir, monkeypatch):
        monkeypatch.setenv("NOTARY_ALLY_STORAGE__QUOTA_BYTES", "1024")
        monkeypatch.setenv("NOTARY_ALLY_LLM__TIMEOUT", "30.5")
        monkeypatch.setenv("NOTARY_ALLY_LLM__API_KEY", "abc123")
        config = Config(data_dir=tmp_dir)
        assert config.get("storage.quota_bytes") == 1024
        assert config.get("llm.timeout") == 30.5
        assert config.get("llm.api_key") == "abc123"

    def test_get_int(self, tmp_dir):
        config = Config(data_dir=tmp_dir)
        config.set("storage.quota_bytes", "2048")
        assert config.get_int("storage.quota_bytes") == 2048
        config.set("storage.quota_bytes", "lots")
        assert config.get_int("storage.quota_bytes", 7) == 7
        assert config.get_int("storage.missing", 7) == 7

    def test_get_missing_key(self, tmp_dir):
        config = Config(data_dir=tmp_dir)
        assert config.get("nonexistent.key") is None
        assert config.get("nonexistent.key", "fallback") == "fallback"

    def test_set(self, tmp_dir):
        config = Config(data_dir=tmp_dir)
        config.set("location.latitude", 30.27)
        assert config.get("location.latitude") == 30.27

    def test_ensure_directories(self, tmp_dir):
        config = Config(data_dir=tmp_dir)
        config.ensure_directories()
        for name in ("storage", "exports", "logs"):
            assert os.path.isdir(os.path.join(tmp_dir, name))

    def test_extra_defaults(self, tmp_dir):
        config = Config(data_dir=tmp_dir, defaults={"location": {"latitude": 1.0}})
        assert config.get("location.latitude") == 1.0

