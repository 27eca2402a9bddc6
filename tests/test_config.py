# ============================================================================
# ExplorerClient - Configuration Tests
#
# Purpose: Test ClientConfig loading, env overrides and load_config validation
# Inputs: Dicts, temporary YAML files, monkeypatched environment
# Outputs: Test pass/fail
# Dependencies: pytest, pyyaml, ExplorerClient
# Usage: pytest tests/test_config.py -v
#
# Changelog:
#   2026-10-02: Initial config tests
# ============================================================================

import pytest

from ExplorerClient.config import ClientConfig, load_config
from ExplorerClient.errors import ConfigurationError


class TestLoadConfig:
    """Tests for load_config validation."""

    def test_camel_case_alias(self):
        config = load_config({"explorerUri": "http://x", "service": "svc"})
        assert config.explorer_uri == "http://x"
        assert config.service == "svc"

    def test_snake_case_field(self):
        config = load_config({"explorer_uri": "http://x"})
        assert config.explorer_uri == "http://x"

    def test_defaults_fill_missing_values(self):
        config = load_config({"explorerUri": "http://x"})
        assert config.service == ""
        assert config.timeout is None
        assert config.max_workers == 4

    def test_existing_config_passes_through(self):
        original = ClientConfig(explorer_uri="http://x")
        assert load_config(original) is original

    @pytest.mark.parametrize("value", [{}, {"explorerUri": ""}, {"explorerUri": "   "}, {"service": "svc"}])
    def test_missing_or_empty_uri_rejected(self, value):
        with pytest.raises(ConfigurationError):
            load_config(value)

    @pytest.mark.parametrize("value", [None, "http://x", 42, ["http://x"]])
    def test_non_mapping_rejected(self, value):
        with pytest.raises(ConfigurationError):
            load_config(value)

    def test_default_config_instance_rejected(self):
        """The declared default URI is empty and therefore never valid."""
        with pytest.raises(ConfigurationError):
            load_config(ClientConfig())

    def test_field_validation_error_wrapped(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_config({"explorerUri": "http://x", "max_workers": 0})
        assert exc_info.value.details


class TestConfigSources:
    """Tests for YAML and environment loading."""

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "client.yaml"
        path.write_text("explorerUri: http://yaml\nservice: billing\ntimeout: 2.5\nlogging:\n  level: DEBUG\n")

        config = ClientConfig.from_yaml(str(path))

        assert config.explorer_uri == "http://yaml"
        assert config.service == "billing"
        assert config.timeout == 2.5
        assert config.logging.level == "DEBUG"

    def test_from_yaml_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        config = ClientConfig.from_yaml(str(path))
        assert config.explorer_uri == ""

    def test_from_yaml_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ClientConfig.from_yaml(str(tmp_path / "nope.yaml"))

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        path = tmp_path / "client.yaml"
        path.write_text("explorerUri: http://yaml\n")
        monkeypatch.setenv("EXPLORER_CLIENT_EXPLORER_URI", "http://env")
        monkeypatch.setenv("EXPLORER_CLIENT_MAX_WORKERS", "8")

        config = ClientConfig.from_yaml(str(path))

        assert config.explorer_uri == "http://env"
        assert config.max_workers == 8

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("EXPLORER_CLIENT_EXPLORER_URI", "http://env")
        monkeypatch.setenv("EXPLORER_CLIENT_SERVICE", "123")
        monkeypatch.setenv("EXPLORER_CLIENT_LOGGING_LEVEL", "WARNING")

        config = ClientConfig.from_env()

        assert config.explorer_uri == "http://env"
        assert config.service == "123"
        assert config.logging.level == "WARNING"

    @pytest.mark.parametrize(
        "raw,expected",
        [("true", True), ("No", False), ("3", 3), ("1.5", 1.5), ("none", None), ("text", "text")],
    )
    def test_parse_env_value(self, raw, expected):
        assert ClientConfig._parse_env_value(raw) == expected
