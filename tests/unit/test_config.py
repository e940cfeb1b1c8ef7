"""Unit tests for config loading, env interpolation, and validation."""
from __future__ import annotations

from pathlib import Path

import pytest

from soroban_rpc.config import (
    DEFAULT_HEADERS,
    AppConfig,
    ServerConfig,
    _interpolate_env,
    _validate,
    load_config,
)


class TestInterpolateEnv:
    def test_simple_substitution(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MY_VAR", "hello")
        assert _interpolate_env("${MY_VAR}") == "hello"

    def test_missing_var_becomes_empty(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("NONEXISTENT_VAR_XYZ", raising=False)
        assert _interpolate_env("${NONEXISTENT_VAR_XYZ}") == ""

    def test_nested(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("URL", "https://rpc.test")
        assert _interpolate_env({"server": {"url": "${URL}"}, "l": ["${URL}"]}) == {
            "server": {"url": "https://rpc.test"},
            "l": ["https://rpc.test"],
        }

    def test_non_string_passthrough(self) -> None:
        assert _interpolate_env(42) == 42
        assert _interpolate_env(True) is True


class TestLoadConfig:
    def test_loads_valid_yaml(self, sample_yaml_path: Path) -> None:
        cfg = load_config(sample_yaml_path)
        assert isinstance(cfg, AppConfig)
        assert cfg.server.url == "https://soroban-testnet.example.com"
        assert cfg.server.timeout == 10
        assert cfg.server.acknowledge_experimental is True
        assert cfg.log_level == "DEBUG"

    def test_headers_merge_with_defaults(self, sample_yaml_path: Path) -> None:
        headers = load_config(sample_yaml_path).server.headers
        assert headers["X-App-Name"] == "tests"
        assert headers["X-Client-Name"] == DEFAULT_HEADERS["X-Client-Name"]

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nonexistent.yaml")

    def test_env_interpolation_in_yaml(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TEST_RPC_URL", "http://localhost:8000/soroban/rpc")
        monkeypatch.setenv("TEST_ACK", "true")
        cfg_file = tmp_path / "config.yaml"
        cfg_file.write_text(
            'server:\n  url: "${TEST_RPC_URL}"\n'
            '  acknowledge_experimental: "${TEST_ACK}"\n'
        )
        cfg = load_config(cfg_file)
        assert cfg.server.url == "http://localhost:8000/soroban/rpc"
        assert cfg.server.acknowledge_experimental is True
        assert cfg.server.timeout == 30

    def test_gate_defaults_closed(self, tmp_path: Path) -> None:
        cfg_file = tmp_path / "config.yaml"
        cfg_file.write_text("server:\n  url: https://rpc.test\n")
        assert load_config(cfg_file).server.acknowledge_experimental is False

    def test_empty_file_fails_validation(self, tmp_path: Path) -> None:
        cfg_file = tmp_path / "config.yaml"
        cfg_file.write_text("")
        with pytest.raises(ValueError, match="server.url"):
            load_config(cfg_file)


class TestValidate:
    def test_non_http_url(self) -> None:
        with pytest.raises(ValueError, match="http"):
            _validate(AppConfig(server=ServerConfig(url="ftp://rpc.test")))

    def test_non_positive_timeout(self) -> None:
        with pytest.raises(ValueError, match="timeout"):
            _validate(AppConfig(server=ServerConfig(url="https://rpc.test", timeout=0)))

    def test_valid(self) -> None:
        _validate(AppConfig(server=ServerConfig(url="https://rpc.test")))

    def test_frozen(self) -> None:
        cfg = ServerConfig(url="https://rpc.test")
        with pytest.raises(AttributeError):
            cfg.url = "x"  # type: ignore[misc]
