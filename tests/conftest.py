"""Shared test fixtures."""
from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from soroban_rpc.config import ServerConfig
from tests.xdr_samples import FakeTransport


# ---------------------------------------------------------------------------
# Fake transport
# ---------------------------------------------------------------------------


@pytest.fixture()
def fake_transport() -> FakeTransport:
    return FakeTransport()


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def server_config() -> ServerConfig:
    return ServerConfig(
        url="https://soroban-testnet.example.com",
        timeout=10,
        acknowledge_experimental=True,
    )


@pytest.fixture()
def gated_server_config() -> ServerConfig:
    return ServerConfig(url="https://soroban-testnet.example.com")


SAMPLE_YAML = textwrap.dedent("""\
    server:
      url: "https://soroban-testnet.example.com"
      timeout: 10
      acknowledge_experimental: true
      headers:
        X-App-Name: tests
    log_level: debug
""")


@pytest.fixture()
def sample_yaml_path(tmp_path: Path) -> Path:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(SAMPLE_YAML)
    return cfg_file
