"""Shared fixtures for the vault test suite."""

from __future__ import annotations

import pytest

from shared.config import GlobalConfig, HasherConfig, VaultConfig
from vault.core.engine import VaultEngine


@pytest.fixture
def fast_config() -> VaultConfig:
    """Configuration with cheap KDF work factors."""
    return VaultConfig(
        global_settings=GlobalConfig(log_level="WARNING"),
        hasher=HasherConfig(iterations=1000, scrypt_cost=4),
    )


@pytest.fixture
def engine(fast_config: VaultConfig) -> VaultEngine:
    return VaultEngine(fast_config, console_logging=False)


@pytest.fixture
def fast_config_file(tmp_path):
    path = tmp_path / "vault.toml"
    path.write_text(
        "[hasher]\niterations = 1000\nscrypt_cost = 4\n",
        encoding="utf-8",
    )
    return path
