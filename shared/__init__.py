"""
Vault Shared Module
===================

Configuration, structured logging and console presentation shared by
every Encryption Vault tool.
"""

from shared.config import VaultConfig, get_config

__all__ = ["VaultConfig", "get_config"]
