"""
Vault Output Module
====================

Console display for Vault operation results.
"""

from vault.output.console import VaultConsoleOutput

__all__ = ["VaultConsoleOutput"]
