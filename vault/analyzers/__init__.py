"""
Vault Analyzers
================

English frequency scoring, password-strength rules and QR content
analysis.
"""
