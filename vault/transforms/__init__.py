"""
Vault Transforms
=================

Toy text obfuscation (leetspeak, vowel replacement, homoglyphs, noise).
"""
