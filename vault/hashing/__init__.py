"""
Vault Hashing
==============

Salted password hashing with PBKDF2-HMAC-SHA256 and scrypt.
"""
