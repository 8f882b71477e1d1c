"""
Vault Ciphers
==============

Classical substitution ciphers: Caesar, ROT13 and the polyalphabetic
Vigenere engine with its cryptanalysis helpers.
"""
