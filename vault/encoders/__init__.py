"""
Vault Encoders
===============

Reversible text encodings: Base64, International Morse code and
Grade 1 Braille.
"""
