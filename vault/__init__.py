"""
Encryption Vault -- Classical Ciphers, Encodings and Hashing
=============================================================

A pedagogical library of independent text transformations: classical
ciphers (Caesar, ROT13, Vigenere), data encodings (Base64, Morse code,
Braille), PBKDF2/scrypt password hashing, a password-strength checker,
a text obfuscator and a string-only QR content analyzer.

Modules:
    - vault.ciphers: Caesar, ROT13 and the Vigenere engine
    - vault.encoders: Base64, Morse and Braille codecs
    - vault.hashing: Salted password hashing
    - vault.analyzers: Frequency scoring, password strength, QR content
    - vault.transforms: Text obfuscation
    - vault.core.engine: Logging facade used by the CLI
    - vault.core.models: Pydantic result records
    - vault.output: Rich console rendering
    - vault.cli: Click-based command-line interface

References:
    - Kahn, D. (1996). The Codebreakers. Scribner.
    - NIST SP 800-132 (2010). Recommendation for Password-Based Key Derivation.
"""

__version__ = "1.0.0"
__tool_name__ = "vault"
