"""
Vault Usage Examples
=====================

Walks through every vault module, printing intermediate values with the
shared Rich console.

Run from the project root::

    python examples/usage_examples.py
"""

from __future__ import annotations

from shared.console import VaultConsole

from vault.analyzers import password_strength, qr_content
from vault.analyzers.frequency import index_of_coincidence
from vault.ciphers import caesar, rot13, vigenere
from vault.encoders import base64_codec, braille, morse
from vault.hashing import password_hasher
from vault.transforms import obfuscator


def caesar_demo(con: VaultConsole) -> None:
    con.section("Caesar Cipher")
    encrypted = caesar.encrypt("HELLO WORLD", 3)
    con.key_values("Round trip", {
        "Plaintext": "HELLO WORLD",
        "Encrypted": encrypted,
        "Decrypted": caesar.decrypt(encrypted, 3),
    })
    candidates = caesar.brute_force("KHOOR")
    con.table(
        "Brute force (first five shifts)",
        ["Shift", "Candidate"],
        list(candidates.items())[:5],
    )


def rot13_and_base64_demo(con: VaultConsole) -> None:
    con.section("ROT13 / Base64")
    encoded = rot13.encode("HELLO WORLD")
    b64 = base64_codec.encode("HELLO WORLD")
    con.key_values("Encodings", {
        "ROT13": encoded,
        "ROT13 twice": rot13.encode(encoded),
        "Base64": b64,
        "Base64 decoded": base64_codec.decode(b64),
        "Canonical Base64": base64_codec.is_base64(b64),
    })


def vigenere_demo(con: VaultConsole) -> None:
    con.section("Vigenere Cipher")
    plaintext = "ATTACK AT DAWN, ATTACK AT DUSK, ATTACK AT NOON"
    key = "LEMON"
    ciphertext = vigenere.encrypt(plaintext, key)
    con.key_values("Encrypt -> Decrypt", {
        "Plaintext": plaintext,
        "Key": key,
        "Ciphertext": ciphertext,
        "Decrypted": vigenere.decrypt(ciphertext, key),
        "Verified": vigenere.verify(plaintext, ciphertext, key),
        "Random key": vigenere.generate_key(),
    })

    analysis = vigenere.analyze(ciphertext)
    con.key_values("Kasiski examination", {
        "Candidate lengths": analysis.key_lengths,
        "Distances": analysis.distances,
        "Index of coincidence": f"{index_of_coincidence(ciphertext):.4f}",
    })

    ranked = vigenere.brute_force(ciphertext, ["SECRET", "LEMON", "VAULT", "KEY"])
    con.table(
        "Dictionary attack",
        ["Key", "Score", "Plaintext"],
        [(r.key, f"{r.score:.1f}", r.plaintext[:30]) for r in ranked],
    )


def morse_and_braille_demo(con: VaultConsole) -> None:
    con.section("Morse / Braille")
    code = morse.text_to_morse("SOS HELP")
    cells = braille.text_to_braille("HELLO 123")
    con.key_values("Encodings", {
        "Morse": code,
        "Morse decoded": morse.morse_to_text(code),
        "Timing at 20 WPM": morse.audio_timing("SOS"),
        "Braille": cells,
        "Braille decoded": braille.braille_to_text(cells),
    })
    con.print(braille.braille_to_ascii("⠓"))


def password_demo(con: VaultConsole) -> None:
    con.section("Passwords")
    hashed = password_hasher.hash_password("correct horse battery staple")
    stored = hashed.to_storage()
    report = password_strength.check_password_strength("Pass123!")
    con.key_values("PBKDF2", {
        "Stored": stored,
        "Verify good": password_hasher.verify_password("correct horse battery staple", stored),
        "Verify bad": password_hasher.verify_password("wrong", stored),
        "Strength of 'Pass123!'": report.score,
        "Suggestions for 'abc'": "; ".join(password_strength.suggest_improvements("abc")),
    })


def obfuscation_and_qr_demo(con: VaultConsole) -> None:
    con.section("Obfuscation / QR")
    hidden = obfuscator.multi_obfuscate("Hello World")
    wifi = "WIFI:T:WPA;S:MyNetwork;P:Password123;;"
    estimate = qr_content.estimate_version("https://example.com")
    con.key_values("Results", {
        "Obfuscated": hidden,
        "Strength": obfuscator.obfuscation_strength("Hello World", hidden),
        "Leetspeak": obfuscator.to_leetspeak("Hello World"),
        "WiFi SSID": qr_content.extract_wifi(wifi).ssid,
        "Detected": qr_content.detect_content_type(wifi).primary_type,
        "QR version for URL": estimate.version,
    })


def main() -> None:
    con = VaultConsole()
    con.banner()
    caesar_demo(con)
    rot13_and_base64_demo(con)
    vigenere_demo(con)
    morse_and_braille_demo(con)
    password_demo(con)
    obfuscation_and_qr_demo(con)
    con.success("All examples completed")


if __name__ == "__main__":
    main()
