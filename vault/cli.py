"""
Vault CLI
==========

Click-based command-line interface for the Encryption Vault. Provides
subcommands for the classical ciphers, the Base64/Morse/Braille
encodings, password hashing and strength checks, text obfuscation and
QR content analysis.

Usage::

    python -m vault caesar -m encrypt "HELLO" -s 3
    python -m vault vigenere encrypt "ATTACK AT DAWN" -k LEMON
    python -m vault vigenere analyze "LXFOPVEFRNHR..."
    python -m vault morse encode "SOS"
    python -m vault password strength -p "Tr0ub4dor&3"
    python -m vault -o json qr analyze "WIFI:T:WPA;S:home;P:secret;;"

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import json
from typing import Callable, Optional, TextIO

import click

from shared.config import VaultConfig
from shared.console import VaultConsole

from vault import __version__
from vault.core.engine import VaultEngine
from vault.core.exceptions import VaultError
from vault.core.models import OperationResult
from vault.output.console import VaultConsoleOutput


_Renderer = Callable[[VaultConsoleOutput, OperationResult], None]


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a vault configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress the banner.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Log operations with timings to stderr.",
)
@click.version_option(__version__, prog_name="vault")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    quiet: bool,
    verbose: bool,
) -> None:
    """Encryption Vault -- classical ciphers, encodings and hashing.

    Encrypt, decode, hash and analyse text with pedagogical
    implementations of Caesar, ROT13, Vigenere, Base64, Morse, Braille,
    PBKDF2 and scrypt.
    """
    ctx.ensure_object(dict)

    vault_config = VaultConfig.load(config) if config else VaultConfig()
    if verbose:
        vault_config.global_settings.log_level = "DEBUG"
    ctx.obj["config"] = vault_config
    ctx.obj["output_format"] = output

    console = VaultConsole()
    ctx.obj["console"] = console
    ctx.obj["engine"] = VaultEngine(vault_config, console_logging=verbose)
    ctx.obj["display"] = VaultConsoleOutput(console)

    if not quiet and output == "console":
        console.banner(version=vault_config.global_settings.version)


def _execute(
    ctx: click.Context,
    call: Callable[[VaultEngine], OperationResult],
    render: _Renderer,
) -> None:
    """Run an engine call and emit its result in the selected format.

    Library errors are printed to stderr and end the command with exit
    status 1.
    """
    console: VaultConsole = ctx.obj["console"]
    try:
        result = call(ctx.obj["engine"])
    except (VaultError, TypeError, ValueError) as exc:
        console.error(str(exc))
        ctx.exit(1)

    if ctx.obj["output_format"] == "json":
        click.echo(json.dumps(
            result.model_dump(mode="json"),
            indent=2,
            ensure_ascii=False,
            default=str,
        ))
    else:
        render(ctx.obj["display"], result)


def _show(title: str) -> _Renderer:
    return lambda display, result: display.display_result(result, title)


def _password_option(**kwargs) -> Callable:
    return click.option(
        "--password", "-p",
        prompt=True,
        hide_input=True,
        help="Password (prompted for when omitted).",
        **kwargs,
    )


# ===================================================================== #
#  Caesar / ROT13 / Base64
# ===================================================================== #

@cli.command()
@click.argument("text")
@click.option(
    "--mode", "-m",
    type=click.Choice(["encrypt", "decrypt"]),
    default="encrypt",
    help="Direction of the shift.",
)
@click.option("--shift", "-s", type=int, default=None, help="Shift 1-25 (config default 3).")
@click.pass_context
def caesar(ctx: click.Context, text: str, mode: str, shift: Optional[int]) -> None:
    """Encrypt or decrypt TEXT with the Caesar cipher."""
    _execute(ctx, lambda e: e.caesar(mode, text, shift), _show(f"Caesar {mode}"))


@cli.command()
@click.argument("text")
@click.pass_context
def rot13(ctx: click.Context, text: str) -> None:
    """Apply ROT13 to TEXT (the same call decodes)."""
    _execute(ctx, lambda e: e.rot13(text), _show("ROT13"))


@cli.command("base64")
@click.argument("text")
@click.option(
    "--mode", "-m",
    type=click.Choice(["encode", "decode"]),
    default="encode",
)
@click.pass_context
def base64_cmd(ctx: click.Context, text: str, mode: str) -> None:
    """Encode TEXT to Base64 or decode it back to UTF-8."""
    _execute(ctx, lambda e: e.base64(mode, text), _show(f"Base64 {mode}"))


@cli.command("brute-force")
@click.argument("ciphertext")
@click.pass_context
def brute_force(ctx: click.Context, ciphertext: str) -> None:
    """Decrypt a Caesar CIPHERTEXT under every shift."""
    _execute(
        ctx,
        lambda e: e.caesar_brute_force(ciphertext),
        VaultConsoleOutput.display_caesar_candidates,
    )


# ===================================================================== #
#  Vigenere
# ===================================================================== #

@cli.group()
def vigenere() -> None:
    """Vigenere cipher and cryptanalysis."""


@vigenere.command("encrypt")
@click.argument("plaintext")
@click.option("--key", "-k", required=True, help="Alphabetic key.")
@click.pass_context
def vigenere_encrypt(ctx: click.Context, plaintext: str, key: str) -> None:
    """Encrypt PLAINTEXT with KEY."""
    _execute(ctx, lambda e: e.vigenere_encrypt(plaintext, key), _show("Vigenere encrypt"))


@vigenere.command("decrypt")
@click.argument("ciphertext")
@click.option("--key", "-k", required=True, help="Alphabetic key.")
@click.pass_context
def vigenere_decrypt(ctx: click.Context, ciphertext: str, key: str) -> None:
    """Decrypt CIPHERTEXT with KEY."""
    _execute(ctx, lambda e: e.vigenere_decrypt(ciphertext, key), _show("Vigenere decrypt"))


@vigenere.command("verify")
@click.argument("plaintext")
@click.argument("ciphertext")
@click.option("--key", "-k", required=True, help="Alphabetic key.")
@click.pass_context
def vigenere_verify(ctx: click.Context, plaintext: str, ciphertext: str, key: str) -> None:
    """Check that CIPHERTEXT decrypts to PLAINTEXT under KEY."""
    _execute(
        ctx,
        lambda e: e.vigenere_verify(plaintext, ciphertext, key),
        lambda display, result: display.display_verification(result, "Decryption"),
    )


@vigenere.command("keygen")
@click.option("--length", "-l", type=int, default=None, help="Key length (config default 8).")
@click.pass_context
def vigenere_keygen(ctx: click.Context, length: Optional[int]) -> None:
    """Generate a random uppercase key."""
    _execute(ctx, lambda e: e.vigenere_keygen(length), _show("Vigenere key"))


@vigenere.command("crack")
@click.argument("ciphertext")
@click.option(
    "--wordlist", "-w",
    type=click.File("r", encoding="utf-8"),
    default=None,
    help="File with one candidate key per line.",
)
@click.option("--limit", "-n", type=int, default=None, help="Number of candidates to show.")
@click.pass_context
def vigenere_crack(
    ctx: click.Context,
    ciphertext: str,
    wordlist: Optional[TextIO],
    limit: Optional[int],
) -> None:
    """Rank dictionary keys by how English the decryption looks."""
    words = [line.strip() for line in wordlist if line.strip()] if wordlist else None
    _execute(
        ctx,
        lambda e: e.vigenere_crack(ciphertext, words, limit),
        VaultConsoleOutput.display_crack,
    )


@vigenere.command("analyze")
@click.argument("ciphertext")
@click.option(
    "--sequence-length", "-s",
    type=int,
    default=None,
    help="Length of repeated sequences to search for (config default 3).",
)
@click.pass_context
def vigenere_analyze(ctx: click.Context, ciphertext: str, sequence_length: Optional[int]) -> None:
    """Kasiski examination of CIPHERTEXT."""
    _execute(
        ctx,
        lambda e: e.vigenere_analyze(ciphertext, sequence_length),
        VaultConsoleOutput.display_kasiski,
    )


# ===================================================================== #
#  Morse / Braille
# ===================================================================== #

@cli.group()
def morse() -> None:
    """International Morse code."""


@morse.command("encode")
@click.argument("text")
@click.option("--wpm", type=int, default=None, help="Speed for timing (config default 20).")
@click.pass_context
def morse_encode(ctx: click.Context, text: str, wpm: Optional[int]) -> None:
    """Encode TEXT as Morse code."""
    _execute(ctx, lambda e: e.morse_encode(text, wpm), VaultConsoleOutput.display_morse)


@morse.command("decode")
@click.argument("code")
@click.pass_context
def morse_decode(ctx: click.Context, code: str) -> None:
    """Decode space-separated Morse CODE ('/' between words)."""
    _execute(ctx, lambda e: e.morse_decode(code), VaultConsoleOutput.display_morse)


@morse.command("audio")
@click.argument("text")
@click.option("--frequency", "-f", type=float, default=None, help="Tone in Hz (100-2000).")
@click.option("--dot-duration", "-d", type=float, default=None, help="Dit length in ms (10-1000).")
@click.pass_context
def morse_audio(
    ctx: click.Context,
    text: str,
    frequency: Optional[float],
    dot_duration: Optional[float],
) -> None:
    """Show the tone and silence plan for playing TEXT as Morse."""
    _execute(
        ctx,
        lambda e: e.morse_audio(text, frequency, dot_duration),
        VaultConsoleOutput.display_morse_audio,
    )


@cli.group()
def braille() -> None:
    """Grade 1 Braille."""


@braille.command("encode")
@click.argument("text")
@click.pass_context
def braille_encode(ctx: click.Context, text: str) -> None:
    """Encode TEXT as Braille cells."""
    _execute(ctx, lambda e: e.braille_encode(text), VaultConsoleOutput.display_braille)


@braille.command("decode")
@click.argument("cells")
@click.pass_context
def braille_decode(ctx: click.Context, cells: str) -> None:
    """Decode Braille CELLS to text."""
    _execute(ctx, lambda e: e.braille_decode(cells), VaultConsoleOutput.display_braille)


# ===================================================================== #
#  Passwords
# ===================================================================== #

_ALGORITHMS = click.Choice(["pbkdf2", "scrypt"])


@cli.group()
def password() -> None:
    """Password hashing and strength checks."""


@password.command("hash")
@_password_option(confirmation_prompt=True)
@click.option("--algorithm", "-a", type=_ALGORITHMS, default=None)
@click.pass_context
def password_hash(ctx: click.Context, password: str, algorithm: Optional[str]) -> None:
    """Hash a password with a fresh random salt."""
    _execute(
        ctx,
        lambda e: e.password_hash(password, algorithm),
        VaultConsoleOutput.display_password_hash,
    )


@password.command("verify")
@click.argument("stored")
@_password_option()
@click.option("--algorithm", "-a", type=_ALGORITHMS, default=None)
@click.pass_context
def password_verify(
    ctx: click.Context,
    stored: str,
    password: str,
    algorithm: Optional[str],
) -> None:
    """Check a password against a STORED hash:salt:work string."""
    _execute(
        ctx,
        lambda e: e.password_verify(password, stored, algorithm),
        lambda display, result: display.display_verification(result, "Password"),
    )


@password.command("strength")
@_password_option()
@click.pass_context
def password_strength(ctx: click.Context, password: str) -> None:
    """Score a password against the composition rules."""
    _execute(
        ctx,
        lambda e: e.password_strength(password),
        VaultConsoleOutput.display_strength,
    )


# ===================================================================== #
#  Obfuscation / QR
# ===================================================================== #

@cli.command()
@click.argument("text")
@click.option(
    "--technique", "-t",
    "techniques",
    type=click.Choice(["reverse", "vowels", "leet", "shift", "random"]),
    multiple=True,
    help="Technique to apply, in order (repeatable).",
)
@click.pass_context
def obfuscate(ctx: click.Context, text: str, techniques: tuple[str, ...]) -> None:
    """Obfuscate TEXT with a chain of techniques."""
    _execute(ctx, lambda e: e.obfuscate(text, techniques), _show("Obfuscated"))


@cli.group()
def qr() -> None:
    """QR code content analysis (text payloads only)."""


@qr.command("analyze")
@click.argument("content")
@click.option(
    "--ec-level", "-e",
    type=click.Choice(["L", "M", "Q", "H"], case_sensitive=False),
    default=None,
    help="Error correction level (config default M).",
)
@click.pass_context
def qr_analyze(ctx: click.Context, content: str, ec_level: Optional[str]) -> None:
    """Classify CONTENT and estimate the QR version needed."""
    _execute(ctx, lambda e: e.qr_analyze(content, ec_level), VaultConsoleOutput.display_qr)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the Vault CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
