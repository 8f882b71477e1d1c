"""
Vault Console Output
=====================

Rich-based console output formatters for Encryption Vault operation
results. Provides panels for plain transformations, ranked tables for
brute-force and dictionary attacks, a Kasiski report, a password
strength meter and a QR content breakdown.

Uses the shared :class:`~shared.console.VaultConsole` for consistent
styling across all vault tools.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Any, Optional

from rich.panel import Panel
from rich.text import Text

from shared.console import VaultConsole
from vault.core.models import (
    BruteForceResult,
    KasiskiAnalysis,
    MorseAudioConfig,
    MorseStats,
    OperationResult,
    StrengthReport,
)


# ===================================================================== #
#  Colour Maps
# ===================================================================== #

_SCORE_BANDS: tuple[tuple[int, str, str], ...] = (
    (40, "bold red", "WEAK"),
    (70, "bold yellow", "FAIR"),
    (90, "bold green", "STRONG"),
    (101, "bold bright_green", "VERY STRONG"),
)


def _score_band(score: int) -> tuple[str, str]:
    for upper, colour, label in _SCORE_BANDS:
        if score < upper:
            return colour, label
    return _SCORE_BANDS[-1][1], _SCORE_BANDS[-1][2]


class VaultConsoleOutput:
    """Console output formatters for :class:`OperationResult` records.

    Usage::

        console = VaultConsole()
        output = VaultConsoleOutput(console)
        output.display_result(engine.caesar("encrypt", "HELLO"))
        output.display_kasiski(engine.vigenere_analyze(ciphertext))
    """

    def __init__(self, console: Optional[VaultConsole] = None) -> None:
        self.console = console or VaultConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Generic
    # ------------------------------------------------------------------ #

    def display_result(self, result: OperationResult, title: Optional[str] = None) -> None:
        """Show a single-value result with its scalar metadata."""
        heading = title or f"{result.tool.title()} {result.operation}"
        values: dict[str, Any] = {"Output": result.output}
        for key, value in result.metadata.items():
            if isinstance(value, (str, int, float, bool)) or value is None:
                values[key.replace("_", " ").title()] = value
        values["Duration"] = f"{result.duration_ms:.3f} ms"
        self.console.key_values(heading, values)

    def display_verification(self, result: OperationResult, subject: str) -> None:
        if result.output:
            self.console.success(f"{subject} matches")
        else:
            self.console.warning(f"{subject} does not match")

    # ------------------------------------------------------------------ #
    #  Attacks / analysis
    # ------------------------------------------------------------------ #

    def display_caesar_candidates(self, result: OperationResult) -> None:
        self.console.section("Caesar Brute Force")
        self.console.table(
            "All 25 shifts",
            ["Shift", "Plaintext"],
            [(row["shift"], row["plaintext"]) for row in result.output],
            styles=["bold bright_cyan", ""],
        )

    def display_crack(self, result: OperationResult) -> None:
        """Ranked dictionary-attack candidates, best first."""
        self.console.section("Vigenere Dictionary Attack")
        candidates = [BruteForceResult(**row) for row in result.output]
        if not candidates:
            self.console.warning("No candidate keys could be applied")
            return
        self.console.table(
            "Best candidates",
            ["Rank", "Key", "Score", "Plaintext"],
            [
                (rank, c.key, f"{c.score:.2f}", c.plaintext)
                for rank, c in enumerate(candidates, start=1)
            ],
            caption=f"{result.metadata.get('candidates_tried', 0)} keys tried",
            styles=["dim", "bold bright_cyan", "green", ""],
        )

    def display_kasiski(self, result: OperationResult) -> None:
        """Kasiski examination with the Index of Coincidence."""
        analysis = KasiskiAnalysis(**result.output)
        self.console.section("Kasiski Examination")

        ic = result.metadata.get("index_of_coincidence", 0.0)
        self.console.key_values(
            "Summary",
            {
                "Repeated sequences": analysis.repetition_count,
                "Likely key length": analysis.likely_key_length or "unknown",
                "Index of coincidence": f"{ic:.4f}",
                "Sequence length": result.metadata.get("sequence_length"),
            },
        )

        if analysis.key_lengths:
            self.console.table(
                "Candidate key lengths",
                ["Rank", "Length"],
                list(enumerate(analysis.key_lengths, start=1)),
                styles=["dim", "bold bright_cyan"],
            )
        if analysis.distances:
            self._rich.print(
                Text("Distances: ", style="bold")
                + Text(", ".join(str(d) for d in analysis.distances))
            )

    # ------------------------------------------------------------------ #
    #  Encodings
    # ------------------------------------------------------------------ #

    def display_morse(self, result: OperationResult) -> None:
        self.display_result(result, "Morse Code")
        stats = result.metadata.get("stats")
        if stats:
            counts = MorseStats(**stats)
            self.console.table(
                "Symbols",
                ["Dots", "Dashes", "Words", "Dash/Dot"],
                [(counts.dots, counts.dashes, counts.words, counts.dot_dash_ratio)],
            )
        for warning in result.metadata.get("warnings", []):
            self.console.warning(warning)

    def display_morse_audio(self, result: OperationResult) -> None:
        plan = MorseAudioConfig(**result.output)
        self.console.key_values(
            "Morse Audio",
            {
                "Morse": result.metadata.get("morse", ""),
                "Tone": f"{plan.frequency:g} Hz",
                "Dit": f"{plan.duration:g} ms",
            },
        )
        rows = []
        for segment in plan.pattern:
            if segment.kind == "silence":
                rows.append(("silence", "", f"{segment.duration:g}"))
                continue
            symbols = "".join("." if e.kind == "dit" else "-" for e in segment.elements)
            total = sum(e.duration for e in segment.elements)
            rows.append(("character", symbols, f"{total:g}"))
        self.console.table("Segments", ["Kind", "Code", "Tone ms"], rows)

    def display_braille(self, result: OperationResult) -> None:
        self.display_result(result, "Braille")
        positions = result.metadata.get("unsupported_positions") or []
        if positions:
            self.console.warning(
                "Unsupported characters at positions: "
                + ", ".join(str(p) for p in positions)
            )

    # ------------------------------------------------------------------ #
    #  Passwords
    # ------------------------------------------------------------------ #

    def display_password_hash(self, result: OperationResult) -> None:
        record = result.metadata.get("record", {})
        work = (
            f"{record.get('iterations')} iterations"
            if record.get("iterations") is not None
            else f"cost {record.get('cost')}"
        )
        self.console.key_values(
            "Password Hash",
            {
                "Algorithm": record.get("algorithm"),
                "Work factor": work,
                "Salt": record.get("salt"),
                "Hash": record.get("hash"),
                "Stored form": result.output,
                "Duration": f"{result.duration_ms:.1f} ms",
            },
        )

    def display_strength(self, result: OperationResult) -> None:
        """Strength meter, failed rules and suggestions."""
        report = StrengthReport(**result.output)
        self.console.section("Password Strength")

        colour, label = _score_band(report.score)
        meter_width = 40
        filled = max(0, min(meter_width, int(report.score / 100 * meter_width)))

        meter = Text()
        meter.append("Score: ", style="bold")
        meter.append(f"{report.score}/100  ")
        meter.append("[", style="dim")
        meter.append("█" * filled, style=colour)
        meter.append("░" * (meter_width - filled), style="dim")
        meter.append("]  ", style="dim")
        meter.append(label, style=colour)
        self._rich.print(Panel(meter, title="Strength Meter", border_style="cyan"))

        if report.errors:
            self._rich.print(Text("Failed rules:", style="bold"))
            for error in report.errors:
                self._rich.print(Text("  ✗ ", style="red") + Text(error))

        suggestions = result.metadata.get("suggestions") or []
        if suggestions:
            self._rich.print(Text("Suggestions:", style="bold"))
            for suggestion in suggestions:
                self._rich.print(Text("  • ", style="bright_cyan") + Text(suggestion))

    # ------------------------------------------------------------------ #
    #  QR
    # ------------------------------------------------------------------ #

    def display_qr(self, result: OperationResult) -> None:
        self.console.section("QR Content Analysis")
        detection = result.output["detection"]
        analysis = result.output["analysis"]
        estimate = result.output["estimate"]

        self.console.table(
            "Detected content types",
            ["Type", "Confidence"],
            [(m["type"], f"{m['confidence']:.0%}") for m in detection["detected_types"]],
            styles=["bold bright_cyan", "green"],
        )

        summary: dict[str, Any] = {
            "Encoding mode": analysis["mode"],
            "Data bits": analysis["estimated_data_bits"],
            "EC level": result.metadata.get("ec_level"),
        }
        if estimate is not None:
            summary["Version"] = estimate["version"]
            summary["Capacity"] = estimate["available_capacity"]
            summary["Efficiency"] = f"{estimate['efficiency']}%"
        self.console.key_values("Encoding", summary)

        if "warning" in result.metadata:
            self.console.warning(result.metadata["warning"])

        payload = result.output.get("payload")
        if payload and payload.get("found"):
            fields = {
                k.replace("_", " ").title(): v
                for k, v in payload.items()
                if k != "found" and v not in (None, "")
            }
            self.console.key_values(f"{detection['primary_type'].title()} payload", fields)
