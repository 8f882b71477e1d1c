"""
Vault Console Interface
========================

Rich-powered console abstraction providing one presentation layer for
every vault tool.

The class wraps :class:`rich.console.Console` and adds convenience methods
for banners, section headers, severity-coloured messages, key/value
panels and tables with consistent styling. Regular output goes to stdout;
errors always go to stderr so piped output stays clean.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from rich.align import Align
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

# ---------------------------------------------------------------------------
# Theme -- consistent palette across all vault output
# ---------------------------------------------------------------------------
_VAULT_THEME = Theme(
    {
        "vault.banner": "bold bright_cyan",
        "vault.section": "bold bright_magenta",
        "vault.success": "bold green",
        "vault.warning": "bold yellow",
        "vault.error": "bold red",
        "vault.info": "bold bright_blue",
        "vault.dim": "dim white",
        "vault.highlight": "bold bright_white",
        "vault.key": "bold bright_cyan",
    }
)

# ---------------------------------------------------------------------------
# ASCII banner art
# ---------------------------------------------------------------------------
_BANNER_ART = r"""
[bright_cyan]
  ██╗   ██╗ █████╗ ██╗   ██╗██╗  ████████╗
  ██║   ██║██╔══██╗██║   ██║██║  ╚══██╔══╝
  ██║   ██║███████║██║   ██║██║     ██║
  ╚██╗ ██╔╝██╔══██║██║   ██║██║     ██║
   ╚████╔╝ ██║  ██║╚██████╔╝███████╗██║
    ╚═══╝  ╚═╝  ╚═╝ ╚═════╝ ╚══════╝╚═╝
[/bright_cyan]"""

_TAGLINE = "Encryption Vault -- classical ciphers, encodings and hashing"


class VaultConsole:
    """Unified console interface for all vault tools.

    Usage::

        con = VaultConsole()
        con.banner()
        con.section("Vigenere")
        con.success("Round trip verified")
    """

    def __init__(self, *, quiet: bool = False, record: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress stdout output (errors on stderr still show).
            record: Enable Rich recording for text export.
        """
        self._console = Console(
            theme=_VAULT_THEME,
            quiet=quiet,
            record=record,
            highlight=False,
        )
        self._err_console = Console(theme=_VAULT_THEME, stderr=True, highlight=False)

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Banner / sections
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the vault ASCII-art banner with *version* beneath it."""
        subtitle = (
            f"[vault.highlight]{_TAGLINE}[/vault.highlight]\n"
            f"[vault.dim]Version: {version}[/vault.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
            border_style="bright_cyan",
            padding=(1, 2),
        )
        self._console.print(panel)

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        self._console.rule(
            f"  {title}  ",
            style="vault.section",
            characters="─",
        )
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers (severity-coloured)
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        self._console.print(
            f"[vault.success][✔] SUCCESS:[/vault.success] {escape(message)}"
        )

    def warning(self, message: str) -> None:
        self._console.print(
            f"[vault.warning][⚠] WARNING:[/vault.warning] {escape(message)}"
        )

    def error(self, message: str) -> None:
        """Print an error message to stderr, even in quiet mode."""
        self._err_console.print(
            f"[vault.error][✘] ERROR:[/vault.error] {escape(message)}"
        )

    def info(self, message: str) -> None:
        self._console.print(
            f"[vault.info][ℹ] INFO:[/vault.info] {escape(message)}"
        )

    # ------------------------------------------------------------------ #
    #  Structured display
    # ------------------------------------------------------------------ #

    def key_values(self, title: str, values: Mapping[str, Any]) -> None:
        """Render *values* as an aligned ``key: value`` panel.

        Values are printed verbatim (no markup), so ciphertext containing
        ``[`` or ``]`` is safe.
        """
        body = Text()
        width = max((len(k) for k in values), default=0)
        for idx, (key, value) in enumerate(values.items()):
            if idx:
                body.append("\n")
            body.append(f"{key.ljust(width)}  ", style="vault.key")
            body.append(str(value))
        self._console.print(Panel(body, title=title, border_style="cyan"))

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        caption: str | None = None,
        styles: Sequence[str] | None = None,
    ) -> None:
        """Render a styled Rich table.

        Args:
            title:    Table title.
            columns:  Column header labels.
            rows:     Iterable of row tuples; each element is stringified.
            caption:  Optional footer caption.
            styles:   Optional per-column Rich style strings.
        """
        tbl = Table(
            title=title,
            caption=caption,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        for idx, col_name in enumerate(columns):
            style = styles[idx] if styles and idx < len(styles) else ""
            tbl.add_column(col_name, style=style)

        for row in rows:
            tbl.add_row(*(Text(str(cell)) for cell in row))

        self._console.print(tbl)

    # ------------------------------------------------------------------ #
    #  Utility
    # ------------------------------------------------------------------ #

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Proxy to :meth:`rich.console.Console.print`."""
        self._console.print(*args, **kwargs)

    def blank(self, count: int = 1) -> None:
        for _ in range(count):
            self._console.print()

    def export_text(self) -> str:
        """Export recorded console output as plain text (requires ``record=True``)."""
        return self._console.export_text()
