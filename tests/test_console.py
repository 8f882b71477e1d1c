"""Tests for the shared Rich console and the result renderers."""

from shared.console import VaultConsole
from vault.core.models import OperationResult
from vault.output.console import VaultConsoleOutput


def test_messages_and_panels_are_recorded():
    con = VaultConsole(record=True)
    con.success("done")
    con.key_values("Result", {"Output": "[bold]literal[/bold]"})
    text = con.export_text()
    assert "SUCCESS: done" in text
    assert "[bold]literal[/bold]" in text


def test_table_renders_cells_verbatim():
    con = VaultConsole(record=True)
    con.table("Keys", ["Key", "Score"], [("[red]", 1.5)])
    text = con.export_text()
    assert "[red]" in text
    assert "1.5" in text


def test_result_renderer():
    con = VaultConsole(record=True)
    display = VaultConsoleOutput(con)
    display.display_result(
        OperationResult(tool="caesar", operation="encrypt", output="Khoor",
                        metadata={"shift": 3, "nested": {"x": 1}}),
    )
    text = con.export_text()
    assert "Khoor" in text
    assert "Shift" in text
    assert "Nested" not in text
