"""Tests for the structured logger."""

import json
import logging

from shared.logger import VaultLogger


def _records(path):
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]


def test_json_records_carry_context(tmp_path):
    log_file = tmp_path / "logs" / "vault.log"
    log = VaultLogger("tests", log_level="DEBUG", log_file=log_file,
                      json_logs=True, console_output=False)

    with log.operation("vigenere.analyze"):
        assert log.current_operation == "vigenere.analyze"
        log.info("Analysis done", repetitions=3)
    assert log.current_operation is None

    (record,) = _records(log_file)
    assert record["logger"] == "vault.tests"
    assert record["tool_name"] == "tests"
    assert record["operation"] == "vigenere.analyze"
    assert record["extra"] == {"repetitions": 3}


def test_operation_contexts_nest(tmp_path):
    log = VaultLogger("nesting", console_output=False)
    with log.operation("outer"):
        with log.operation("inner"):
            assert log.current_operation == "inner"
        assert log.current_operation == "outer"


def test_timed_logs_completion(tmp_path):
    log_file = tmp_path / "vault.log"
    log = VaultLogger("timing", log_level="DEBUG", log_file=log_file,
                      json_logs=True, console_output=False)

    with log.timed("work") as timer:
        sum(range(1000))
    elapsed = timer.elapsed_ms
    assert elapsed >= 0
    assert timer.elapsed_ms == elapsed

    started, completed = _records(log_file)
    assert started["level"] == "DEBUG"
    assert completed["message"].startswith("Completed: work")
    assert completed["extra"]["duration_ms"] >= 0


def test_timed_reports_abort(tmp_path):
    log_file = tmp_path / "vault.log"
    log = VaultLogger("abort", log_level="DEBUG", log_file=log_file,
                      json_logs=True, console_output=False)
    try:
        with log.timed("boom"):
            raise RuntimeError("boom")
    except RuntimeError:
        pass
    assert _records(log_file)[-1]["message"].startswith("Aborted: boom")


def test_level_filters_records(tmp_path):
    log_file = tmp_path / "vault.log"
    log = VaultLogger("levels", log_level="WARNING", log_file=log_file, console_output=False)
    log.info("hidden")
    log.warning("shown")
    text = log_file.read_text(encoding="utf-8")
    assert "shown" in text
    assert "hidden" not in text


def test_silent_logger_has_null_sink():
    log = VaultLogger("silent", console_output=False)
    handlers = log.underlying.handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.NullHandler)


def test_reinstantiation_replaces_handlers():
    VaultLogger("dupes", console_output=True)
    log = VaultLogger("dupes", console_output=True)
    assert len(log.underlying.handlers) == 1
    assert log.tool_name == "dupes"


def test_secret_fields_are_masked(tmp_path):
    log_file = tmp_path / "vault.log"
    log = VaultLogger("masking", log_file=log_file, json_logs=True, console_output=False)
    log.info("Hashed", password="hunter2", key="LEMON", length=7)

    (record,) = _records(log_file)
    assert record["extra"] == {"password": "***", "key": "***", "length": 7}
    assert "hunter2" not in log_file.read_text(encoding="utf-8")
