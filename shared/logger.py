"""
Vault Structured Logger
========================

Provides :class:`VaultLogger`, a structured logging facade that emits
human-friendly Rich console output on stderr and, optionally, plain or
JSON-lines records to a rotating log file.

Every record carries the tool name and the current operation so that a
single log file can be filtered per tool (``caesar``, ``vigenere``, ...)
and per operation (``encrypt``, ``analyze``, ...).

Log records never contain secrets: callers pass lengths and parameters,
not keys, passwords or plaintexts.

References:
    - Turnbull, J. (2014). The Art of Monitoring. James Turnbull.
    - Python logging HOWTO. https://docs.python.org/3/howto/logging.html
    - Rich library. https://github.com/Textualize/rich
"""

from __future__ import annotations

import json
import logging
import time
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

# ---------------------------------------------------------------------------
# Rich theme consistent with VaultConsole colour palette
# ---------------------------------------------------------------------------
_LOG_THEME = Theme(
    {
        "log.level.debug": "dim cyan",
        "log.level.info": "bold bright_blue",
        "log.level.warning": "bold yellow",
        "log.level.error": "bold red",
        "log.level.critical": "bold white on red",
    }
)

_ROOT_NAMESPACE = "vault"

# Keyword fields whose values are masked before they reach a handler
_SENSITIVE_FIELDS = frozenset({
    "key", "password", "plaintext", "ciphertext", "salt", "stored", "text",
})
_MASK = "***"


# ========================== JSON Formatter =================================


class _JSONFormatter(logging.Formatter):
    """Emit each log record as a single-line JSON object.

    Output fields::

        {
          "timestamp": "...",
          "level": "INFO",
          "logger": "vault.engine",
          "message": "...",
          "tool_name": "engine",
          "operation": "vigenere.encrypt",
          "extra": { ... },
          "exc_info": "..."
        }
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for attr in ("tool_name", "operation"):
            val = getattr(record, attr, None)
            if val is not None:
                entry[attr] = val

        extra = getattr(record, "vault_extra", None)
        if extra is not None:
            entry["extra"] = extra

        if record.exc_info and record.exc_info[1] is not None:
            entry["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(entry, ensure_ascii=False, default=str)


# ========================== Rich Console Handler ===========================


class _ColorConsoleHandler(RichHandler):
    """:class:`rich.logging.RichHandler` writing to stderr with the vault theme."""

    def __init__(self, **kwargs: Any) -> None:
        console = Console(theme=_LOG_THEME, stderr=True)
        super().__init__(
            console=console,
            show_path=False,
            show_time=True,
            rich_tracebacks=True,
            tracebacks_show_locals=False,
            markup=False,
            **kwargs,
        )


# ========================== VaultLogger ====================================


class VaultLogger:
    """Structured, context-aware logger for vault tools.

    Each instance is bound to a *tool_name* and can carry a temporary
    *operation* context via a context manager.

    Usage::

        log = VaultLogger("engine", log_file="vault.log", json_logs=True)
        with log.operation("vigenere.analyze"):
            with log.timed("kasiski") as timer:
                result = analyze(ciphertext)
            log.info("Analysis done", repetitions=result.repetition_count)
        print(timer.elapsed_ms)

    Keyword arguments other than ``exc_info``, ``stack_info`` and
    ``stacklevel`` are collected into the record's ``extra`` payload.
    Values passed under secret-bearing names (``key``, ``password``,
    ``plaintext``, ...) are replaced with ``***``.

    Args:
        tool_name:       Identifying name, logged under ``vault.<tool_name>``.
        log_level:       Minimum severity (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file:        Path to the rotating log file. ``None`` disables file logging.
        json_logs:       If ``True`` the file handler emits JSON lines.
        max_bytes:       Maximum log-file size before rotation (default 10 MiB).
        backup_count:    Number of rotated backup files to keep.
        console_output:  If ``True`` attach a colour Rich console handler.
    """

    def __init__(
        self,
        tool_name: str,
        *,
        log_level: str = "INFO",
        log_file: str | Path | None = None,
        json_logs: bool = False,
        max_bytes: int = 10_485_760,
        backup_count: int = 5,
        console_output: bool = True,
    ) -> None:
        self._tool_name = tool_name
        self._operation: str | None = None

        level = getattr(logging, log_level.upper(), logging.INFO)

        self._logger = logging.getLogger(f"{_ROOT_NAMESPACE}.{tool_name}")
        self._logger.setLevel(level)
        self._logger.propagate = False

        # Prevent duplicate handlers on re-instantiation
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()

        if console_output:
            self._logger.addHandler(_ColorConsoleHandler(level=level))

        if log_file is not None:
            file_path = Path(log_file)
            file_path.parent.mkdir(parents=True, exist_ok=True)
            fh = RotatingFileHandler(
                filename=str(file_path),
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
            fh.setLevel(level)
            if json_logs:
                fh.setFormatter(_JSONFormatter())
            else:
                fh.setFormatter(
                    logging.Formatter(
                        fmt=(
                            "%(asctime)s | %(levelname)-8s | "
                            "%(name)s | %(message)s"
                        ),
                        datefmt="%Y-%m-%dT%H:%M:%S%z",
                    )
                )
            self._logger.addHandler(fh)

        # Without a sink, logging.lastResort would echo records to stderr
        if not self._logger.handlers:
            self._logger.addHandler(logging.NullHandler())

    # ------------------------------------------------------------------ #
    #  Context management -- operation scope
    # ------------------------------------------------------------------ #

    class _OperationContext:
        """Context manager that temporarily binds an operation name."""

        def __init__(self, parent: VaultLogger, operation: str) -> None:
            self._parent = parent
            self._operation = operation
            self._prev: str | None = None

        def __enter__(self) -> VaultLogger:
            self._prev = self._parent._operation
            self._parent._operation = self._operation
            return self._parent

        def __exit__(self, *exc: Any) -> None:
            self._parent._operation = self._prev

    def operation(self, name: str) -> _OperationContext:
        """Return a context manager that sets the *operation* field.

        While active, every log record will include ``operation=<name>``.
        Contexts nest; leaving one restores the previous operation.
        """
        return self._OperationContext(self, name)

    @property
    def current_operation(self) -> str | None:
        return self._operation

    # ------------------------------------------------------------------ #
    #  Log methods
    # ------------------------------------------------------------------ #

    def _enrich(self, kwargs: dict[str, Any]) -> dict[str, Any]:
        """Inject tool/operation context into the log record via *extra*."""
        extra = kwargs.pop("extra", {}) or {}

        payload: dict[str, Any] = {}
        standard_keys = {"exc_info", "stack_info", "stacklevel"}
        for key in list(kwargs):
            if key in standard_keys:
                continue
            value = kwargs.pop(key)
            payload[key] = _MASK if key in _SENSITIVE_FIELDS else value

        extra["tool_name"] = self._tool_name
        extra["operation"] = self._operation
        if payload:
            extra["vault_extra"] = payload

        kwargs["extra"] = extra
        return kwargs

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(msg, *args, **self._enrich(kwargs))

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._logger.info(msg, *args, **self._enrich(kwargs))

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._logger.warning(msg, *args, **self._enrich(kwargs))

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._logger.error(msg, *args, **self._enrich(kwargs))

    def exception(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log an ERROR-level message with full exception traceback."""
        kwargs.setdefault("exc_info", True)
        self._logger.error(msg, *args, **self._enrich(kwargs))

    # ------------------------------------------------------------------ #
    #  Timing helper
    # ------------------------------------------------------------------ #

    class _TimingContext:
        """Context manager for measuring and logging elapsed time.

        The elapsed time is frozen when the block exits, so it can be read
        after the ``with`` statement.
        """

        def __init__(self, logger_inst: VaultLogger, label: str) -> None:
            self._logger = logger_inst
            self._label = label
            self._start: float = 0.0
            self._end: float | None = None

        def __enter__(self) -> VaultLogger._TimingContext:
            self._start = time.perf_counter()
            self._end = None
            self._logger.debug("Started: %s", self._label)
            return self

        def __exit__(self, exc_type: Any, *exc: Any) -> None:
            self._end = time.perf_counter()
            if exc_type is None:
                self._logger.info(
                    "Completed: %s (%.3f ms)", self._label, self.elapsed_ms,
                    duration_ms=round(self.elapsed_ms, 3),
                )
            else:
                self._logger.debug(
                    "Aborted: %s after %.3f ms", self._label, self.elapsed_ms,
                )

        @property
        def elapsed(self) -> float:
            """Seconds between entering and leaving (or now, while inside)."""
            end = self._end if self._end is not None else time.perf_counter()
            return end - self._start

        @property
        def elapsed_ms(self) -> float:
            return self.elapsed * 1000.0

    def timed(self, label: str) -> _TimingContext:
        """Context manager that logs start / finish and elapsed time.

        Usage::

            with log.timed("scrypt hash") as timer:
                hashed = hash_password_scrypt(password)
            log.debug("took %.1f ms", timer.elapsed_ms)
        """
        return self._TimingContext(self, label)

    # ------------------------------------------------------------------ #
    #  Properties
    # ------------------------------------------------------------------ #

    @property
    def tool_name(self) -> str:
        return self._tool_name

    @property
    def underlying(self) -> logging.Logger:
        """Direct access to the stdlib :class:`logging.Logger`."""
        return self._logger
