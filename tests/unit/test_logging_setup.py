"""Unit tests for `parcel_tracker.logging`."""

from __future__ import annotations

import logging
from logging.handlers import MemoryHandler
from pathlib import Path

import pytest
from rich.logging import RichHandler

from parcel_tracker.logging import (
    LoggingSettings,
    ThirdPartyPrefixFilter,
    config_console_handler,
    config_flight_recorder,
    configure_logging,
    log_startup,
    verbosity_level,
)

# pylint: disable=magic-value-comparison


def _record(name: str) -> logging.LogRecord:
    return logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)


@pytest.mark.parametrize(
    ("name", "prefix"),
    [
        ("parcel_tracker.adapters.db.engine", ""),
        ("sqlalchemy.engine.Engine", "[sqlalchemy]"),
        ("alembic", "[alembic]"),
    ],
)
def test_third_party_prefix(name, prefix):
    """Only records from outside the project get a bracketed prefix."""
    record = _record(name)
    assert ThirdPartyPrefixFilter().filter(record) is True
    assert record.prefix == prefix  # type: ignore[attr-defined]


def test_console_handler_levels():
    """Debug mode forces DEBUG and drops the prefix filter."""
    normal = config_console_handler(level=logging.WARNING)
    debug = config_console_handler(level=logging.WARNING, debug_mode=True)

    assert isinstance(normal, RichHandler)
    assert normal.level == logging.WARNING
    assert any(isinstance(f, ThirdPartyPrefixFilter) for f in normal.filters)
    assert debug.level == logging.DEBUG
    assert not debug.filters


def test_flight_recorder_flushes_on_warning(tmp_path: Path):
    """Buffered records reach the file once a WARNING arrives."""
    path = tmp_path / "latest.log"
    recorder = config_flight_recorder(path, capacity=10)
    assert isinstance(recorder, MemoryHandler)

    recorder.handle(_record("parcel_tracker.demo"))
    recorder.target.flush()  # type: ignore[union-attr]
    assert path.read_text(encoding="utf-8") == ""

    warning = _record("parcel_tracker.demo")
    warning.levelno, warning.levelname = logging.WARNING, "WARNING"
    recorder.handle(warning)
    target = recorder.target
    recorder.close()
    target.close()  # type: ignore[union-attr]

    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert "WARNING parcel_tracker.demo" in lines[1]


def test_log_startup_summary(caplog):
    """The first line names the version, console level and recorder state."""
    logger = logging.getLogger("parcel_tracker.test_startup")
    with caplog.at_level(logging.DEBUG, logger="parcel_tracker.test_startup"):
        log_startup(
            logger,
            "9.9.9",
            LoggingSettings(level=logging.INFO, logger_levels={"alembic": logging.ERROR}),
            handlers=[],
        )

    assert caplog.messages[0] == "TRACKER 9.9.9 (console=INFO, flight-recorder=OFF)"
    assert "Per-logger overrides: {'alembic': 'ERROR'}" in caplog.messages
    assert not any(m.startswith("Flight recorder:") for m in caplog.messages)


@pytest.mark.parametrize(
    ("verbose", "quiet", "expected"),
    [
        (0, 0, logging.WARNING),
        (1, 0, logging.INFO),
        (2, 0, logging.DEBUG),
        (5, 0, logging.DEBUG),
        (0, 1, logging.ERROR),
        (0, 4, logging.CRITICAL),
        (1, 1, logging.WARNING),
    ],
)
def test_verbosity_level(verbose, quiet, expected):
    """-v/-q shift WARNING one level each, clamped to DEBUG..CRITICAL."""
    assert verbosity_level(verbose, quiet) == expected


def test_configure_logging_installs_handlers(tmp_path: Path):
    """The root logger gets the console and recorder; overrides are applied."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    settings = LoggingSettings(
        log_path=tmp_path / "latest.log",
        flight_recorder=True,
        logger_levels={"parcel_tracker.test_configure": logging.ERROR},
    )
    try:
        handlers = configure_logging(settings)

        assert [type(h) for h in handlers] == [RichHandler, MemoryHandler]
        assert root.handlers == handlers
        assert root.level == logging.DEBUG
        assert (
            logging.getLogger("parcel_tracker.test_configure").level == logging.ERROR
        )
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
        logging.getLogger("parcel_tracker.test_configure").setLevel(logging.NOTSET)


def test_no_recorder_without_path():
    """A recorder is only attached when there is somewhere to write."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        handlers = configure_logging(LoggingSettings(flight_recorder=True))
        assert [type(h) for h in handlers] == [RichHandler]
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
