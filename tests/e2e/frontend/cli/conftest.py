"""Fixtures for end-to-end tests of the top-level ``tracker`` command.

A test-only ``log-demo`` subcommand emits one record per level on a project
logger and a few on a third-party logger, so verbosity flags, logger-level
overrides and the flight recorder can be observed from the outside.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from parcel_tracker.entrypoints.cli.main import tracker

# pylint: disable=redefined-outer-name

DEMO_LOGGER = "parcel_tracker.demo"
THIRD_PARTY_LOGGER = "some.thirdparty"


@click.command(name="log-demo")
def log_demo():
    """Emit one record per level, then a trailing DEBUG record."""
    logger = logging.getLogger(DEMO_LOGGER)
    third_party = logging.getLogger(THIRD_PARTY_LOGGER)

    for level in (
        logging.DEBUG,
        logging.INFO,
        logging.WARNING,
        logging.ERROR,
        logging.CRITICAL,
    ):
        name = logging.getLevelName(level).lower()
        logger.log(level, "demo %s record", name)
    third_party.debug("third-party debug record")
    third_party.info("third-party info record")
    third_party.warning("third-party warning record")
    logger.debug("demo trailing debug record")


def _unregister(group: click.Group, name: str) -> None:
    """Drop `name` from the group and from any Click-Extra help sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for section in getattr(group, "_sections", []):
        getattr(section, "commands", {}).pop(name, None)


@pytest.fixture
def cli():
    """The ``tracker`` group with ``log-demo`` attached for one test."""
    tracker.add_command(log_demo)
    try:
        yield tracker
    finally:
        _unregister(tracker, "log-demo")


@pytest.fixture(autouse=True)
def _reset_logger_levels():
    """Undo ``-L`` overrides, which persist on logger objects between runs."""
    yield
    for name in (DEMO_LOGGER, THIRD_PARTY_LOGGER, "sqlalchemy", "alembic"):
        logging.getLogger(name).setLevel(logging.NOTSET)


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated temporary working directory."""
    with runner.isolated_filesystem():
        yield
