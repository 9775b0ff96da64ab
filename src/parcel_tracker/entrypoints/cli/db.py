"""``tracker db``: forward-only schema management on top of Alembic.

Only commands that read or move the schema forward exist here; there is no
``downgrade`` or ``stamp``. Alembic's own output goes to stdout, notices and
prompts to stderr.

Commands that touch the database read ``TRACKER_DB_URL`` and check that the
database answers before doing anything else, so a typo in the URL is
reported as such rather than as an Alembic traceback.
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from alembic import command
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import text
from sqlalchemy.exc import ArgumentError, OperationalError

from parcel_tracker import config
from parcel_tracker.adapters.db.engine import make_engine

from .helpers import error, sanitize_url, success, warn

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

MISSING_DB_URL_MSG = (
    "TRACKER_DB_URL is not set.\n\n"
    "Set it before running this command, e.g.:\n"
    "  export TRACKER_DB_URL='sqlite+pysqlite:///tracker.db'\n"
    "  or in PowerShell:\n"
    "  $env:TRACKER_DB_URL='sqlite+pysqlite:///tracker.db'"
)

INVALID_URL_FORMAT_MSG = (
    "The value of TRACKER_DB_URL is not a valid SQLAlchemy database URL."
)

CANNOT_CONNECT_MSG = (
    "TRACKER_DB_URL is set, but the database is not reachable.\n"
    "Please ensure the database is running and the URL is correct."
)

UPGRADE_SCHEMA_WARNING = (
    "This will upgrade the database schema to the latest version.\n"
    "Please ensure you have a backup before proceeding."
)

UPGRADE_SCHEMA_INSTRUCTIONS = "Run 'tracker db upgrade' to update the schema."

verbose_option = click.option(
    "-v", "--verbose", is_flag=True, help="Pass Alembic's verbose flag through."
)


class MigrationStatus(Enum):
    """Where the database schema stands relative to the packaged head."""

    UP_TO_DATE = "up to date"
    OUT_OF_DATE = "out of date"
    UNINITIALIZED = "uninitialized"


def reachable_db_url() -> str:
    """Return ``TRACKER_DB_URL`` once a test query has gone through.

    Raises:
        click.ClickException: With guidance if the URL is missing, malformed
            or the database does not answer.
    """
    try:
        url = config.get_db_url()
    except config.DatabaseUrlNotSetError as e:
        raise click.ClickException(MISSING_DB_URL_MSG) from e

    try:
        engine = make_engine(url)
    except ArgumentError as e:
        raise click.ClickException(INVALID_URL_FORMAT_MSG) from e
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))  # pragma: no mutate
    except OperationalError as e:
        raise click.ClickException(CANNOT_CONNECT_MSG) from e
    finally:
        engine.dispose()
    return url


def schema_status(engine: Engine) -> tuple[str | None, MigrationStatus]:
    """Return the database's current revision and how it compares to head."""
    with engine.connect() as conn:
        current = MigrationContext.configure(conn).get_current_revision()
    head = ScriptDirectory.from_config(config.build_alembic_config()).get_current_head()

    if current == head:
        return current, MigrationStatus.UP_TO_DATE
    if current is None:
        return None, MigrationStatus.UNINITIALIZED
    return current, MigrationStatus.OUT_OF_DATE  # pragma: nocover


@click.group(cls=clickx.ExtraGroup)
def db() -> None:
    """Database management commands."""


@db.command()
@verbose_option
def current(verbose: bool) -> None:
    """Show the revision the database is at."""
    cfg = config.build_alembic_config(reachable_db_url(), stdout=sys.stdout)
    command.current(cfg, verbose=verbose)


@db.command()
@verbose_option
def heads(verbose: bool) -> None:
    """Show the newest revision(s) shipped with the tracker."""
    command.heads(config.build_alembic_config(stdout=sys.stdout), verbose=verbose)


@db.command()
@verbose_option
@click.option(
    "-i",
    "--indicate-current",
    is_flag=True,
    help="Mark the database's current revision (needs TRACKER_DB_URL).",
)
def history(verbose: bool, indicate_current: bool) -> None:
    """List every revision shipped with the tracker."""
    url = reachable_db_url() if indicate_current else None
    cfg = config.build_alembic_config(url, stdout=sys.stdout)
    command.history(cfg, verbose=verbose, indicate_current=indicate_current)


@db.command()
@click.option("--sql", is_flag=True, help="Print the SQL instead of running it.")
@click.option("--force", is_flag=True, help="Do not ask for confirmation.")
def upgrade(sql: bool, force: bool) -> None:
    """Bring the database schema up to the latest revision."""
    url = reachable_db_url()
    if not (force or sql):
        warn(UPGRADE_SCHEMA_WARNING)
        click.echo(f"db: {click.style(sanitize_url(url), underline=True)}", err=True)
        click.confirm("Are you sure you want to proceed?", abort=True, err=True)

    command.upgrade(
        config.build_alembic_config(url, stdout=sys.stdout), revision="head", sql=sql
    )
    if not sql:
        success("Upgrade complete!")


@db.command()
def status() -> None:
    """Check the connection and report whether the schema is current."""
    try:
        url = reachable_db_url()
    except click.ClickException as e:
        error("Cannot connect to database")
        click.echo(e.format_message(), err=True)
        sys.exit(1)

    engine = make_engine(url)
    try:
        revision, state = schema_status(engine)
    finally:
        engine.dispose()

    success("Database reachable")
    click.echo(f"Backend : {engine.dialect.name}")
    click.echo(f"URL     : {sanitize_url(url)}")
    click.echo(
        f"Schema  : {revision} ({state.value})" if revision else f"Schema  : {state.value}"
    )
    if state is not MigrationStatus.UP_TO_DATE:
        warn(UPGRADE_SCHEMA_INSTRUCTIONS)
