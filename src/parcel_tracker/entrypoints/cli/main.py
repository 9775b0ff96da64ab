"""Entry point of the ``tracker`` command.

The top-level group only sets up logging; the work happens in two subgroups:

- ``tracker db``: inspect and upgrade the database schema (forward only).
- ``tracker parcel``: register, look up, edit and delete parcels.

Examples
    $ export TRACKER_DB_URL=sqlite+pysqlite:///tracker.db
    $ tracker db upgrade --force
    $ tracker parcel register --client 1000 --address "1 Main St"
    $ tracker -v parcel advance 1
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from parcel_tracker import __version__
from parcel_tracker.logging import (
    LoggingSettings,
    configure_logging,
    log_startup,
    verbosity_level,
)

from .db import db as db_group
from .helpers import hyperlink
from .helpers.log_level_parser import parse_log_level
from .parcel import parcel as parcel_group

logger = logging.getLogger(__name__)

DEFAULT_LOG_PATH = (
    Path(user_log_dir("parcel_tracker", appauthor=False, ensure_exists=True))
    / "latest.log"
)

HELP = """Parcel tracker command-line interface.

    Keeps a record of every parcel handed over for delivery: who sent it,
    where it goes, when it was registered and how far along it is.
    """

EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('See Also:', fg='blue', bold=True, underline=True)}",
        "  SQLAlchemy URLs: "
        + hyperlink("https://docs.sqlalchemy.org/en/20/core/engines.html"),
    ]
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    epilog=EPILOG,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "-v",
    "--verbose",
    "verbose",
    count=True,
    help="Show more on the console: -v for INFO, -vv for DEBUG.",
)
@click.option(
    "-q",
    "--quiet",
    "quiet",
    count=True,
    help="Show less on the console: -q for ERROR, -qq for CRITICAL only.",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Developer mode: DEBUG console output with timestamps and source paths.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_LOG_PATH,
    envvar="TRACKER_LOG_PATH",
    show_default=True,
    show_envvar=True,
    help="File the flight recorder writes to.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    default=True,
    envvar="TRACKER_FLIGHT_RECORDER",
    show_envvar=True,
    help=(
        "Keep recent log records in memory at DEBUG level, whatever -v/-q say, "
        "and write them to --log-path as soon as a WARNING or worse is logged."
    ),
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="TRACKER_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Number of records the flight recorder keeps.",
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush",
    default=False,
    envvar="TRACKER_FORCE_FLUSH_FLIGHT_RECORDER",
    show_default=True,
    show_envvar=True,
    help="Also write the flight recorder buffer on a normal exit.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    default=("sqlalchemy=WARNING", "alembic=WARNING"),
    envvar="TRACKER_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
    help=(
        "Minimum level for one logger, as NAME=LEVEL, for both the console and "
        "the flight recorder. Repeatable, e.g. -L sqlalchemy.engine=INFO."
    ),
)
@clickx.pass_context
def tracker(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose: int,
    quiet: int,
    debug: bool,
    log_path: Path,
    flight_recorder: bool,
    flight_recorder_capacity: int,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """Parcel tracker command-line interface."""
    settings = LoggingSettings(
        level=verbosity_level(verbose, quiet),
        debug=debug,
        color=ctx.color is not False,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity,
        force_flush=force_flush,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(settings)
    log_startup(logger, __version__, settings, handlers)
    ctx.call_on_close(logging.shutdown)


tracker.add_command(db_group)
tracker.add_command(parcel_group)
