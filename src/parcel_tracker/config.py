"""Runtime configuration.

The tracker has a single required setting, the SQLAlchemy database URL,
read from ``TRACKER_DB_URL``. Migrations ship inside the package, so the
Alembic configuration is built in code rather than from an ``alembic.ini``.
"""

import os
import sys
from importlib.resources import files
from typing import TextIO

from alembic.config import Config

DB_URL_ENV_VAR = "TRACKER_DB_URL"  # pragma: no mutate

ALEMBIC_URL_KEY = "sqlalchemy.url"  # pragma: no mutate
MIGRATIONS_PACKAGE = "parcel_tracker.adapters.db.alembic"  # pragma: no mutate


class DatabaseUrlNotSetError(Exception):
    """``TRACKER_DB_URL`` is unset or empty."""


def get_db_url() -> str:
    """Return ``TRACKER_DB_URL``.

    Raises:
        DatabaseUrlNotSetError: If the variable is missing or empty.
    """
    url = os.environ.get(DB_URL_ENV_VAR, "")
    if not url:
        raise DatabaseUrlNotSetError(f"{DB_URL_ENV_VAR} is not set")
    return url


def build_alembic_config(
    db_url: str | None = None, stdout: TextIO = sys.stdout
) -> Config:
    """Alembic `Config` for the packaged migrations.

    Args:
        db_url: Database to migrate. May be omitted for commands that only
            read the scripts (``heads``, ``history``).
        stdout: Where Alembic prints its status lines.
    """
    cfg = Config(stdout=stdout)
    cfg.set_main_option("script_location", str(files(MIGRATIONS_PACKAGE)))
    if db_url is not None:
        cfg.set_main_option(ALEMBIC_URL_KEY, db_url)
    return cfg
