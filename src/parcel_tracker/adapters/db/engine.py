"""Engine factory.

All engines in the tracker come from `make_engine` so that SQLite
connections are tuned the same way everywhere: foreign keys enforced, WAL
journal, NORMAL synchronous mode and in-memory temp storage. Other backends
are used as configured by their URL.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, make_url

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

SQLITE_PRAGMAS = {
    "foreign_keys": "ON",
    "journal_mode": "WAL",
    "synchronous": "NORMAL",
    "temp_store": "MEMORY",
}


def is_sqlite(url: str | URL) -> bool:
    """True if `url` selects the SQLite backend, whatever the driver."""
    return make_url(url).get_backend_name() == "sqlite"


def _apply_sqlite_pragmas(dbapi_conn: Any, _connection_record: Any) -> None:
    cursor = dbapi_conn.cursor()
    try:
        for name, value in SQLITE_PRAGMAS.items():
            cursor.execute(f"PRAGMA {name}={value};")
    finally:
        cursor.close()


def make_engine(url: str | URL, *, echo: bool = False) -> Engine:
    """Create an Engine for `url`; SQLite connections get `SQLITE_PRAGMAS`.

    No connection is opened here.

    Args:
        url: SQLAlchemy database URL.
        echo: Log every SQL statement (via the ``sqlalchemy.engine`` logger).

    Raises:
        sqlalchemy.exc.ArgumentError: If `url` cannot be parsed.
    """
    engine = create_engine(url, echo=echo)
    if is_sqlite(url):
        event.listen(engine, "connect", _apply_sqlite_pragmas)
    logger.debug("Created %s engine", engine.dialect.name)
    return engine
