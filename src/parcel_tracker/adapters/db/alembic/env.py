"""Alembic environment for the tracker's packaged migrations.

The database URL is taken from, in order: ``alembic -x url=...``, the
``sqlalchemy.url`` main option (set by `config.build_alembic_config`), then
``TRACKER_DB_URL``. SQLite runs in batch mode so ALTER TABLE works there.
"""

from typing import Any

from alembic import context
from sqlalchemy import engine_from_config, pool

# registers the parcel table on the shared metadata
import parcel_tracker.adapters.parcel_store.schema  # noqa: F401 # pylint: disable=unused-import
from parcel_tracker import config as tracker_config
from parcel_tracker.adapters.db.metadata import metadata

# pylint: disable=no-member

COMPARE_OPTIONS: dict[str, Any] = {
    "target_metadata": metadata,
    "compare_type": True,
    "compare_server_default": True,
}


def database_url() -> str:
    """Pick the URL to migrate, falling back to TRACKER_DB_URL."""
    url = context.get_x_argument(as_dictionary=True).get("url")
    url = url or context.config.get_main_option(tracker_config.ALEMBIC_URL_KEY)
    return url or tracker_config.get_db_url()


def run_migrations_offline() -> None:
    """Render the migration as SQL on Alembic's output stream."""
    context.configure(
        url=database_url(),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **COMPARE_OPTIONS,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply the migration over a fresh, unpooled connection."""
    connectable = engine_from_config(
        {"sqlalchemy.url": database_url()},
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            render_as_batch=connection.dialect.name == "sqlite",
            **COMPARE_OPTIONS,
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
