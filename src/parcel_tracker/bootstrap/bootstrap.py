"""Wire configuration, engine, store and service together."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from parcel_tracker import config
from parcel_tracker.adapters.db.engine import make_engine
from parcel_tracker.adapters.parcel_store import SqlAlchemyParcelStore
from parcel_tracker.interfaces.parcel_store import ParcelStore
from parcel_tracker.service_layer import ParcelService

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring.

    The container owns the engine; call `close` when done with it.
    """

    engine: Engine
    store: ParcelStore
    parcel_service: ParcelService

    def close(self) -> None:
        """Release every pooled database connection."""
        self.engine.dispose()


def build_parcel_store(url: str) -> SqlAlchemyParcelStore:
    """Build a SQLAlchemy-backed parcel store for `url`."""
    return SqlAlchemyParcelStore(make_engine(url))


def bootstrap(url: str | None = None) -> AppContainer:
    """Build the application from `url`, or from `TRACKER_DB_URL` if omitted.

    Raises:
        DatabaseUrlNotSetError: If no URL is given and the env var is unset.
    """
    store = build_parcel_store(url or config.get_db_url())
    return AppContainer(
        engine=store.engine, store=store, parcel_service=ParcelService(store)
    )
