"""ParcelStore adapters.

Two implementations of the same port: `SqlAlchemyParcelStore` persists to a
relational database through SQLAlchemy Core, and `InMemoryParcelStore` keeps
parcels in a dict for tests. Callers depend only on
`parcel_tracker.interfaces.parcel_store.ParcelStore`.
"""

from .in_memory import InMemoryParcelStore
from .sqlalchemy_store import SqlAlchemyParcelStore

__all__ = [
    "InMemoryParcelStore",
    "SqlAlchemyParcelStore",
]
