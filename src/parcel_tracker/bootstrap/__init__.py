"""Bootstrap (composition root) for the parcel tracker.

Assembles the application at runtime: reads configuration, builds the engine,
wires the SQLAlchemy store into the parcel service.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `parcel_tracker.adapters`, `parcel_tracker.service_layer`,
  `parcel_tracker.interfaces`, `parcel_tracker.domain`, and `parcel_tracker.config`.
- Inner layers must not import `parcel_tracker.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap, build_parcel_store

__all__ = ["AppContainer", "bootstrap", "build_parcel_store"]
