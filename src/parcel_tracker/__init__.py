"""PARCEL TRACKER

A small persistence layer for parcel delivery records. Parcels are stored in
a single relational table and reached through the `ParcelStore` port, with a
thin service layer and a command-line interface on top.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
