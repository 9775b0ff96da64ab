"""Concrete adapters for the tracker's ports."""
