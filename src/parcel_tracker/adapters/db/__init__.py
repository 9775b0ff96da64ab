"""Shared SQLAlchemy plumbing: engine factory, metadata, column types, migrations."""
