"""Packaged Alembic environment and revision scripts."""
