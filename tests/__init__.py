"""Parcel tracker tests.

Suites, by directory (each test is marked with its suite name):

- unit/: one module at a time, no database files or containers.
- contract/: the `ParcelStore` behaviour, run against every backend.
- integration/: the SQLAlchemy store and migrations on real SQLite/Postgres.
- functional/: ``tracker`` commands driven through Click's test runner.
- e2e/: logging and global options of the ``tracker`` entry point.

Hypothesis tests are additionally marked ``property``, container-backed ones
``slow``.
"""
