"""The `tracker` command-line interface."""
