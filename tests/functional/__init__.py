"""Tracker commands exercised as a user would run them."""
