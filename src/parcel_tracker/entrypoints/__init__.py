"""Entry points (CLI) for the parcel tracker."""
