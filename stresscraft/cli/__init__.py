"""Command line interface for StressCraft."""
