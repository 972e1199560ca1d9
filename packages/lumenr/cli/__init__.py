"""Command-line interface for Lumenr."""
