"""Lumenr - light profiles parsed from item descriptions."""

__version__ = "0.1.0"
