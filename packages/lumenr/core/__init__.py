"""Core parsing, resolution and combination pipeline for Lumenr."""
