"""Jotbook — a local journal with search, sort, and JSON export/import."""

__version__ = "0.1.0"
