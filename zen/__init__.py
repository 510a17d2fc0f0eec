"""Job definitions for Python scripts, stored in SQLite and served over an HTTP JSON API."""

__version__ = "1.0.0"