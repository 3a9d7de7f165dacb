"""People API: CRUD over persons kept in a single JSON file."""

__version__ = "1.0.0"
