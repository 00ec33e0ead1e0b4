"""Discovery of SQLite database schemas and their rendering as SQL statements."""

__version__ = "0.1.0"

__all__ = ["column", "discovery", "errors", "executor", "probe", "table", "types"]