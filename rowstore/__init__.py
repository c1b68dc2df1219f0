"""In-memory paged row store for student records, with an interactive console."""

__version__ = "0.1.0"
__all__ = ["bitmap", "row", "table", "cli"]