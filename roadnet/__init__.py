"""Road network model: logical addressing, coordinate frames, topology and SQLite loading."""

__version__ = "0.1.0"
__all__ = ["addressing", "geometry", "network", "roads"]