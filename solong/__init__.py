"""A tile-based puzzle game: collect every item, then reach the exit, with small string and list helpers."""

__version__ = "0.1.0"