"""Storage layer for feed_pages."""

from .writer import index_filename, write_page

__all__ = [
    "index_filename",
    "write_page",
]
