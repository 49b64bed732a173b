"""feed_pages - aggregate RSS feeds into static HTML pages."""

__version__ = "0.1.0"
