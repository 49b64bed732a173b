"""Command line entry point for feed_pages."""

from feed_pages.cli.app import main

__all__ = ["main"]
