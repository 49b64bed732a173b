"""Services for feed_pages."""

from .feed_parser import parse_feed
from .fetcher import create_client, fetch
from .manifest_loader import load_manifest, parse_manifest

__all__ = [
    "create_client",
    "fetch",
    "load_manifest",
    "parse_feed",
    "parse_manifest",
]
