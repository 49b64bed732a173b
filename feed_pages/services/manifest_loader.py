"""Manifest loader service.

This module turns a feed-list document into a Manifest:

    <feeds title="My Feeds">
        <feed url="http://x/rss" name="X News" file="x.html"/>
    </feeds>
"""

import logging
from pathlib import Path
from typing import Optional

import httpx

from feed_pages.config import AggregatorConfig
from feed_pages.errors import MalformedManifest
from feed_pages.models.schemas import FeedDescriptor, Manifest
from feed_pages.services.fetcher import fetch
from feed_pages.services.xml_support import local_children, parse_document

logger = logging.getLogger(__name__)

REQUIRED_ATTRIBUTES = ("url", "name", "file")


def parse_manifest(data: bytes) -> Manifest:
    """Parse a feed-list document.

    Args:
        data: Raw manifest bytes

    Returns:
        Manifest with feeds in document order

    Raises:
        MalformedManifest: If the document is not well-formed, the root is not
            <feeds>, or any <feed> lacks a non-empty url, name or file
    """
    root = parse_document(data, MalformedManifest, "Manifest")

    if root.tag != "feeds":
        raise MalformedManifest(f"Expected <feeds> root element, found <{root.tag}>")

    descriptors = []
    for position, element in enumerate(local_children(root, "feed"), start=1):
        missing = [attr for attr in REQUIRED_ATTRIBUTES if not element.get(attr)]
        if missing:
            raise MalformedManifest(
                f"Feed #{position} (line {element.sourceline}) is missing "
                f"required attribute(s): {', '.join(missing)}"
            )
        descriptors.append(FeedDescriptor(
            source_url=element.get("url"),
            display_name=element.get("name"),
            output_id=element.get("file"),
        ))

    _warn_duplicate_outputs(descriptors)

    manifest = Manifest(title=root.get("title", ""), feeds=tuple(descriptors))
    logger.info(f"Loaded manifest '{manifest.title}' with {len(manifest.feeds)} feeds")
    return manifest


def _warn_duplicate_outputs(descriptors) -> None:
    seen = set()
    for descriptor in descriptors:
        if descriptor.output_id in seen:
            logger.warning(
                f"Output '{descriptor.output_id}' is used by more than one feed; "
                "the last one written wins"
            )
        seen.add(descriptor.output_id)


def is_remote(source: str) -> bool:
    return source.startswith(("http://", "https://"))


async def load_manifest(
    source: str,
    client: Optional[httpx.AsyncClient] = None,
    config: Optional[AggregatorConfig] = None,
) -> Manifest:
    """Load a manifest from a URL or a local file path.

    Raises:
        TransportError: If a remote manifest cannot be fetched
        MalformedManifest: If the document is invalid or the file unreadable
    """
    if is_remote(source):
        data = await fetch(source, client=client, config=config)
    else:
        try:
            data = Path(source).read_bytes()
        except OSError as e:
            raise MalformedManifest(f"Cannot read manifest {source}: {e}") from e

    return parse_manifest(data)
