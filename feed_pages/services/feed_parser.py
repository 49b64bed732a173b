"""Feed parser service.

This module decodes raw RSS bytes into a ChannelModel. Parsing is
structural: unknown elements are ignored and field text is kept verbatim.
"""

import logging

from lxml import etree

from feed_pages.errors import ParseError
from feed_pages.models.schemas import ChannelModel, ItemModel
from feed_pages.services.xml_support import (
    child_text,
    first_child,
    local_children,
    parse_document,
)

logger = logging.getLogger(__name__)


def parse_feed(data: bytes) -> ChannelModel:
    """Parse an RSS document.

    Args:
        data: Raw feed bytes as fetched

    Returns:
        ChannelModel with items in document order (possibly empty)

    Raises:
        ParseError: If the bytes are not well-formed XML, the root is not
            <rss>, or there is no <channel>
    """
    root = parse_document(data, ParseError, "Feed")

    if root.tag != "rss":
        raise ParseError(f"Expected <rss> root element, found <{root.tag}>")

    channel = first_child(root, "channel")
    if channel is None:
        raise ParseError("Feed has no <channel> element")

    items = tuple(_parse_item(item) for item in local_children(channel, "item"))

    model = ChannelModel(
        title=child_text(channel, "title"),
        link=child_text(channel, "link"),
        description=child_text(channel, "description"),
        items=items,
    )
    logger.debug(
        f"Parsed RSS {root.get('version', '?')} channel '{model.title}' with {len(items)} items"
    )
    return model


def _parse_item(item: etree._Element) -> ItemModel:
    return ItemModel(
        title=child_text(item, "title"),
        link=child_text(item, "link"),
        description=child_text(item, "description"),
        publish_date=child_text(item, "pubDate"),
    )
