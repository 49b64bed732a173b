"""Shared fixtures for feed_pages tests."""

import logging

import pytest

from feed_pages.models.schemas import ChannelModel, FeedDescriptor, ItemModel, Manifest


SAMPLE_RSS = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
    <channel>
        <title>X News</title>
        <link>http://x.example/</link>
        <description>All the news from X</description>
        <item>
            <title>A</title>
            <link>http://a</link>
            <description>descA</description>
            <pubDate>Mon</pubDate>
        </item>
        <item>
            <title>B</title>
            <link>http://b</link>
            <description>descB</description>
        </item>
    </channel>
</rss>
"""

EMPTY_RSS = b"""<?xml version="1.0"?>
<rss version="2.0"><channel><title>Quiet</title><link>http://q</link><description>Nothing yet</description></channel></rss>
"""


@pytest.fixture(autouse=True)
def _restore_package_logger():
    """Undo setup_logging() changes so later caplog tests see records."""
    pkg_logger = logging.getLogger("feed_pages")
    level, handlers = pkg_logger.level, list(pkg_logger.handlers)
    yield
    pkg_logger.setLevel(level)
    pkg_logger.handlers[:] = handlers


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def descriptor():
    return FeedDescriptor(source_url="http://x/rss", display_name="X News", output_id="x.html")


@pytest.fixture
def channel():
    return ChannelModel(
        title="X News",
        link="http://x.example/",
        description="All the news from X",
        items=(
            ItemModel(title="A", link="http://a", description="descA", publish_date="Mon"),
            ItemModel(title="B", link="http://b", description="descB"),
        ),
    )


@pytest.fixture
def manifest():
    return Manifest(
        title="My Feeds",
        feeds=(
            FeedDescriptor("http://x/rss", "X News", "x.html"),
            FeedDescriptor("http://y/rss", "Y Daily", "y.html"),
            FeedDescriptor("http://z/rss", "Z Weekly", "z.html"),
        ),
    )
