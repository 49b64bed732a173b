"""Exception hierarchy for feed_pages.

Library errors (httpx, lxml, OSError) are translated into these at the
component that talks to the library, with the original chained as the cause.
"""


class FeedPagesError(Exception):
    """Base class for all feed_pages errors."""


class TransportError(FeedPagesError):
    """A remote document could not be retrieved (DNS, connection, timeout)."""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"{url}: {message}")


class ParseError(FeedPagesError):
    """A feed document is not well-formed or lacks the rss/channel structure."""


class MalformedManifest(FeedPagesError):
    """The feed-list document is invalid as a whole."""


class WriteError(FeedPagesError):
    """A rendered page could not be persisted."""

    def __init__(self, path, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


class ConfigError(FeedPagesError):
    """Invalid configuration value."""
