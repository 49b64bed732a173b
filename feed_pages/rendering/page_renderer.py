"""Page renderer.

Renders one parsed feed into a standalone HTML page: a header titled by the
descriptor's output identifier, a banner linking to the channel, and a table
with one row per item in feed order.
"""

from feed_pages.models.schemas import ChannelModel, FeedDescriptor
from feed_pages.rendering.environment import get_environment


def render_feed_page(
    descriptor: FeedDescriptor,
    channel: ChannelModel,
    escape_html: bool = True,
) -> str:
    """Render the page for a single feed.

    The output is a pure function of the arguments.

    Args:
        descriptor: Manifest entry for the feed
        channel: Parsed feed
        escape_html: Escape feed text before interpolation

    Returns:
        Page text
    """
    template = get_environment(escape_html).get_template("feed_page.html")
    return template.render(title=descriptor.output_id, descriptor=descriptor, channel=channel)


def render_unavailable_page(
    descriptor: FeedDescriptor,
    reason: str,
    escape_html: bool = True,
) -> str:
    """Render the placeholder written when a feed cannot be fetched or parsed."""
    template = get_environment(escape_html).get_template("unavailable.html")
    return template.render(title=descriptor.output_id, descriptor=descriptor, reason=reason)
