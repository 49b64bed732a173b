"""Index renderer: the landing page linking to every feed page."""

from feed_pages.models.schemas import Manifest
from feed_pages.rendering.environment import get_environment


def render_index(manifest: Manifest, escape_html: bool = True) -> str:
    """Render the index page, one list entry per feed in manifest order."""
    template = get_environment(escape_html).get_template("index.html")
    return template.render(title=manifest.title, manifest=manifest)
