"""Feed fetcher service.

This module retrieves remote documents over HTTP and returns their raw bytes.
"""

import logging
from typing import Optional

import httpx

from feed_pages.config import AggregatorConfig, get_config
from feed_pages.errors import TransportError

logger = logging.getLogger(__name__)


def create_client(config: Optional[AggregatorConfig] = None) -> httpx.AsyncClient:
    """Create the HTTP client used for a run.

    Args:
        config: Settings providing timeout and User-Agent

    Returns:
        Unopened AsyncClient; callers scope it with ``async with``
    """
    if config is None:
        config = get_config()

    return httpx.AsyncClient(
        follow_redirects=True,
        timeout=config.timeout,
        headers={"User-Agent": config.user_agent},
    )


async def fetch(
    url: str,
    client: Optional[httpx.AsyncClient] = None,
    config: Optional[AggregatorConfig] = None,
) -> bytes:
    """Fetch a remote document.

    Non-2xx responses are returned like any other body unless
    ``config.strict_status`` is set.

    Args:
        url: Document URL
        client: Shared client; a temporary one is created when omitted
        config: Settings (defaults to the process-wide config)

    Returns:
        Raw response body

    Raises:
        TransportError: On DNS, connection or timeout failures, or on a
            non-2xx status when strict_status is enabled
    """
    if config is None:
        config = get_config()

    if client is None:
        async with create_client(config) as own_client:
            return await _get(own_client, url, config)
    return await _get(client, url, config)


async def _get(client: httpx.AsyncClient, url: str, config: AggregatorConfig) -> bytes:
    logger.info(f"Fetching {url}")

    try:
        response = await client.get(url)
    except httpx.HTTPError as e:
        logger.debug(f"Failed to fetch {url}: {e!r}")
        raise TransportError(url, str(e) or type(e).__name__) from e

    if not response.is_success:
        if config.strict_status:
            raise TransportError(url, f"HTTP status {response.status_code}")
        logger.warning(f"{url} answered HTTP {response.status_code}, parsing body anyway")

    return response.content
