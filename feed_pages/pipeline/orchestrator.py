"""Pipeline orchestrator.

Runs LoadManifest -> RenderIndex -> {FetchFeed -> ParseFeed -> RenderPage} x N.

Under the ``abort`` policy feeds are processed one at a time in manifest
order and the first fetch or parse failure ends the run. Under ``skip`` and
``placeholder`` each feed fails on its own and feeds may run concurrently,
bounded by ``config.workers``. Manifest and write failures are always fatal.
Pages already written are left in place when a run aborts.
"""

import asyncio
import logging
from pathlib import Path
from typing import List, Optional

import httpx

from feed_pages.config import AggregatorConfig, get_config
from feed_pages.errors import (
    FeedPagesError,
    ParseError,
    TransportError,
    WriteError,
)
from feed_pages.models.schemas import (
    FailurePolicy,
    FeedDescriptor,
    FeedFailure,
    Manifest,
    RunResult,
    RunStatus,
)
from feed_pages.rendering import render_feed_page, render_index, render_unavailable_page
from feed_pages.services.feed_parser import parse_feed
from feed_pages.services.fetcher import create_client, fetch
from feed_pages.services.manifest_loader import load_manifest
from feed_pages.storage.writer import index_filename, write_page

logger = logging.getLogger(__name__)

FEED_ERRORS = (TransportError, ParseError)


async def process_feed(
    descriptor: FeedDescriptor,
    client: httpx.AsyncClient,
    config: AggregatorConfig,
) -> Path:
    """Fetch, parse, render and write the page for one feed.

    Raises:
        TransportError: If the feed cannot be fetched
        ParseError: If the feed document is invalid
        WriteError: If the page cannot be written
    """
    data = await fetch(descriptor.source_url, client=client, config=config)
    channel = parse_feed(data)
    logger.info(f"{descriptor.display_name}: {len(channel.items)} items")

    page = render_feed_page(descriptor, channel, escape_html=config.escape_html)
    return await asyncio.to_thread(write_page, config.output_dir, descriptor.output_id, page)


class Pipeline:
    """One aggregation run over a manifest."""

    def __init__(self, config: Optional[AggregatorConfig] = None, client: Optional[httpx.AsyncClient] = None):
        self.config = config or get_config()
        self._client = client
        self.pages: List[Path] = []
        self.failures: List[FeedFailure] = []

    async def run(self, manifest_source: str, index_name: str) -> RunResult:
        """Run the whole pipeline.

        Args:
            manifest_source: Manifest URL or local path
            index_name: Index file name (``.html`` appended when missing)

        Returns:
            RunResult; errors are reported there rather than raised
        """
        self.pages = []
        self.failures = []

        if self._client is not None:
            return await self._run(self._client, manifest_source, index_name)

        async with create_client(self.config) as client:
            return await self._run(client, manifest_source, index_name)

    async def _run(self, client: httpx.AsyncClient, manifest_source: str, index_name: str) -> RunResult:
        index_path = None
        try:
            manifest = await load_manifest(manifest_source, client=client, config=self.config)

            index_html = render_index(manifest, escape_html=self.config.escape_html)
            index_path = await asyncio.to_thread(
                write_page, self.config.output_dir, index_filename(index_name), index_html
            )

            if self.config.failure_policy is FailurePolicy.ABORT:
                await self._run_sequential(client, manifest)
            else:
                await self._run_pooled(client, manifest)
        except FeedPagesError as e:
            logger.error(f"Run aborted: {e}")
            return RunResult(
                status=RunStatus.ABORTED,
                index_path=index_path,
                pages=list(self.pages),
                failures=list(self.failures),
                error=e,
            )

        status = RunStatus.PARTIAL if self.failures else RunStatus.COMPLETED
        logger.info(
            f"Run {status.value}: {len(self.pages)} pages written, {len(self.failures)} feeds failed"
        )
        return RunResult(
            status=status,
            index_path=index_path,
            pages=list(self.pages),
            failures=list(self.failures),
        )

    async def _run_sequential(self, client: httpx.AsyncClient, manifest: Manifest) -> None:
        if self.config.workers > 1:
            logger.info("abort policy processes feeds sequentially; ignoring workers setting")

        for descriptor in manifest.feeds:
            try:
                self.pages.append(await process_feed(descriptor, client, self.config))
            except FEED_ERRORS as e:
                self.failures.append(FeedFailure(descriptor, e))
                raise

    async def _run_pooled(self, client: httpx.AsyncClient, manifest: Manifest) -> None:
        semaphore = asyncio.Semaphore(self.config.workers)

        async def worker(descriptor: FeedDescriptor) -> None:
            async with semaphore:
                await self._process_isolated(client, descriptor)

        tasks = [asyncio.create_task(worker(d)) for d in manifest.feeds]
        try:
            await asyncio.gather(*tasks)
        except WriteError:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

    async def _process_isolated(self, client: httpx.AsyncClient, descriptor: FeedDescriptor) -> None:
        try:
            self.pages.append(await process_feed(descriptor, client, self.config))
            return
        except FEED_ERRORS as e:
            logger.error(f"Skipping feed {descriptor.display_name}: {e}")
            self.failures.append(FeedFailure(descriptor, e))
            reason = str(e)

        if self.config.failure_policy is FailurePolicy.PLACEHOLDER:
            page = render_unavailable_page(descriptor, reason, escape_html=self.config.escape_html)
            self.pages.append(
                await asyncio.to_thread(write_page, self.config.output_dir, descriptor.output_id, page)
            )


async def run_pipeline(
    manifest_source: str,
    index_name: str,
    config: Optional[AggregatorConfig] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> RunResult:
    """Run the aggregation pipeline once. See Pipeline.run."""
    return await Pipeline(config, client).run(manifest_source, index_name)
