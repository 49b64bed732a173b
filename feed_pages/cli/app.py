"""feed_pages command line interface.

Prompts for the manifest location and the index file name when they are not
given on the command line, then runs the aggregation pipeline.
"""

import asyncio
import sys
from typing import Optional

import click

from feed_pages.config import VALID_LOG_LEVELS, apply_overrides, load_config
from feed_pages.errors import ConfigError
from feed_pages.logging_config import setup_logging, logger
from feed_pages.models.schemas import FailurePolicy, RunResult, RunStatus
from feed_pages.pipeline import run_pipeline


def summarize(result: RunResult) -> str:
    """One-line, operator-facing summary of a run."""
    summary = (
        f"{result.status.value}: {len(result.pages)} feed pages written, "
        f"{len(result.failures)} failed"
    )
    if result.index_path is not None:
        summary += f", index at {result.index_path}"
    if result.error is not None:
        summary += f" ({result.error})"
    return summary


@click.command()
@click.argument("manifest", required=False)
@click.option("--index", "index_name", default=None,
              help="Index file name (.html is appended when missing)")
@click.option("--output-dir", type=click.Path(file_okay=False), default=None,
              help="Directory pages are written to")
@click.option("--policy", type=click.Choice([p.value for p in FailurePolicy]), default=None,
              help="What to do when a single feed fails")
@click.option("--workers", type=int, default=None,
              help="Feeds processed concurrently (skip/placeholder policies)")
@click.option("--timeout", type=float, default=None, help="HTTP timeout in seconds")
@click.option("--strict-status/--no-strict-status", default=None,
              help="Treat non-2xx HTTP responses as transport errors")
@click.option("--raw-html", is_flag=True, default=False,
              help="Insert feed text without HTML escaping")
@click.option("--config", "config_path", type=click.Path(dir_okay=False), default=None,
              help="YAML configuration file")
@click.option("--log-level", type=click.Choice(VALID_LOG_LEVELS,
              case_sensitive=False), default=None)
def main(
    manifest: Optional[str],
    index_name: Optional[str],
    output_dir: Optional[str],
    policy: Optional[str],
    workers: Optional[int],
    timeout: Optional[float],
    strict_status: Optional[bool],
    raw_html: bool,
    config_path: Optional[str],
    log_level: Optional[str],
) -> None:
    """Aggregate the RSS feeds listed in MANIFEST (URL or path) into HTML pages."""
    if manifest is None:
        manifest = click.prompt("Enter URL to feeds")
    if index_name is None:
        index_name = click.prompt("Enter the name of the index file")

    try:
        config = apply_overrides(load_config(config_path), {
            "output_dir": output_dir,
            "failure_policy": policy,
            "workers": workers,
            "timeout": timeout,
            "strict_status": strict_status,
            "escape_html": False if raw_html else None,
            "log_level": log_level,
        })
    except ConfigError as e:
        raise click.UsageError(str(e))

    setup_logging(config)
    logger.info(f"Starting {config.name} with policy {config.failure_policy.value}")

    try:
        result = asyncio.run(run_pipeline(manifest, index_name, config))
    except KeyboardInterrupt:
        logger.info("Stopped by user")
        sys.exit(1)

    click.echo(summarize(result))
    sys.exit(0 if result.status is RunStatus.COMPLETED else 1)


if __name__ == "__main__":
    main()
