"""Pipeline orchestration for feed_pages."""

from .orchestrator import Pipeline, process_feed, run_pipeline

__all__ = ["Pipeline", "process_feed", "run_pipeline"]
