"""Data models for feed_pages.

This module defines the core data structures for manifests, parsed feeds
and pipeline runs. Everything here is built once and never mutated.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class FeedDescriptor:
    """One manifest entry: where a feed lives and where its page goes."""

    source_url: str
    display_name: str
    output_id: str


@dataclass(frozen=True)
class Manifest:
    """The user-supplied list of feeds plus a collection title."""

    title: str
    feeds: Tuple[FeedDescriptor, ...] = ()


@dataclass(frozen=True)
class ItemModel:
    """A single feed entry. Fields are passed through verbatim."""

    title: str
    link: str
    description: str
    publish_date: str = ""


@dataclass(frozen=True)
class ChannelModel:
    """Parsed representation of one feed's metadata and items."""

    title: str
    link: str
    description: str
    items: Tuple[ItemModel, ...] = ()


class FailurePolicy(str, Enum):
    """What the pipeline does when a single feed cannot be fetched or parsed."""

    ABORT = "abort"
    SKIP = "skip"
    PLACEHOLDER = "placeholder"


class RunStatus(str, Enum):
    COMPLETED = "completed"
    PARTIAL = "partial"
    ABORTED = "aborted"


@dataclass(frozen=True)
class FeedFailure:
    """A feed whose fetch or parse failed during a run."""

    descriptor: FeedDescriptor
    error: Exception


@dataclass
class RunResult:
    """Outcome of a pipeline run."""

    status: RunStatus
    index_path: Optional[Path] = None
    pages: List[Path] = field(default_factory=list)
    failures: List[FeedFailure] = field(default_factory=list)
    error: Optional[Exception] = None
