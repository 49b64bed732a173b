"""Data models for feed_pages."""

from .schemas import (
    ChannelModel,
    FailurePolicy,
    FeedDescriptor,
    FeedFailure,
    ItemModel,
    Manifest,
    RunResult,
    RunStatus,
)

__all__ = [
    "ChannelModel",
    "FailurePolicy",
    "FeedDescriptor",
    "FeedFailure",
    "ItemModel",
    "Manifest",
    "RunResult",
    "RunStatus",
]
