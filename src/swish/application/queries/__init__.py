"""Application queries - read operations."""

from swish.application.queries.feed import ListFeedQuery

__all__ = ["ListFeedQuery"]
