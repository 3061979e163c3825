"""Feed queries."""

from swish.application.queries.feed.list_feed_query import ListFeedQuery

__all__ = ["ListFeedQuery"]
