"""Application services."""

from swish.application.services.feed_assembler import FeedAssembler

__all__ = ["FeedAssembler"]
