from swish.domain.feed.aggregates.post import Post

__all__ = ["Post"]
