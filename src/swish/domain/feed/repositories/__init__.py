from swish.domain.feed.repositories.post_repository import PostRepository

__all__ = ["PostRepository"]
