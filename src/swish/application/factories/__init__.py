"""Application factories for repository access."""

from swish.application.factories.repository_factory import RepositoryFactory

__all__ = ["RepositoryFactory"]
