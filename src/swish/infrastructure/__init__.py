"""Infrastructure adapters for the feed."""
