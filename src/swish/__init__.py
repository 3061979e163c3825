"""Swish core: campus feed (posts, likes, comments) and its HTTP API."""
