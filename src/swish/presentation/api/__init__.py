"""Swish REST API."""

from swish.presentation.api.app import create_app

__all__ = ["create_app"]
