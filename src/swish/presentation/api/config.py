"""API configuration adapter.

Bridges the centralized swish_config settings with the API layer.
"""

from fastapi import Request

from swish_config.settings import Settings


def get_api_settings(request: Request) -> Settings:
    """Get the settings the running application was created with."""
    return request.app.state.settings
