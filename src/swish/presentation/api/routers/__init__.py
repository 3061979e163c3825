"""API routers."""

from swish.presentation.api.routers.auth import router as auth_router
from swish.presentation.api.routers.posts import router as posts_router

__all__ = ["auth_router", "posts_router"]
