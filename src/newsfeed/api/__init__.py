"""API package."""

from newsfeed.api.routes import router

__all__ = [
    "router",
]
