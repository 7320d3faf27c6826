"""API routers."""

from api.routers import keywords

__all__ = ["keywords"]
