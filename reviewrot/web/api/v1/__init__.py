"""API v1."""

from reviewrot.web.api.v1.router import router

__all__ = ["router"]
