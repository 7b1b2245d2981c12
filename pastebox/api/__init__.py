"""HTTP API: routers and dependencies."""

from pastebox.api.router import api_router

__all__ = ["api_router"]
