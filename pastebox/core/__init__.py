"""Core: configuration, lifespan and exception handlers."""

from pastebox.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
