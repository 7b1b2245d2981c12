"""Telemetry: logging setup."""

from pastebox.shared.telemetry.logging import setup_logging

__all__ = ["setup_logging"]
