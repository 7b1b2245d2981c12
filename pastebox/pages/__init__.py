"""Static pages (help)."""

from pastebox.pages.help import render_help_page, render_help_text

__all__ = ["render_help_page", "render_help_text"]
