"""Infrastructure: persistence and external storage implementations."""
