"""pastebox: disposable file/paste hosting with pluggable storage backends."""

__version__ = "0.1.0"
