"""Application ports (Protocols) implemented by infrastructure."""

from pastebox.application.interfaces.repositories import IPasteRepository
from pastebox.application.interfaces.storage import IObjectStore

__all__ = ["IObjectStore", "IPasteRepository"]
