"""API routes module."""
from . import health
from . import admin
from . import organizer
from . import editions

__all__ = ["health", "admin", "organizer", "editions"]
