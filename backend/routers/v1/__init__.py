"""API v1 Route modules."""

from backend.routers.v1 import simulator

__all__ = ["simulator"]
