"""HTTP adapter exposing the domain modules."""

from .app import create_app

__all__ = ["create_app"]
