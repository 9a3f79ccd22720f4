"""HTTP API for template expansion."""

from .app import create_app

__all__ = ["create_app"]
