"""JSON API for gym-helper."""

from .app import create_app

__all__ = ["create_app"]
