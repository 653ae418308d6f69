"""HTTP API for the phrase parser."""

from .application import create_app

__all__ = ["create_app"]
