"""Command implementations exposed by the create-nocdn-app CLI."""

from .create import create_project

__all__ = ["create_project"]
