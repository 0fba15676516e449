"""Attribute registry bootstrap (import side-effect)."""
from .attributes import standard  # noqa: F401
