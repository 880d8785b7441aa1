"""
Application wiring for the notes client core.

Public API:
- ClientContainer: Builds and caches every component with explicit injection
"""

from .container import ClientContainer

__all__ = ["ClientContainer"]
