"""User store adapters for persistence and querying.

- memory: process-local dict keyed by login
"""

from .memory import InMemoryUserRepository

__all__ = ["InMemoryUserRepository"]
