"""Fake implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
without real adapters:

- FakeUserRepositoryPort: In-memory user persistence with call tracking
"""

from .repository import FakeUserRepositoryPort

__all__ = ["FakeUserRepositoryPort"]
