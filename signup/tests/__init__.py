"""Test suite for the signup registration service.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - No third-party dependencies, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Tests for adapter implementations
   - In-memory repository and CLI command handler

3. fakes/: Port implementations for testing
   - FakeUserRepositoryPort with call tracking
"""
