"""External adapters for the signup registration service.

This package provides implementations of the core port interfaces and
the front ends that drive the core.

Adapter Organization:

- store/: Adapters for user persistence (in-memory)
- cli/: Command-line interface for registering and looking up users
"""
