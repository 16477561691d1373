"""Command-line interface adapters.

Provides CLI commands for the registration service:
- register: Create a new user
- get: Look up a user by login
- list: Show all registered users
"""
