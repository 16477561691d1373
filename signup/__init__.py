"""signup: user registration with login uniqueness and password rules."""
