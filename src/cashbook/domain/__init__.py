"""Domain layer for cashbook application."""
