"""Command line interface for cashbook."""
