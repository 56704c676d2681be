"""Command-line interface for termtint."""
