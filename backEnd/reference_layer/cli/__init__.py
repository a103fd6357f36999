"""Command-line interface for reference layer."""
