"""Command-line interface for zwcodec."""
