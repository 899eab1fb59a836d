"""Command-line interface for maxrects."""
