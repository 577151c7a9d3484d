"""Command-line interface for precheck."""
