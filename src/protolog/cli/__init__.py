"""Command-line interface for protolog."""
