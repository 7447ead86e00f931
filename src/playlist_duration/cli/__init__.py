"""Command-line interface for playlist-duration."""
