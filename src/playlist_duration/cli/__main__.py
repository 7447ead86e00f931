#!/usr/bin/env python3
"""
CLI entry point for playlist_duration.cli module.

This allows running: python -m playlist_duration.cli
"""

from .main import cli

if __name__ == "__main__":
    cli()
